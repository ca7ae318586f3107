import pytest

from flyout.components.status_indicator import ServiceStatus, StatusIndicator
from flyout.utils.exceptions import ComponentConfigError


def test_default_indicator():
    assert StatusIndicator().render() == (
        '<div class="wp-flyout-status-indicator status-success">'
        '<div class="status-header">'
        '<div class="status-icon"><span class="status-pulse"></span>'
        '<span class="dashicons dashicons-yes-alt"></span></div>'
        '<div class="status-info"><h4 class="status-title">System Status</h4>'
        '<p class="status-label">Operational</p></div>'
        "</div></div>"
    )


@pytest.mark.parametrize(
    "status,color,icon,label",
    [
        ("operational", "success", "yes-alt", "Operational"),
        ("degraded", "warning", "warning", "Degraded Performance"),
        ("down", "error", "no-alt", "System Down"),
        ("maintenance", "info", "admin-tools", "Under Maintenance"),
    ],
)
def test_status_display(status, color, icon, label):
    html = StatusIndicator(status=status).render()
    assert f'class="wp-flyout-status-indicator status-{color}"' in html
    assert f"dashicons-{icon}" in html
    assert f'<p class="status-label">{label}</p>' in html


def test_pulse_only_while_operational():
    assert "status-pulse" not in StatusIndicator(status="down", show_pulse=True).render()
    assert "status-pulse" not in StatusIndicator(status=ServiceStatus.degraded).render()
    assert "status-pulse" not in StatusIndicator(show_pulse=False).render()


def test_no_icon():
    assert "status-icon" not in StatusIndicator(show_icon=False).render()


def test_message_and_details():
    html = StatusIndicator.degraded(
        "API", "Responses are slow", {"Region": "eu-west", "Latency": "<900ms>"}
    ).render()
    assert '<h4 class="status-title">API</h4>' in html
    assert '<p class="status-message">Responses are slow</p>' in html
    assert (
        '<div class="status-details">'
        '<div class="status-detail-item"><span class="detail-label">Region:</span> '
        '<span class="detail-value">eu-west</span></div>'
        '<div class="status-detail-item"><span class="detail-label">Latency:</span> '
        '<span class="detail-value">&lt;900ms&gt;</span></div>'
        "</div>"
    ) in html


def test_details_hidden_unless_enabled():
    html = StatusIndicator(details={"Region": "eu-west"}).render()
    assert "status-details" not in html


def test_down():
    html = StatusIndicator.down("Checkout", "Payments are failing").render()
    assert 'class="wp-flyout-status-indicator status-error"' in html
    assert "status-pulse" not in html
    assert "status-details" not in html


def test_maintenance():
    html = StatusIndicator.maintenance("Database", "Upgrading", estimated="2 hours").render()
    assert 'class="wp-flyout-status-indicator status-info"' in html
    assert '<span class="detail-label">Estimated Completion:</span>' in html
    assert '<span class="detail-value">2 hours</span>' in html
    assert "status-details" not in StatusIndicator.maintenance("Database", "Upgrading").render()


def test_operational_keeps_default_title():
    assert '<h4 class="status-title">System Status</h4>' in StatusIndicator.operational().render()


def test_unknown_status_falls_back_to_operational(caplog):
    indicator = StatusIndicator(status="exploded")
    assert indicator.config.status == ServiceStatus.operational
    assert "status-success" in indicator.render()
    assert "unknown status 'exploded'" in caplog.text


def test_unknown_status_in_strict_mode(settings):
    settings.FLYOUT_STRICT_CONFIG = True
    with pytest.raises(ComponentConfigError):
        StatusIndicator(status="exploded")


def test_quick():
    assert StatusIndicator.quick("down", "API") == StatusIndicator(status="down", title="API").render()


@pytest.mark.filterwarnings("error::DeprecationWarning", "error::PendingDeprecationWarning")
def test_pulse_renders_without_deprecation_warnings():
    assert '<span class="status-pulse"></span>' in StatusIndicator().render()
