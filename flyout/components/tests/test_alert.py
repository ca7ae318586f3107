import pytest

from flyout.components.alert import Alert, AlertAction, AlertType
from flyout.utils.exceptions import ComponentConfigError


def test_default_alert():
    assert Alert("Saved").render() == (
        '<div class="wp-flyout-alert alert-info" role="alert"><div class="alert-content-wrapper">'
        '<div class="alert-icon"><span class="dashicons dashicons-info"></span></div>'
        '<div class="alert-content"><div class="alert-message">Saved</div></div>'
        "</div></div>"
    )


@pytest.mark.parametrize(
    "factory,alert_type,icon",
    [
        (Alert.success, "success", "yes-alt"),
        (Alert.info, "info", "info"),
        (Alert.warning, "warning", "warning"),
        (Alert.error, "error", "dismiss"),
    ],
)
def test_named_constructors(factory, alert_type, icon):
    html = factory("Message").render()
    assert f'class="wp-flyout-alert alert-{alert_type}"' in html
    assert f"dashicons-{icon}" in html


def test_explicit_icon_overrides_type_icon():
    assert "dashicons-star-filled" in Alert.success("Nice").icon("star-filled").render()
    assert "alert-icon" not in Alert("No icon", icon="").render()


def test_dismissible():
    html = Alert.warning("Careful").dismissible().render()
    assert 'class="wp-flyout-alert alert-warning is-dismissible"' in html
    assert (
        '<button type="button" class="alert-dismiss" data-action="dismiss-alert" aria-label="Dismiss alert">'
        '<span class="dashicons dashicons-no-alt"></span></button>'
    ) in html


def test_banner_and_inline():
    assert "alert-banner" in Alert("Wide").banner().render()
    assert "alert-banner" not in Alert("Wide").banner().inline().render()


def test_mutators_do_not_change_the_original():
    alert = Alert.info("Heads up")
    dismissible = alert.dismissible().banner()
    assert "is-dismissible" not in alert.render()
    assert "alert-banner" not in alert.render()
    assert "is-dismissible" in dismissible.render()


def test_actions():
    html = (
        Alert.error("Upload failed")
        .action("Retry", "/retry/", "retry-upload", icon="update")
        .action("Help", "https://example.com/help", class_name="button")
        .render()
    )
    assert (
        '<div class="alert-actions">'
        '<a href="/retry/" class="button-link" data-action="retry-upload">'
        '<span class="dashicons dashicons-update"></span>Retry</a>'
        '<a href="https://example.com/help" class="button">Help</a>'
        "</div>"
    ) in html


def test_actions_from_config():
    alert = Alert("Check", actions=[{"text": "Open", "url": "/open/", "class": "button"}])
    assert alert.config.actions == (AlertAction(text="Open", url="/open/", class_name="button"),)
    assert '<a href="/open/" class="button">Open</a>' in alert.render()


def test_unsafe_action_url():
    assert '<a href="" class="button-link">Click</a>' in Alert("x").action("Click", "javascript:alert(1)").render()


def test_unknown_action_option():
    with pytest.raises(ComponentConfigError):
        Alert("x").action("Click", colour="red")


def test_message_is_sanitized():
    html = Alert("<em>Heads up</em><script>bad()</script>").render()
    assert '<div class="alert-message"><em>Heads up</em></div>' in html


def test_unknown_type_falls_back_to_info(caplog):
    alert = Alert("Odd", type="fatal")
    assert alert.config.type == AlertType.info
    assert "alert-info" in alert.render()
    assert "unknown type 'fatal'" in caplog.text


def test_quick():
    assert Alert.quick("Oops", "error") == Alert.error("Oops").render()


def test_render_is_idempotent():
    alert = Alert.success("Done").dismissible().action("Undo", "#", "undo")
    assert alert.render() == alert.render()
