import datetime

from flyout.components.data_table import DataTable
from flyout.components.empty_state import EmptyState


def test_key_value_table():
    html = DataTable({"name": "Widget", "count": 3}).render()
    assert html == (
        '<table class="wp-flyout-data-table wp-list-table widefat fixed striped">'
        "<thead><tr><th>Key</th><th>Value</th></tr></thead><tbody>"
        "<tr><td><strong>name</strong></td><td><code>Widget</code></td></tr>"
        "<tr><td><strong>count</strong></td><td><code>3</code></td></tr>"
        "</tbody></table>"
    )


class TestValueFormatting:
    def test_none_uses_empty_text(self):
        assert "<code>—</code>" in DataTable({"note": None}).render()
        assert "<code>n/a</code>" in DataTable({"note": None}, empty_text="n/a").render()

    def test_booleans(self):
        html = DataTable({"active": True, "deleted": False}).render()
        assert "<code>Yes</code>" in html
        assert "<code>No</code>" in html

    def test_zero_is_a_value(self):
        assert "<code>0</code>" in DataTable({"retries": 0}).render()

    def test_nested_values_as_pretty_json(self):
        html = DataTable({"settings": {"mode": "live", "limits": [1, 2]}}).render()
        assert (
            "<code>{\n    &quot;mode&quot;: &quot;live&quot;,\n    &quot;limits&quot;: [\n"
            "        1,\n        2\n    ]\n}</code>"
        ) in html

    def test_json_handles_dates(self):
        html = DataTable({"dates": [datetime.date(2024, 3, 1)]}).render()
        assert "&quot;2024-03-01&quot;" in html

    def test_nested_values_as_dump(self):
        html = DataTable({"settings": {"mode": "live"}}, format_json=False).render()
        assert "<code>{&#x27;mode&#x27;: &#x27;live&#x27;}</code>" in html

    def test_unserialisable_values_fall_back_to_dump(self):
        html = DataTable({"tags": [{1, 2}]}).render()
        assert "<code>[{1, 2}]</code>" in html

    def test_values_are_escaped(self):
        html = DataTable({"<key>": "<b>bold</b>"}).render()
        assert "<strong>&lt;key&gt;</strong>" in html
        assert "<code>&lt;b&gt;bold&lt;/b&gt;</code>" in html


class TestEmpty:
    def test_default_empty_text(self):
        assert DataTable().render() == "<p>—</p>"

    def test_hidden_when_show_empty_is_off(self):
        assert DataTable({}, show_empty=False).render() == ""

    def test_delegates_to_empty_state(self):
        empty_state = EmptyState(id="no-meta", title="No metadata")
        table = DataTable().with_empty_state(empty_state)
        assert table.render() == empty_state.render()
        assert 'id="no-meta"' in table.render()


def test_properties_table():
    html = DataTable.properties({"Color": "Red"}).render()
    assert html.startswith('<table class="properties-table wp-list-table widefat fixed striped">')
    assert "<th>Property</th>" in html
    assert "<td>Red</td>" in html
    assert "<code>" not in html


def test_metadata_table():
    html = DataTable.metadata({"_sku": "W-1"}).render()
    assert html.startswith('<table class="metadata-table wp-list-table widefat fixed striped">')
    assert "<code>W-1</code>" in html


def test_partial_headers_are_filled_in():
    html = DataTable({"a": 1}, headers=("Field",)).render()
    assert "<th>Field</th><th>Value</th>" in html


def test_add_row_returns_new_table():
    table = DataTable({"a": 1})
    updated = table.add_row("b", 2)
    assert "<strong>b</strong>" not in table.render()
    assert "<strong>b</strong>" in updated.render()


def test_quick():
    assert DataTable.quick({"a": 1}) == DataTable({"a": 1}).render()
    assert DataTable.quick({}) == "<p>—</p>"


def test_list_data_is_keyed_by_position():
    html = DataTable(["alpha", "beta"]).render()
    assert "<tr><td><strong>0</strong></td><td><code>alpha</code></td></tr>" in html
    assert "<tr><td><strong>1</strong></td><td><code>beta</code></td></tr>" in html


def test_self_referencing_values_fall_back_to_dump():
    loop = []
    loop.append(loop)
    html = DataTable({"loop": loop}).render()
    assert "Recursion on list" in html
