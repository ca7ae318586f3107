import json
import pprint
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from django.core.serializers.json import DjangoJSONEncoder
from django.utils.html import format_html, format_html_join

from flyout.components.base import Component, EmptyValueFormatterMixin
from flyout.utils.formatting import EMPTY_TEXT

DEFAULT_HEADERS = ("Key", "Value")


def to_json_compatible(value):
    if isinstance(value, Mapping):
        return {key: to_json_compatible(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [to_json_compatible(item) for item in value]
    return value


@dataclass(frozen=True)
class DataTableConfig:
    headers: tuple = DEFAULT_HEADERS
    class_name: str = "wp-flyout-data-table wp-list-table widefat fixed striped"
    show_code: bool = True  # wrap values in <code>
    empty_text: str = EMPTY_TEXT
    format_json: bool = True
    show_empty: bool = True
    empty_state: Any = None  # component rendered instead of the table when there are no rows


class DataTable(EmptyValueFormatterMixin, Component):
    """Two column key/value table."""

    config_class = DataTableConfig

    def __init__(self, data=None, config=None, **kwargs):
        super().__init__(config, **kwargs)
        if data is not None and not isinstance(data, Mapping):
            data = dict(enumerate(data))
        self.data = dict(data or {})

    @classmethod
    def metadata(cls, metadata):
        return cls(
            metadata,
            headers=("Key", "Value"),
            show_code=True,
            class_name="metadata-table wp-list-table widefat fixed striped",
        )

    @classmethod
    def properties(cls, properties):
        return cls(
            properties,
            headers=("Property", "Value"),
            show_code=False,
            class_name="properties-table wp-list-table widefat fixed striped",
        )

    @classmethod
    def quick(cls, data):
        return cls(data).render()

    def add_row(self, key, value):
        clone = self._replace()
        clone.data = {**self.data, key: value}
        return clone

    def with_empty_state(self, empty_state):
        return self._replace(empty_state=empty_state)

    def render(self):
        if not self.data:
            return self.render_empty()

        headers = list(self.config.headers or ())[:2]
        key_header, value_header = headers + list(DEFAULT_HEADERS[len(headers) :])
        rows = format_html_join(
            "",
            "<tr><td><strong>{}</strong></td><td>{}</td></tr>",
            ((self.context.text(key), self.render_value(value)) for key, value in self.data.items()),
        )
        return format_html(
            '<table class="{}"><thead><tr><th>{}</th><th>{}</th></tr></thead><tbody>{}</tbody></table>',
            self.context.attr(self.config.class_name),
            self.context.text(key_header),
            self.context.text(value_header),
            rows,
        )

    def render_empty(self):
        if self.config.empty_state is not None:
            return self.config.empty_state.render()
        if not self.config.show_empty:
            return ""
        return format_html("<p>{}</p>", self.context.text(self.config.empty_text))

    def render_value(self, value):
        text = self.context.text(self.format_table_value(value))
        if self.config.show_code:
            return format_html("<code>{}</code>", text)
        return text

    def format_table_value(self, value):
        if value is None:
            return self.config.empty_text

        if isinstance(value, bool):
            return self.format_boolean(value)

        if isinstance(value, Mapping | list | tuple):
            if self.config.format_json:
                try:
                    return json.dumps(to_json_compatible(value), indent=4, cls=DjangoJSONEncoder, ensure_ascii=False)
                except (TypeError, ValueError, RecursionError):
                    # not JSON serialisable or self referencing, fall back to the dump
                    pass
            return pprint.pformat(value)

        return self.format_value(value, self.config.empty_text)
