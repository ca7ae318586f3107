from dataclasses import dataclass

from django.db import models
from django.utils.html import format_html

from flyout.components.base import Component, coerce_choice


class HeadingTag(models.TextChoices):
    h1 = "h1", "h1"
    h2 = "h2", "h2"
    h3 = "h3", "h3"
    h4 = "h4", "h4"
    h5 = "h5", "h5"
    h6 = "h6", "h6"


@dataclass(frozen=True)
class HeadingConfig:
    class_name: str = "wp-flyout-heading"
    id: str = ""


class Heading(Component):
    """A single h1-h6 element. Tags outside that range render as h3."""

    config_class = HeadingConfig

    def __init__(self, text, tag=HeadingTag.h3, config=None, **kwargs):
        super().__init__(config, **kwargs)
        self.text = text
        self.tag = coerce_choice("Heading", "tag", tag, HeadingTag, HeadingTag.h3)

    @classmethod
    def h1(cls, text):
        return cls(text, HeadingTag.h1)

    @classmethod
    def h2(cls, text):
        return cls(text, HeadingTag.h2)

    @classmethod
    def h3(cls, text):
        return cls(text, HeadingTag.h3)

    @classmethod
    def h4(cls, text):
        return cls(text, HeadingTag.h4)

    @classmethod
    def h5(cls, text):
        return cls(text, HeadingTag.h5)

    @classmethod
    def h6(cls, text):
        return cls(text, HeadingTag.h6)

    @classmethod
    def quick(cls, text, tag=HeadingTag.h3):
        return cls(text, tag).render()

    def render(self):
        attrs = format_html('class="{}"', self.context.attr(self.config.class_name))
        if self.config.id:
            attrs = format_html('{} id="{}"', attrs, self.context.attr(self.config.id))
        return format_html(
            "<{tag} {attrs}>{text}</{tag}>",
            tag=str(self.tag),
            attrs=attrs,
            text=self.context.text(self.text),
        )
