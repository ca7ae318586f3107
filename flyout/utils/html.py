"""
HTML helpers shared by every component.

All escaping that a component performs goes through a RenderContext, which wraps the
escaping and translation functions provided by Django. A different context can be
configured with the FLYOUT_RENDER_CONTEXT setting or passed to a component directly.
"""
import re
from html.parser import HTMLParser

from django.conf import settings
from django.utils.html import conditional_escape, escape, format_html
from django.utils.module_loading import import_string
from django.utils.safestring import mark_safe
from django.utils.translation import gettext

DEFAULT_RENDER_CONTEXT = "flyout.utils.html.RenderContext"

ALLOWED_PROTOCOLS = (
    "http",
    "https",
    "ftp",
    "ftps",
    "mailto",
    "news",
    "irc",
    "gopher",
    "nntp",
    "feed",
    "telnet",
    "mms",
    "rtsp",
    "sms",
    "svn",
    "tel",
    "fax",
    "xmpp",
    "webcal",
    "urn",
)

# tag -> attributes allowed on it, on top of GLOBAL_ATTRIBUTES
ALLOWED_TAGS = {
    "a": {"href", "target", "rel", "name"},
    "abbr": set(),
    "b": set(),
    "blockquote": {"cite"},
    "br": set(),
    "code": set(),
    "del": {"datetime"},
    "div": set(),
    "em": set(),
    "h1": set(),
    "h2": set(),
    "h3": set(),
    "h4": set(),
    "h5": set(),
    "h6": set(),
    "hr": set(),
    "i": set(),
    "img": {"src", "alt", "width", "height"},
    "ins": {"datetime"},
    "kbd": set(),
    "li": set(),
    "mark": set(),
    "ol": {"start"},
    "p": set(),
    "pre": set(),
    "q": {"cite"},
    "s": set(),
    "small": set(),
    "span": set(),
    "strong": set(),
    "sub": set(),
    "sup": set(),
    "table": set(),
    "tbody": set(),
    "td": {"colspan", "rowspan"},
    "th": {"colspan", "rowspan", "scope"},
    "thead": set(),
    "tr": set(),
    "u": set(),
    "ul": set(),
}
GLOBAL_ATTRIBUTES = {"class", "id", "title", "lang", "dir", "role"}
URL_ATTRIBUTES = {"href", "src", "cite"}
VOID_TAGS = {"br", "hr", "img"}
DROP_CONTENT_TAGS = {"script", "style", "iframe", "object", "embed", "template", "noscript"}

_CONTROL_CHARS_RE = re.compile(r"[\x00-\x1f\x7f]")
_SCHEME_RE = re.compile(r"^([a-zA-Z][a-zA-Z0-9+.-]*):")
_BARE_HOST_RE = re.compile(r"^[a-zA-Z0-9-]+(\.[a-zA-Z0-9-]+)+(:\d+)?([/?#]|$)")
_CLASS_NAME_RE = re.compile(r"[^A-Za-z0-9_-]")


def clean_url(url):
    """
    Normalise a URL for output in an href/src attribute.

    Returns "" for URLs using a protocol outside ALLOWED_PROTOCOLS. Bare host names
    ("example.com/path") are given an http:// prefix; relative URLs are left alone.
    """
    if not url:
        return ""
    url = _CONTROL_CHARS_RE.sub("", str(url).strip()).replace(" ", "%20")
    if not url:
        return ""

    match = _SCHEME_RE.match(url)
    if match:
        if match.group(1).lower() not in ALLOWED_PROTOCOLS:
            return ""
        return url

    if _BARE_HOST_RE.match(url):
        return f"http://{url}"
    return url


class _RichTextSanitizer(HTMLParser):
    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.parts = []
        self.open_tags = []
        self.skip_depth = 0

    def handle_starttag(self, tag, attrs):
        if tag in DROP_CONTENT_TAGS:
            self.skip_depth += 1
            return
        if self.skip_depth or tag not in ALLOWED_TAGS:
            return
        self.parts.append(self._start_tag(tag, attrs))
        if tag not in VOID_TAGS:
            self.open_tags.append(tag)

    def handle_endtag(self, tag):
        if tag in DROP_CONTENT_TAGS:
            self.skip_depth = max(self.skip_depth - 1, 0)
            return
        if self.skip_depth or tag in VOID_TAGS or tag not in self.open_tags:
            return
        while self.open_tags:
            open_tag = self.open_tags.pop()
            self.parts.append(f"</{open_tag}>")
            if open_tag == tag:
                break

    def handle_data(self, data):
        if not self.skip_depth:
            self.parts.append(escape(data))

    def _start_tag(self, tag, attrs):
        allowed = ALLOWED_TAGS[tag] | GLOBAL_ATTRIBUTES
        rendered = []
        for name, value in attrs:
            if name not in allowed:
                continue
            if value is None:
                rendered.append(name)
                continue
            if name in URL_ATTRIBUTES:
                value = clean_url(value)
                if not value:
                    continue
            rendered.append(f'{name}="{escape(value)}"')
        if rendered:
            return "<{} {}>".format(tag, " ".join(rendered))
        return f"<{tag}>"

    def get_html(self):
        self.close()
        closing = [f"</{tag}>" for tag in reversed(self.open_tags)]
        return "".join(self.parts + closing)


def sanitize_rich_text(value):
    """Strip markup that is not allowed in post content, keeping the text inside it."""
    if value is None:
        return ""
    sanitizer = _RichTextSanitizer()
    sanitizer.feed(str(value))
    return sanitizer.get_html()


class RenderContext:
    """
    Escaping and translation used by components while rendering.

    Every method returns a SafeString so results can be passed to format_html
    without being escaped a second time.
    """

    def attr(self, value):
        return escape(value)

    def text(self, value):
        return escape(value)

    def url(self, value):
        return escape(clean_url(value))

    def rich_text(self, value):
        return mark_safe(sanitize_rich_text(value))

    def translate(self, message):
        return gettext(message)


def get_render_context():
    path = getattr(settings, "FLYOUT_RENDER_CONTEXT", DEFAULT_RENDER_CONTEXT)
    return import_string(path)()


def build_classes(classes):
    """Join the non-empty class names with a single space."""
    return " ".join(str(css_class).strip() for css_class in classes if css_class and str(css_class).strip())


def build_attributes(attrs, context=None):
    """
    Build an HTML attribute string from a mapping.

    None and False values are skipped, True renders a bare attribute and anything
    else renders key="value" with the value escaped for an attribute.
    """
    context = context or RenderContext()
    result = []
    for key, value in (attrs or {}).items():
        if value is None or value is False:
            continue
        if value is True:
            result.append(context.attr(key))
        else:
            result.append(f'{context.attr(key)}="{context.attr(value)}"')
    return mark_safe(" ".join(result))


def build_data_attributes(data, context=None):
    return build_attributes({f"data-{key}": value for key, value in (data or {}).items()}, context=context)


def render_icon(icon, classes=(), context=None):
    if not icon:
        return ""
    context = context or RenderContext()
    class_string = build_classes(["dashicons", f"dashicons-{icon}", *classes])
    return format_html('<span class="{}"></span>', context.attr(class_string))


def join_html(parts, separator=""):
    """Join markup fragments, escaping any part that is not already marked safe."""
    return mark_safe(conditional_escape(separator).join(conditional_escape(part) for part in parts if part))


def sanitize_html_class(value, fallback=""):
    """Strip everything but letters, digits, "-" and "_" from a class name."""
    cleaned = _CLASS_NAME_RE.sub("", str(value or ""))
    return cleaned or fallback
