"""
TagBuilder: assembles a single HTML element with escaping.

Why:
    Every form control renders through the same small builder so attribute
    order, escaping and boolean attributes behave identically across kinds.

Behavior:
    - Attributes render in insertion order.
    - String values are attribute-escaped (&, <, >, ", ').
    - ``HTML_PROPERTY`` (or ``True``) renders ``name="name"``, e.g.
      ``checked="checked"``.
    - ``None`` and ``False`` omit the attribute entirely.
    - Without inner content the element is self-closing (``<input ... />``);
      with inner content (``""`` included) it renders as a container.

Security:
    Inner HTML is trusted, pre-rendered markup. Use ``set_inner_text`` for
    untrusted text content.
"""

from __future__ import annotations

import html
from typing import Any, Dict, Mapping, Optional


class HtmlProperty:
    """Marker for boolean (no-value) attributes such as ``checked``."""

    _instance: Optional["HtmlProperty"] = None

    def __new__(cls) -> "HtmlProperty":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "HTML_PROPERTY"


HTML_PROPERTY = HtmlProperty()


def escape_attribute(value: Any) -> str:
    """Escape a value for use inside a double-quoted attribute."""
    return html.escape(str(value), quote=True)


def escape_text(value: Optional[Any]) -> str:
    """Escape text content; quotes are left alone."""
    if value is None:
        return ""
    return html.escape(str(value), quote=False)


def normalize_attribute_name(key: str) -> str:
    """Map keyword-style names to HTML names.

    Example:
        >>> normalize_attribute_name("class_")
        'class'
        >>> normalize_attribute_name("data_value")
        'data-value'
    """
    # Special-case trailing underscore for reserved names: class_ -> class, for_ -> for
    if key.endswith("_"):
        return key[:-1]
    return key.replace("_", "-")


def _is_boolean_marker(value: Any) -> bool:
    return value is True or isinstance(value, HtmlProperty)


def render_attributes(attributes: Mapping[str, Any]) -> str:
    """Render an attribute mapping as ``' key="value" key2="value2"'``.

    Returns an empty string when nothing renders; otherwise the result
    starts with a single space so it can be appended to the tag name.
    """
    parts = []
    for key, value in attributes.items():
        if value is None or value is False:
            continue
        if _is_boolean_marker(value):
            parts.append(f'{key}="{escape_attribute(key)}"')
        else:
            parts.append(f'{key}="{escape_attribute(value)}"')
    if not parts:
        return ""
    return " " + " ".join(parts)


class TagBuilder:
    """Builds one HTML element from a tag name, attributes and inner HTML.

    Parameters:
        tag_name: Element name, e.g. ``"input"`` or ``"select"``.
        attributes: Optional initial attributes; copied, insertion order kept.
    """

    def __init__(self, tag_name: str, attributes: Optional[Mapping[str, Any]] = None) -> None:
        if not tag_name:
            raise ValueError("tag_name must be a non-empty string")
        self.tag_name = tag_name
        self.attributes: Dict[str, Any] = dict(attributes or {})
        self.inner_html: Optional[str] = None

    def merge_attribute(self, key: str, value: Any, *, replace: bool = False) -> "TagBuilder":
        """Add ``key``; an existing key is only overwritten when ``replace``.

        A key holding ``None`` counts as absent.
        """
        if replace or self.attributes.get(key) is None:
            self.attributes[key] = value
        return self

    def merge_attributes(self, attributes: Optional[Mapping[str, Any]], *, replace: bool = False) -> "TagBuilder":
        for key, value in (attributes or {}).items():
            self.merge_attribute(key, value, replace=replace)
        return self

    def add_css_class(self, css_class: str) -> "TagBuilder":
        existing = self.attributes.get("class")
        if not existing:
            self.attributes["class"] = css_class
        elif css_class not in str(existing).split():
            self.attributes["class"] = f"{existing} {css_class}"
        return self

    def set_inner_text(self, text: Optional[Any]) -> "TagBuilder":
        self.inner_html = escape_text(text)
        return self

    def append_html(self, markup: str) -> "TagBuilder":
        self.inner_html = (self.inner_html or "") + markup
        return self

    def render(self) -> str:
        attrs = render_attributes(self.attributes)
        if self.inner_html is None:
            return f"<{self.tag_name}{attrs} />"
        return f"<{self.tag_name}{attrs}>{self.inner_html}</{self.tag_name}>"

    def __str__(self) -> str:
        return self.render()

    @staticmethod
    def render_tag(tag_name: str, attributes: Optional[Mapping[str, Any]] = None, inner_content: Optional[str] = None) -> str:
        """One-shot rendering: ``render_tag("option", {...}, "")``."""
        builder = TagBuilder(tag_name, attributes)
        builder.inner_html = inner_content
        return builder.render()


__all__ = [
    "HtmlProperty",
    "HTML_PROPERTY",
    "TagBuilder",
    "escape_attribute",
    "escape_text",
    "normalize_attribute_name",
    "render_attributes",
]
