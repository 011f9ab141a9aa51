"""
Selection controls: DropDown (single ``<select>``) and ListBox
(``<select multiple>``).

Both hold an immutable tuple of items plus projections supplied once at
construction:

    item_value(item) -> str          option ``value``
    item_text(item) -> str           option text (escaped)
    item_attributes(item) -> dict    extra option attributes (optional)
    property_value(bound) -> str     optional projection of the bound value
                                     used to match options by value

An option is selected when the bound value equals the item, or when
``property_value(bound) == item_value(item)``. After a failed submission
the attempted raw value(s) decide the selection instead.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Callable, Dict, List, Mapping, Optional

from ..exceptions import ComponentConstructionError
from ..tag_builder import HTML_PROPERTY, TagBuilder
from .base import RenderState
from .checkbox import split_attempted
from .visible import VisibleComponent

ItemProjection = Callable[[Any], Any]

_UNSET: Any = object()


class ItemsComponent(VisibleComponent):
    """Visible control rendering one entry per item of a fixed sequence.

    A ``None`` items sequence is rejected at construction; it is never
    rendered as an empty control.
    """

    def __init__(
        self,
        items: Optional[Iterable[Any]],
        item_value: Optional[ItemProjection] = None,
        item_text: Optional[ItemProjection] = None,
        **kwargs: Any,
    ) -> None:
        if items is None:
            raise ComponentConstructionError(f"{type(self).__name__}'s data items cannot be None")
        super().__init__(**kwargs)
        self.items = tuple(items)
        self.item_value = item_value
        self.item_text = item_text

    def value_of(self, item: Any, state: RenderState) -> Optional[str]:
        if self.item_value is not None:
            value = self.item_value(item)
            return value if value is None or isinstance(value, str) else self.format(value, state)
        return self.format(item, state)

    def text_of(self, item: Any, state: RenderState) -> str:
        if self.item_text is not None:
            return str(self.item_text(item))
        return self.format(item, state) or ""


class SelectComponent(ItemsComponent):
    """Shared option handling for DropDown and ListBox."""

    multiple = False

    def __init__(
        self,
        items: Optional[Iterable[Any]],
        item_value: Optional[ItemProjection] = None,
        item_text: Optional[ItemProjection] = None,
        item_attributes: Optional[Callable[[Any], Optional[Mapping[str, Any]]]] = None,
        *,
        property_value: Optional[ItemProjection] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(items, item_value, item_text, **kwargs)
        self.item_attributes = item_attributes
        self.property_value = property_value

    def matches(self, bound: Any, item: Any, state: RenderState) -> bool:
        if bound is None:
            return False
        if bound == item:
            return True
        if self.property_value is not None:
            return self.property_value(bound) == self.value_of(item, state)
        return False

    def attempted_values(self, state: RenderState) -> List[str]:
        return [state.attempted_value] if state.attempted_value is not None else []

    def is_selected(self, item: Any, state: RenderState) -> bool:
        if state.attempted_value is not None:
            return self.value_of(item, state) in self.attempted_values(state)
        return self.matches(state.value, item, state)

    def render_option(self, item: Any, state: RenderState) -> str:
        extra: Optional[Mapping[str, Any]] = self.item_attributes(item) if self.item_attributes else None
        option = TagBuilder("option", extra)
        option.merge_attribute("value", self.value_of(item, state) or "", replace=True)
        if self.is_selected(item, state):
            option.merge_attribute("selected", HTML_PROPERTY, replace=True)
        option.set_inner_text(self.text_of(item, state))
        return option.render()

    def render_leading_options(self, state: RenderState) -> str:
        return ""

    def render_component(self, state: RenderState) -> str:
        attrs: Dict[str, Any] = {"name": state.name, "id": state.id}
        if self.multiple:
            attrs["multiple"] = HTML_PROPERTY
        builder = TagBuilder("select", attrs)
        self.finish_control(builder, state)
        builder.inner_html = self.render_leading_options(state)
        for item in self.items:
            builder.append_html(self.render_option(item, state))
        return builder.render()


class DropDown(SelectComponent):
    """Single-selection ``<select>`` with an optional leading null option."""

    control_prefix = "ddl"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.show_null_option = False
        self.null_option_text: Optional[str] = None
        self.null_option_value: Any = _UNSET

    def with_null_option(self, text: Optional[str] = None, value: Any = _UNSET) -> "DropDown":
        """Prepend a "no value chosen" option.

        Parameters:
            text: Option text; defaults to the term ``Choose`` in the bound culture.
            value: Optional item whose projected value the option submits;
                an empty string is submitted otherwise.
        """
        self.show_null_option = True
        self.null_option_text = text
        self.null_option_value = value
        return self

    def without_null_option(self) -> "DropDown":
        self.show_null_option = False
        self.null_option_text = None
        self.null_option_value = _UNSET
        return self

    def render_leading_options(self, state: RenderState) -> str:
        if not self.show_null_option:
            return ""
        if self.null_option_value is _UNSET:
            null_value = ""
        else:
            null_value = self.value_of(self.null_option_value, state) or ""
        text = self.null_option_text
        if text is None:
            text = self.resolve_term("Choose")
        option = TagBuilder("option", {"value": null_value, "data-null-value": "true"})
        option.set_inner_text(text)
        return option.render()


class ListBox(SelectComponent):
    """Multi-selection ``<select multiple>`` bound to a collection."""

    control_prefix = "lst"
    multiple = True

    def matches(self, bound: Any, item: Any, state: RenderState) -> bool:
        if bound is None or isinstance(bound, (str, bytes)) or not isinstance(bound, Iterable):
            return super().matches(bound, item, state)
        return any(super(ListBox, self).matches(member, item, state) for member in bound)

    def attempted_values(self, state: RenderState) -> List[str]:
        return split_attempted(state.attempted_value)


__all__ = ["ItemsComponent", "SelectComponent", "DropDown", "ListBox"]
