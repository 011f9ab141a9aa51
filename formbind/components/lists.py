"""
Choice lists: one checkbox or radio input per item.

Selection is decided by a predicate ``is_selected(bound_value, item)``
rather than plain equality, so a multi-select collection property can be
matched against its options however the application needs. Without a
predicate the defaults are membership (checkbox list) and equality
(radio list), also comparing the formatted value against ``item_value``.

Markup:
    <div id="{id}" class="checkbox-list" role="group">
      <span class="checkbox-list__item"><input ... id="{id}_0" /><label for="{id}_0">...</label></span>
      ...
    </div>

Invalid lists add a ``checkbox-list--invalid`` (``radio-list--invalid``)
modifier to the container next to the invalid class.
"""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Iterable
from typing import Any, Callable, List, Optional

from ..tag_builder import HTML_PROPERTY, TagBuilder
from .base import RenderState
from .checkbox import split_attempted
from .choice import ItemProjection, ItemsComponent

SelectionPredicate = Callable[[Any, Any], bool]


class ChoiceListComponent(ItemsComponent):
    """Shared rendering for CheckBoxList and RadioButtonList."""

    input_type = "checkbox"
    container_class = "checkbox-list"
    container_role = "group"

    def __init__(
        self,
        items: Optional[Iterable[Any]],
        item_value: Optional[ItemProjection] = None,
        item_text: Optional[ItemProjection] = None,
        is_selected: Optional[SelectionPredicate] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(items, item_value, item_text, **kwargs)
        self.is_selected = is_selected

    @abstractmethod
    def default_selected(self, bound: Any, item: Any, state: RenderState) -> bool:
        """Selection rule used when no ``is_selected`` predicate was given."""

    def attempted_values(self, state: RenderState) -> List[str]:
        return split_attempted(state.attempted_value)

    def item_selected(self, item: Any, state: RenderState) -> bool:
        if state.attempted_value is not None:
            return self.value_of(item, state) in self.attempted_values(state)
        if self.is_selected is not None:
            return bool(self.is_selected(state.value, item))
        return self.default_selected(state.value, item, state)

    def render_item(self, index: int, item: Any, state: RenderState) -> str:
        item_id = f"{state.id}_{index}" if state.id else None
        choice = TagBuilder(
            "input",
            {
                "type": self.input_type,
                "name": state.name,
                "id": item_id,
                "value": self.value_of(item, state),
                "checked": HTML_PROPERTY if self.item_selected(item, state) else None,
                "disabled": HTML_PROPERTY if state.is_disabled else None,
            },
        )
        label = TagBuilder("label", {"for": item_id}).set_inner_text(self.text_of(item, state))
        wrapper = TagBuilder("span", {"class": f"{self.container_class}__item"})
        wrapper.inner_html = choice.render() + label.render()
        return wrapper.render()

    def render_component(self, state: RenderState) -> str:
        container = TagBuilder(
            "div",
            {
                "id": state.id,
                "class": self.classes(self.container_class, **{f"{self.container_class}--invalid": state.is_invalid}),
                "role": self.container_role,
            },
        )
        self.finish_control(container, state)
        # Each input carries ``disabled``; a div has no such attribute.
        container.attributes.pop("disabled", None)
        container.inner_html = ""
        for index, item in enumerate(self.items):
            container.append_html(self.render_item(index, item, state))
        return container.render()


class CheckBoxList(ChoiceListComponent):
    """One checkbox per item; bound value is usually a collection."""

    control_prefix = "chkl"

    def default_selected(self, bound: Any, item: Any, state: RenderState) -> bool:
        if bound is None:
            return False
        if isinstance(bound, (str, bytes)) or not isinstance(bound, Iterable):
            members = [bound]
        else:
            members = list(bound)
        if item in members:
            return True
        item_value = self.value_of(item, state)
        return any(self.format(member, state) == item_value for member in members)


class RadioButtonList(ChoiceListComponent):
    """One radio button per item; at most one is checked."""

    control_prefix = "rbl"
    input_type = "radio"
    container_class = "radio-list"
    container_role = "radiogroup"

    def attempted_values(self, state: RenderState) -> List[str]:
        return [state.attempted_value] if state.attempted_value is not None else []

    def default_selected(self, bound: Any, item: Any, state: RenderState) -> bool:
        if bound is None:
            return False
        return bound == item or self.format(bound, state) == self.value_of(item, state)


__all__ = ["ChoiceListComponent", "CheckBoxList", "RadioButtonList", "SelectionPredicate"]
