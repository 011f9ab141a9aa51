"""
Checkbox controls.

CheckBoxForBool renders the checkbox plus a hidden ``FALSE`` input sharing
its name, so an unchecked box still submits a deterministic value. A
disabled checkbox does not submit, so the hidden fallback is omitted; an
unchecked disabled box therefore submits nothing for its field.

CheckBoxForEnumerable renders one checkbox for a single member of a
collection-valued property (e.g. one role out of ``user.roles``).
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, List, Optional

from ..tag_builder import HTML_PROPERTY, TagBuilder
from .base import RenderState
from .visible import VisibleComponent


def split_attempted(raw: Optional[str]) -> List[str]:
    """Attempted values of multi-value fields arrive comma separated."""
    if raw is None:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


class CheckBoxForBool(VisibleComponent):
    """Checkbox bound to a boolean property."""

    control_prefix = "chk"
    true_value = "TRUE"
    false_value = "FALSE"

    def is_checked(self, state: RenderState) -> bool:
        if state.attempted_value is not None:
            return self.true_value in (part.upper() for part in split_attempted(state.attempted_value))
        return bool(state.value)

    def render_component(self, state: RenderState) -> str:
        checkbox = TagBuilder(
            "input",
            {
                "type": "checkbox",
                "name": state.name,
                "id": state.id,
                "value": self.true_value,
                "checked": HTML_PROPERTY if self.is_checked(state) else None,
            },
        )
        self.finish_control(checkbox, state)

        if state.is_disabled:
            return checkbox.render()

        hidden = TagBuilder(
            "input",
            {"type": "hidden", "name": state.name, "value": self.false_value},
        )
        return checkbox.render() + hidden.render()


class CheckBoxForEnumerable(VisibleComponent):
    """Checkbox for one ``member`` of a collection-valued property.

    Parameters:
        member: The value this checkbox submits; checked when the bound
            collection contains it.
    """

    control_prefix = "chk"

    def __init__(self, member: Any, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.member = member

    def member_value(self, state: RenderState) -> Optional[str]:
        return self.format(self.member, state)

    def is_checked(self, state: RenderState) -> bool:
        if state.attempted_value is not None:
            return self.member_value(state) in split_attempted(state.attempted_value)
        bound = state.value
        if bound is None or isinstance(bound, (str, bytes)) or not isinstance(bound, Iterable):
            return False
        return self.member in bound

    def render_component(self, state: RenderState) -> str:
        checkbox = TagBuilder(
            "input",
            {
                "type": "checkbox",
                "name": state.name,
                "id": state.id,
                "value": self.member_value(state),
                "checked": HTML_PROPERTY if self.is_checked(state) else None,
            },
        )
        return self.finish_control(checkbox, state).render()


__all__ = ["CheckBoxForBool", "CheckBoxForEnumerable", "split_attempted"]
