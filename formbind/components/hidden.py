"""
Hidden field: carries an opaque value through a form round trip.

Hidden values are frequently identifiers that must come back byte for
byte, so serialization is controlled by ``to_string``; without one the value
is formatted with the invariant culture.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from ..formatting import INVARIANT_CULTURE, format_value
from ..tag_builder import TagBuilder
from .base import Component, RenderState, apply_attributes

_log = logging.getLogger("formbind.components")


class HiddenField(Component):
    """``<input type="hidden">``; not a visible component (no label/state).

    Parameters:
        to_string: Optional ``(value) -> str`` used to serialize the bound value.
    """

    control_prefix = "hdn"

    def __init__(self, to_string: Optional[Callable[[Any], str]] = None) -> None:
        super().__init__()
        self.to_string = to_string

    def serialize(self, value: Any) -> Optional[str]:
        if value is None:
            return None
        if self.to_string is not None:
            return self.to_string(value)
        return format_value(value, INVARIANT_CULTURE)

    def render_component(self, state: RenderState) -> str:
        if not state.name:
            # A hidden field only exists to be submitted.
            _log.warning("hidden field rendered without a name (id=%s)", state.id)
        builder = TagBuilder(
            "input",
            {
                "type": "hidden",
                "name": state.name or "",
                "id": state.id,
                "value": self.serialize(state.value),
            },
        )
        return apply_attributes(builder, state.attributes).render()


__all__ = ["HiddenField"]
