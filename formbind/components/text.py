"""
Text entry controls: text, email, number and password boxes, and textareas.

These controls keep markup consistent across forms: a single element whose
value is the attempted value of a failed submission when there is one, the
culture-formatted bound value otherwise.

Behavior:
    - Value precedence: attempted value > formatted bound value > nothing
      (``with_default_as_empty()`` and the bound value equals its type's
      default).
    - Placeholder: the label text (``with_label_for_placeholder()``) or the
      resolved placeholder term, never both.
    - Attribute order: type, name, id, value, placeholder, ARIA, then user
      attributes.
"""

from __future__ import annotations

from typing import Any, Optional

from ..formatting import INVARIANT_CULTURE, format_value, is_default_value
from ..tag_builder import TagBuilder
from .base import RenderState
from .visible import VisibleComponent


class FormattableComponent(VisibleComponent):
    """Visible control whose bound value is formatted as text."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.format_string: Optional[str] = None
        self.placeholder: Optional[str] = None
        self.use_label_for_placeholder = False
        self.default_as_empty = False

    def with_format(self, fmt: Optional[str]) -> "FormattableComponent":
        """Babel number or date pattern, e.g. ``"0.00"`` or ``"yyyy-MM-dd"``."""
        self.format_string = fmt
        return self

    def with_placeholder(self, term: Optional[str]) -> "FormattableComponent":
        self.placeholder = term
        self.use_label_for_placeholder = False
        return self

    def with_label_for_placeholder(self, enabled: bool = True) -> "FormattableComponent":
        self.use_label_for_placeholder = enabled
        return self

    def with_default_as_empty(self, enabled: bool = True) -> "FormattableComponent":
        self.default_as_empty = enabled
        return self

    def formatted_value(self, state: RenderState) -> Optional[str]:
        return self.format(state.value, state, self.format_string)

    def field_value(self, state: RenderState) -> Optional[str]:
        if state.attempted_value is not None:
            return state.attempted_value
        if self.default_as_empty and is_default_value(state.value):
            return None
        return self.formatted_value(state)

    def placeholder_text(self, state: RenderState) -> Optional[str]:
        if self.use_label_for_placeholder:
            return state.label or None
        return self.resolve_term(self.placeholder)

    def aria_label_text(self, state: RenderState) -> Optional[str]:
        return state.label or self.resolve_term(self.placeholder)


class TextBox(FormattableComponent):
    """Single-line ``<input type="text">``."""

    control_prefix = "txt"
    input_type = "text"

    def input_attributes(self, state: RenderState) -> dict:
        return {
            "type": self.input_type,
            "name": state.name,
            "id": state.id,
            "value": self.field_value(state),
        }

    def render_component(self, state: RenderState) -> str:
        builder = TagBuilder("input", self.input_attributes(state))
        builder.merge_attribute("placeholder", self.placeholder_text(state))
        return self.finish_control(builder, state).render()


class EmailBox(TextBox):
    """``<input type="email">``; shares the text box prefix."""

    input_type = "email"


class PasswordBox(TextBox):
    """``<input type="password">``."""

    control_prefix = "pwd"
    input_type = "password"


class NumberBox(TextBox):
    """``<input type="number">`` with optional min, max and step.

    Number inputs only accept a dot decimal separator, so values and bounds
    are formatted with the invariant culture rather than the bound culture.
    """

    control_prefix = "num"
    input_type = "number"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.min: Any = None
        self.max: Any = None
        self.step: Any = None

    def with_min(self, value: Any) -> "NumberBox":
        self.min = value
        return self

    def with_max(self, value: Any) -> "NumberBox":
        self.max = value
        return self

    def with_step(self, value: Any) -> "NumberBox":
        self.step = value
        return self

    def formatted_value(self, state: RenderState) -> Optional[str]:
        return format_value(state.value, INVARIANT_CULTURE, self.format_string)

    def input_attributes(self, state: RenderState) -> dict:
        attrs = super().input_attributes(state)
        attrs["min"] = format_value(self.min, INVARIANT_CULTURE)
        attrs["max"] = format_value(self.max, INVARIANT_CULTURE)
        attrs["step"] = format_value(self.step, INVARIANT_CULTURE)
        return attrs


class TextArea(FormattableComponent):
    """Multi-line ``<textarea>``; the value is escaped as text content."""

    control_prefix = "txa"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.rows: Optional[int] = None
        self.cols: Optional[int] = None

    def with_rows(self, rows: Optional[int]) -> "TextArea":
        self.rows = rows
        return self

    def with_cols(self, cols: Optional[int]) -> "TextArea":
        self.cols = cols
        return self

    def render_component(self, state: RenderState) -> str:
        builder = TagBuilder(
            "textarea",
            {
                "name": state.name,
                "id": state.id,
                "rows": str(self.rows) if self.rows is not None else None,
                "cols": str(self.cols) if self.cols is not None else None,
            },
        )
        builder.merge_attribute("placeholder", self.placeholder_text(state))
        self.finish_control(builder, state)
        builder.set_inner_text(self.field_value(state) or "")
        return builder.render()


__all__ = [
    "FormattableComponent",
    "TextBox",
    "EmailBox",
    "PasswordBox",
    "NumberBox",
    "TextArea",
]
