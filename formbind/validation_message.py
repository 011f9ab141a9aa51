"""
Validation message rendering.

Renders the error summary for one named field. Used by visible components
as their ``VALIDATION_MESSAGE`` part and by the factory's standalone
``validation_message_for``; both derive the element id from the field name
so ``aria-describedby`` on the input and the message element agree.
"""

from __future__ import annotations

from typing import Optional, Sequence

from .ports import ComponentState, ValidationMarkerMode
from .tag_builder import TagBuilder


def validation_message_id(name: Optional[str]) -> Optional[str]:
    """Id of the validation message element for field ``name``."""
    return f"{name}-validation" if name else None


class ValidationMessageRenderer:
    """Render a field's validation state and errors as a message container.

    Behavior:
        - ``NEVER``: nothing.
        - ``ON_ERROR``: only when the state is invalid and errors exist.
        - ``ALWAYS``: always a container, empty when there is nothing to say.
    """

    container_class = "validation-message"
    error_class = "form-error"

    def render(
        self,
        state: ComponentState,
        marker_mode: ValidationMarkerMode,
        errors: Optional[Sequence[str]],
        element_id: Optional[str] = None,
    ) -> str:
        errors = [str(e) for e in (errors or ()) if e is not None and str(e) != ""]
        if marker_mode is ValidationMarkerMode.NEVER:
            return ""
        invalid = state is ComponentState.INVALID
        if marker_mode is ValidationMarkerMode.ON_ERROR and not (invalid and errors):
            return ""

        css = self.container_class
        if state is not ComponentState.UNVALIDATED:
            css = f"{css} {self.container_class}--{state.value}"

        builder = TagBuilder(
            "div",
            {
                "class": css,
                "id": element_id,
                "role": "alert" if invalid else None,
            },
        )
        builder.inner_html = ""
        if invalid:
            for error in errors:
                builder.append_html(TagBuilder("p", {"class": self.error_class}).set_inner_text(error).render())
        return builder.render()


__all__ = ["ValidationMessageRenderer", "validation_message_id"]
