"""
File upload control.

Browsers never accept a preset value for file inputs, so neither the bound
value nor an attempted value is rendered.
"""

from __future__ import annotations

from typing import Any, Optional

from ..tag_builder import HTML_PROPERTY, TagBuilder
from .base import RenderState
from .visible import VisibleComponent


class FileUpload(VisibleComponent):
    """``<input type="file">`` with optional ``accept`` and ``multiple``."""

    control_prefix = "fu"

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.accept: Optional[str] = None
        self.multiple = False

    def with_accept(self, accept: Optional[str]) -> "FileUpload":
        """MIME types or extensions, e.g. ``"application/pdf,image/*"``."""
        self.accept = accept
        return self

    def with_multiple(self, enabled: bool = True) -> "FileUpload":
        self.multiple = enabled
        return self

    def render_component(self, state: RenderState) -> str:
        builder = TagBuilder(
            "input",
            {
                "type": "file",
                "name": state.name,
                "id": state.id,
                "accept": self.accept,
                "multiple": HTML_PROPERTY if self.multiple else None,
            },
        )
        return self.finish_control(builder, state).render()


__all__ = ["FileUpload"]
