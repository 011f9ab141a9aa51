"""
Error taxonomy for formbind.

Design:
    - Construction-time rejection: invalid required arguments, raised before
      a component is handed back to the caller.
    - Binding failure: the accessor could not be evaluated against the model.
    - Configuration failure: invalid settings.

Render-time edge cases (missing name, ``None`` values, empty error lists)
are not errors; they render as omitted or empty output.
"""

from __future__ import annotations

from typing import Optional


class FormbindError(Exception):
    """Base class for all formbind failures."""


class ComponentConstructionError(FormbindError, ValueError):
    """A component was constructed with invalid required arguments."""


class ComponentRenderingError(FormbindError):
    """A component could not be bound or rendered."""


class ValueResolutionError(ComponentRenderingError):
    """Some part of the accessor's property chain could not be traversed.

    Parameters:
        accessor: Textual description of the accessor that failed.
        message: Optional override for the default message.
    """

    def __init__(self, accessor: str, message: Optional[str] = None) -> None:
        self.accessor = accessor
        super().__init__(
            message
            or f"Could not set component value, some part of the property chain is missing: {accessor}"
        )


class ConfigurationError(FormbindError, ValueError):
    """Settings or collaborator configuration is invalid."""


__all__ = [
    "FormbindError",
    "ComponentConstructionError",
    "ComponentRenderingError",
    "ValueResolutionError",
    "ConfigurationError",
]
