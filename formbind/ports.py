"""
Ports for formbind: shared types, accessor, and collaborator protocols.

Intent:
    Provide framework-agnostic contracts between the component factory and
    the infrastructure around it (naming, ids, localization, validation
    results, configuration). Keeping these definitions in a dedicated module
    avoids circular imports between components and the factory.

Design:
    - Shared enums: ComponentState, ComponentPart, ValidationMarkerMode
    - Accessor: explicit (path, getter) pair instead of expression trees
    - Protocols: NameResolver, IdResolver, TermResolver, ErrorProvider,
      FormConfiguration
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Protocol, Sequence, Tuple, Union

from babel import Locale


# ----------------------------- Shared enums ---------------------------------


class ComponentState(str, Enum):
    """Per-field validation outcome."""

    UNVALIDATED = "unvalidated"
    VALID = "valid"
    INVALID = "invalid"


class ComponentPart(str, Enum):
    """Renderable parts of a visible component, used for rendering order."""

    LABEL = "label"
    COMPONENT = "component"
    VALIDATION_MESSAGE = "validation_message"


class ValidationMarkerMode(str, Enum):
    """When a validation message container is emitted."""

    ALWAYS = "always"
    ON_ERROR = "on_error"
    NEVER = "never"


# ------------------------------- Accessor -----------------------------------


_TOKEN_RE = re.compile(r"([^.\[\]]+)|\[([^\]]*)\]")


def parse_path(path: str) -> List[Tuple[str, Union[str, int]]]:
    """Split ``"items[0].name"`` into ``[("attr", "items"), ("item", 0), ("attr", "name")]``."""
    tokens: List[Tuple[str, Union[str, int]]] = []
    for match in _TOKEN_RE.finditer(path):
        attr, index = match.group(1), match.group(2)
        if attr is not None:
            tokens.append(("attr", attr))
        else:
            index = (index or "").strip().strip("'\"")
            tokens.append(("item", int(index) if index.lstrip("-").isdigit() else index))
    return tokens


@dataclass(frozen=True)
class Accessor:
    """A view-model property: its dotted path plus how to read it.

    Parameters:
        path: Dotted path such as ``"address.city"`` or ``"items[0].name"``.
            Used by the name and id resolvers and for label lookup.
        getter: Optional ``(model) -> value``; when omitted the path is
            traversed over attributes, mapping keys and ``[index]`` subscripts.
    """

    path: str
    getter: Optional[Callable[[Any], Any]] = None

    def __post_init__(self) -> None:
        if not self.path:
            raise ValueError("Accessor path must be a non-empty string")

    @classmethod
    def of(cls, prop: Union["Accessor", str]) -> "Accessor":
        if isinstance(prop, Accessor):
            return prop
        if isinstance(prop, str):
            return cls(prop)
        raise TypeError(f"Expected an Accessor or a dotted path, got {type(prop).__name__}")

    @property
    def segments(self) -> List[str]:
        return [str(token) for kind, token in parse_path(self.path) if kind == "attr"]

    @property
    def last_segment(self) -> str:
        segments = self.segments
        return segments[-1] if segments else self.path

    @property
    def description(self) -> str:
        if self.getter is None:
            return self.path
        name = getattr(self.getter, "__qualname__", repr(self.getter))
        return f"{self.path} ({name})"

    def evaluate(self, model: Any) -> Any:
        """Read the property from ``model``; traversal errors propagate."""
        if self.getter is not None:
            return self.getter(model)
        current = model
        for kind, token in parse_path(self.path):
            if kind == "item" or isinstance(current, Mapping):
                current = current[token]
            else:
                current = getattr(current, str(token))
        return current

    def __str__(self) -> str:
        return self.path


PropertyRef = Union[Accessor, str]
Culture = Union[str, Locale]


# ------------------------------- Protocols ----------------------------------


class NameResolver(Protocol):
    """Maps an accessor to the form submission key."""

    def resolve_name(self, accessor: Accessor) -> str:
        ...


class IdResolver(Protocol):
    """Maps an accessor and a control prefix to a DOM id."""

    def resolve_id(self, accessor: Accessor, control_prefix: str) -> str:
        ...


class TermResolver(Protocol):
    """Localized text lookup; culture is always explicit."""

    def resolve_term(self, key: str, culture: Culture) -> str:
        ...

    def resolve_label(self, accessor: Accessor, culture: Culture) -> str:
        ...


class ErrorProvider(Protocol):
    """Validation results of a previous submission, keyed by field name."""

    def get_state_for(self, name: str) -> ComponentState:
        ...

    def get_errors_for(self, name: str) -> Sequence[str]:
        ...

    def get_attempted_value_for(self, name: str) -> Optional[str]:
        ...


class FormConfiguration(Protocol):
    """Cross-cutting mutation hook run once per bound component."""

    def initialize(self, component: Any) -> None:
        ...


__all__ = [
    # Enums
    "ComponentState",
    "ComponentPart",
    "ValidationMarkerMode",
    # Accessor
    "Accessor",
    "parse_path",
    "PropertyRef",
    "Culture",
    # Protocols
    "NameResolver",
    "IdResolver",
    "TermResolver",
    "ErrorProvider",
    "FormConfiguration",
]
