"""
Base Component class for formbind form controls.

This module provides the foundation for every bindable form control. Using
pure Python for HTML generation keeps the markup type-safe, testable, and
escaped by default.

Lifecycle:
    A component is created per request, populated by the factory (name, id,
    value), optionally mutated through fluent ``with_*`` calls, rendered once
    or more, and discarded. Rendering works on a frozen ``RenderState``
    snapshot, so rendering never mutates the component and re-rendering an
    unmutated component yields identical markup.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from ..ports import ComponentState, Culture
from ..tag_builder import HTML_PROPERTY, TagBuilder, normalize_attribute_name


@dataclass(frozen=True)
class RenderState:
    """Read-only view of a component at the moment it renders."""

    name: Optional[str]
    id: Optional[str]
    value: Any
    attributes: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))
    label: Optional[str] = None
    label_visible: bool = False
    attempted_value: Optional[str] = None
    state: ComponentState = ComponentState.UNVALIDATED
    errors: Tuple[str, ...] = ()
    culture: Optional[Culture] = None

    @property
    def is_invalid(self) -> bool:
        return self.state is ComponentState.INVALID

    @property
    def is_disabled(self) -> bool:
        value = self.attributes.get("disabled")
        return value is not None and value is not False


def apply_attributes(builder: TagBuilder, attributes: Mapping[str, Any]) -> TagBuilder:
    """Merge user attributes into ``builder`` without replacing its own keys.

    ``class`` is the exception: classes are combined instead of dropped.
    """
    for css_class in str(attributes.get("class") or "").split():
        builder.add_css_class(css_class)
    return builder.merge_attributes({key: value for key, value in attributes.items() if key != "class"})


class Component(ABC):
    """Base class for all form controls.

    Subclasses set ``control_prefix`` (used by id resolvers, e.g. ``"txt"``)
    and implement ``render_component``.
    """

    control_prefix: str = ""

    def __init__(self) -> None:
        self._name: Optional[str] = None
        self._id: Optional[str] = None
        self._value: Any = None
        self.html_attributes: Dict[str, Any] = {}
        self.configured = False

    # -- identity -----------------------------------------------------------

    @property
    def name(self) -> Optional[str]:
        return self._name

    @property
    def id(self) -> Optional[str]:
        return self._id

    @property
    def value(self) -> Any:
        return self._value

    def with_name(self, name: Optional[str]) -> "Component":
        self._name = name
        return self

    def with_id(self, component_id: Optional[str]) -> "Component":
        self._id = component_id
        return self

    def with_value(self, value: Any) -> "Component":
        self._value = value
        return self

    # -- attributes ---------------------------------------------------------

    def with_attribute(self, key: str, value: Any) -> "Component":
        """Set one attribute verbatim; last write wins."""
        self.html_attributes[key] = value
        return self

    def with_attributes(self, attributes: Optional[Mapping[str, Any]] = None, **attrs: Any) -> "Component":
        """Set several attributes.

        Mapping keys are used verbatim; keyword names are normalized
        (``class_`` -> ``class``, ``data_id`` -> ``data-id``).
        """
        for key, value in (attributes or {}).items():
            self.html_attributes[key] = value
        for key, value in attrs.items():
            self.html_attributes[normalize_attribute_name(key)] = value
        return self

    def without_attribute(self, key: str) -> "Component":
        self.html_attributes.pop(key, None)
        return self

    def with_class(self, *css_classes: str) -> "Component":
        existing = str(self.html_attributes.get("class") or "").split()
        for css_class in css_classes:
            for part in css_class.split():
                if part not in existing:
                    existing.append(part)
        if existing:
            self.html_attributes["class"] = " ".join(existing)
        return self

    def with_disabled(self, disabled: bool = True) -> "Component":
        if disabled:
            self.html_attributes["disabled"] = HTML_PROPERTY
        else:
            self.html_attributes.pop("disabled", None)
        return self

    # -- rendering ----------------------------------------------------------

    def snapshot(self) -> RenderState:
        return RenderState(
            name=self._name,
            id=self._id,
            value=self._value,
            attributes=MappingProxyType(dict(self.html_attributes)),
        )

    @abstractmethod
    def render_component(self, state: RenderState) -> str:
        """Render the control itself from a frozen snapshot."""

    def render(self) -> str:
        """Render the component as an HTML string."""
        return self.render_component(self.snapshot())

    def __str__(self) -> str:
        return self.render()

    def __html__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r}, id={self._id!r}, value={self._value!r})"

    # -- helpers ------------------------------------------------------------

    @staticmethod
    def classes(*args: str, **conditionals: bool) -> str:
        """Build a CSS class string with conditional classes.

        Example:
            >>> Component.classes("checkbox-list", **{"checkbox-list--invalid": True})
            'checkbox-list checkbox-list--invalid'
        """
        classes = [arg for arg in args if arg]
        classes.extend(key for key, value in conditionals.items() if value)
        return " ".join(classes)


def freeze_errors(errors: Optional[Sequence[str]]) -> Tuple[str, ...]:
    return tuple(str(error) for error in (errors or ()))


__all__ = ["Component", "RenderState", "apply_attributes", "freeze_errors"]
