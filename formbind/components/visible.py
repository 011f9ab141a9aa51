"""
VisibleComponent: a form control with label, validation state and ARIA wiring.

Why:
    Validation results are usually produced after every component of a form
    has been constructed. Visible components therefore pull their state
    lazily: callbacks registered with ``on_prepare_for_render`` run right
    before the render snapshot is taken, and ``render(error_provider)`` can
    apply an explicitly passed provider as the final step.

Behavior:
    - Parts render in ``rendering_order`` (label, control, validation message
      by default). The label renders only when visible and non-empty; the
      validation message follows the component's marker mode.
    - An attempted value, when set, always wins over the bound value.
    - Invalid controls get ``aria-invalid``, ``aria-describedby`` pointing at
      ``{name}-validation`` and the configured invalid CSS class.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple, Union

from ..formatting import DEFAULT_CULTURE, format_value
from ..ports import ComponentPart, ComponentState, Culture, ErrorProvider, TermResolver, ValidationMarkerMode
from ..resolvers import DictionaryTermResolver
from ..tag_builder import TagBuilder
from ..validation_message import ValidationMessageRenderer, validation_message_id
from .base import Component, RenderState, apply_attributes, freeze_errors

_log = logging.getLogger("formbind.components")

PrepareCallback = Callable[["VisibleComponent"], None]

DEFAULT_RENDERING_ORDER: Tuple[ComponentPart, ...] = (
    ComponentPart.LABEL,
    ComponentPart.COMPONENT,
    ComponentPart.VALIDATION_MESSAGE,
)

DEFAULT_INVALID_CLASS = "input-validation-error"


def apply_validation_state(component: "VisibleComponent", provider: ErrorProvider) -> None:
    """Pull state, errors and attempted value for the component's name.

    The attempted value is injected only when the field has been validated
    and the provider still holds the raw submitted string.
    """
    name = component.name or ""
    state = provider.get_state_for(name)
    if state is not ComponentState.UNVALIDATED:
        attempted = provider.get_attempted_value_for(name)
        if attempted is not None:
            component.with_attempted_value(attempted)
    component.with_state(state, provider.get_errors_for(name))


def add_aria_described_by(attributes: Dict[str, Any], state: RenderState) -> None:
    """Point an invalid control at its validation message element."""
    if not state.is_invalid:
        return
    attributes["aria-invalid"] = "true"
    message_id = validation_message_id(state.name)
    if state.errors and message_id:
        attributes.setdefault("aria-describedby", message_id)


class VisibleComponent(Component):
    """Base class for user-facing controls.

    Parameters:
        term_resolver: Localized text lookup for placeholders and null options.
        culture: Culture used for value formatting and term lookup.
        validation_message_renderer: Renderer for the validation message part.
    """

    def __init__(
        self,
        term_resolver: Optional[TermResolver] = None,
        culture: Optional[Culture] = None,
        *,
        validation_message_renderer: Optional[ValidationMessageRenderer] = None,
    ) -> None:
        super().__init__()
        self.term_resolver: TermResolver = term_resolver or DictionaryTermResolver()
        self.culture: Culture = culture or DEFAULT_CULTURE
        self.validation_message_renderer = validation_message_renderer or ValidationMessageRenderer()
        self._label: Optional[str] = None
        self.label_visible = True
        self.attempted_value: Optional[str] = None
        self.state = ComponentState.UNVALIDATED
        self.errors: Tuple[str, ...] = ()
        self.aria_label = False
        self.rendering_order: Tuple[ComponentPart, ...] = DEFAULT_RENDERING_ORDER
        self.validation_marker = ValidationMarkerMode.ON_ERROR
        self.invalid_css_class: Optional[str] = DEFAULT_INVALID_CLASS
        self._prepare_callbacks: List[PrepareCallback] = []

    # -- label --------------------------------------------------------------

    @property
    def label(self) -> Optional[str]:
        return self._label

    def with_label(self, text: Optional[str]) -> "VisibleComponent":
        self._label = text
        self.label_visible = True
        return self

    def without_label(self) -> "VisibleComponent":
        """Hide the label; the text is kept for ARIA and placeholders."""
        self.label_visible = False
        return self

    def with_visible_label(self) -> "VisibleComponent":
        self.label_visible = True
        return self

    def with_aria_label(self, enabled: bool = True) -> "VisibleComponent":
        self.aria_label = enabled
        return self

    # -- rendering options --------------------------------------------------

    def with_rendering_order(self, *parts: Union[ComponentPart, str]) -> "VisibleComponent":
        if len(parts) == 1 and isinstance(parts[0], (list, tuple)):
            parts = tuple(parts[0])
        self.rendering_order = tuple(ComponentPart(part) for part in parts)
        return self

    def with_validation_marker(self, mode: Union[ValidationMarkerMode, str]) -> "VisibleComponent":
        self.validation_marker = ValidationMarkerMode(mode)
        return self

    def with_invalid_class(self, css_class: Optional[str]) -> "VisibleComponent":
        self.invalid_css_class = css_class
        return self

    def with_culture(self, culture: Culture) -> "VisibleComponent":
        self.culture = culture
        return self

    # -- validation ---------------------------------------------------------

    def with_state(self, state: Union[ComponentState, str], errors: Optional[Sequence[str]] = None) -> "VisibleComponent":
        self.state = ComponentState(state)
        self.errors = freeze_errors(errors)
        return self

    def with_attempted_value(self, raw: Optional[str]) -> "VisibleComponent":
        self.attempted_value = raw
        return self

    def on_prepare_for_render(self, callback: PrepareCallback) -> "VisibleComponent":
        self._prepare_callbacks.append(callback)
        return self

    def prepare_for_render(self, error_provider: Optional[ErrorProvider] = None) -> None:
        for callback in self._prepare_callbacks:
            callback(self)
        if error_provider is not None:
            apply_validation_state(self, error_provider)

    # -- rendering ----------------------------------------------------------

    def snapshot(self) -> RenderState:
        return RenderState(
            name=self._name,
            id=self._id,
            value=self._value,
            attributes=MappingProxyType(dict(self.html_attributes)),
            label=self._label,
            label_visible=self.label_visible,
            attempted_value=self.attempted_value,
            state=self.state,
            errors=self.errors,
            culture=self.culture,
        )

    def render(self, error_provider: Optional[ErrorProvider] = None) -> str:
        """Run preparers, freeze a snapshot and render the configured parts."""
        self.prepare_for_render(error_provider)
        state = self.snapshot()
        _log.debug("render %s name=%s state=%s", type(self).__name__, state.name, state.state.value)
        parts = []
        for part in self.rendering_order:
            if part is ComponentPart.LABEL:
                parts.append(self.render_label(state))
            elif part is ComponentPart.COMPONENT:
                parts.append(self.render_component(state))
            elif part is ComponentPart.VALIDATION_MESSAGE:
                parts.append(self.render_validation_message(state))
        return "".join(parts)

    def render_label(self, state: RenderState) -> str:
        if not state.label_visible or not state.label:
            return ""
        return TagBuilder("label", {"for": state.id}).set_inner_text(state.label).render()

    def render_validation_message(self, state: RenderState) -> str:
        return self.validation_message_renderer.render(
            state.state,
            self.validation_marker,
            state.errors,
            validation_message_id(state.name),
        )

    # -- helpers for concrete kinds -----------------------------------------

    def resolve_term(self, key: Optional[str]) -> Optional[str]:
        if not key:
            return None
        return self.term_resolver.resolve_term(key, self.culture)

    def aria_label_text(self, state: RenderState) -> Optional[str]:
        return state.label or None

    def format(self, value: Any, state: RenderState, fmt: Optional[str] = None) -> Optional[str]:
        return format_value(value, state.culture or self.culture, fmt)

    def finish_control(self, builder: TagBuilder, state: RenderState) -> TagBuilder:
        """Add ARIA wiring, user attributes and the invalid class, in that order."""
        if self.aria_label:
            builder.merge_attribute("aria-label", self.aria_label_text(state))
        add_aria_described_by(builder.attributes, state)
        apply_attributes(builder, state.attributes)
        if state.is_invalid and self.invalid_css_class:
            builder.add_css_class(self.invalid_css_class)
        return builder


__all__ = [
    "VisibleComponent",
    "PrepareCallback",
    "DEFAULT_RENDERING_ORDER",
    "DEFAULT_INVALID_CLASS",
    "apply_validation_state",
    "add_aria_described_by",
]
