"""
Configuration for formbind.

Why: Cross-cutting rendering choices (culture, CSS classes, validation
marker mode) belong to the deployment, not to every call site. Settings are
read from environment variables once and applied to each bound component by
``SettingsFormConfiguration``.

Variables:
    FORMBIND_CULTURE                default culture (``en-GB``)
    FORMBIND_INPUT_CLASS            CSS class for every visible control (unset)
    FORMBIND_INVALID_CLASS          CSS class on invalid controls
                                    (``input-validation-error``; ``none`` disables)
    FORMBIND_VALIDATION_MARKER      ``always`` | ``on_error`` | ``never``
    FORMBIND_LABEL_FOR_PLACEHOLDER  ``true`` to use labels as placeholders
    FORMBIND_ARIA_LABEL             ``true`` to emit ``aria-label``

Invalid values raise ``ConfigurationError`` instead of silently falling back.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Optional

from .components.text import FormattableComponent
from .components.visible import DEFAULT_INVALID_CLASS, VisibleComponent
from .exceptions import ConfigurationError
from .formatting import DEFAULT_CULTURE, resolve_culture
from .ports import FormConfiguration, ValidationMarkerMode


def _env_flag(name: str, default: str = "false") -> bool:
    raw = (os.getenv(name, default) or "").strip().lower()
    if raw in {"true", "1", "yes", "on"}:
        return True
    if raw in {"false", "0", "no", "off", ""}:
        return False
    raise ConfigurationError(f"{name} must be true or false (got {raw!r}).")


def _env_optional(name: str, default: Optional[str] = None) -> Optional[str]:
    raw = os.getenv(name)
    if raw is None:
        return default
    raw = raw.strip()
    if not raw or raw.lower() == "none":
        return None
    return raw


@dataclass(frozen=True)
class FormSettings:
    """Rendering defaults applied to every component a factory binds."""

    culture: str = DEFAULT_CULTURE
    input_class: Optional[str] = None
    invalid_class: Optional[str] = DEFAULT_INVALID_CLASS
    validation_marker: ValidationMarkerMode = ValidationMarkerMode.ON_ERROR
    label_for_placeholder: bool = False
    aria_label: bool = False


def load_settings() -> FormSettings:
    """Read ``FormSettings`` from the environment and validate them."""

    culture = (os.getenv("FORMBIND_CULTURE") or DEFAULT_CULTURE).strip()
    # Fails with ConfigurationError for unknown cultures.
    resolve_culture(culture)

    marker_raw = (os.getenv("FORMBIND_VALIDATION_MARKER") or ValidationMarkerMode.ON_ERROR.value).strip().lower()
    try:
        marker = ValidationMarkerMode(marker_raw)
    except ValueError as exc:
        raise ConfigurationError(
            f"FORMBIND_VALIDATION_MARKER must be one of always, on_error, never (got {marker_raw!r})."
        ) from exc

    return FormSettings(
        culture=culture,
        input_class=_env_optional("FORMBIND_INPUT_CLASS"),
        invalid_class=_env_optional("FORMBIND_INVALID_CLASS", DEFAULT_INVALID_CLASS),
        validation_marker=marker,
        label_for_placeholder=_env_flag("FORMBIND_LABEL_FOR_PLACEHOLDER"),
        aria_label=_env_flag("FORMBIND_ARIA_LABEL"),
    )


class SettingsFormConfiguration:
    """Apply ``FormSettings`` to each component during the configure phase."""

    def __init__(self, settings: Optional[FormSettings] = None) -> None:
        self.settings = settings or FormSettings()

    def initialize(self, component: Any) -> None:
        if not isinstance(component, VisibleComponent):
            return
        settings = self.settings
        if settings.input_class:
            component.with_class(settings.input_class)
        component.with_invalid_class(settings.invalid_class)
        component.with_validation_marker(settings.validation_marker)
        if settings.aria_label:
            component.with_aria_label()
        if settings.label_for_placeholder and isinstance(component, FormattableComponent):
            component.with_label_for_placeholder()


class CompositeFormConfiguration:
    """Run several configurations in order."""

    def __init__(self, *configurations: FormConfiguration) -> None:
        self.configurations = configurations

    def initialize(self, component: Any) -> None:
        for configuration in self.configurations:
            configuration.initialize(component)


__all__ = [
    "FormSettings",
    "load_settings",
    "SettingsFormConfiguration",
    "CompositeFormConfiguration",
]
