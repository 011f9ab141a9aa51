"""
ComponentFactory: binds view-model properties to form components.

Why:
    Call sites should only say *which* property they want rendered and as
    *what*; the factory takes care of the submission name, the DOM id, the
    current value, the localized label, cross-cutting configuration, and the
    validation state of a previous submission.

Binding happens in two phases:

1. Construct + populate (eager): name from the name resolver, value from
   evaluating the accessor against the model, id from the id resolver and
   the component's control prefix, and for visible kinds a default label
   from the term resolver, hidden right away (most call sites supply their
   own surrounding markup).
2. Configure + defer validation: the form configuration may mutate the
   component; visible kinds get a preparer that looks up state, errors and
   the attempted value when the component renders. Validation typically
   runs after every component of a form has been constructed, so the lookup
   must not happen at bind time.

Errors:
    A property chain that cannot be traversed (an intermediate value is
    missing) raises ``ValueResolutionError`` with the original exception
    chained. A ``None`` model is not an error; the value is simply not set.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Mapping, Optional, TypeVar

from .components import (
    CheckBoxForBool,
    CheckBoxForEnumerable,
    CheckBoxList,
    Component,
    DropDown,
    EmailBox,
    FileUpload,
    HiddenField,
    ListBox,
    NumberBox,
    PasswordBox,
    RadioButtonList,
    TextArea,
    TextBox,
    VisibleComponent,
    apply_validation_state,
)
from .config import FormSettings, SettingsFormConfiguration
from .exceptions import ValueResolutionError
from .formatting import DEFAULT_CULTURE, resolve_culture
from .model_state import ModelState
from .ports import (
    Accessor,
    Culture,
    ErrorProvider,
    FormConfiguration,
    IdResolver,
    NameResolver,
    PropertyRef,
    TermResolver,
    ValidationMarkerMode,
)
from .resolvers import DefaultIdResolver, DefaultNameResolver, DictionaryTermResolver
from .validation_message import ValidationMessageRenderer, validation_message_id

_log = logging.getLogger("formbind.factory")

ComponentT = TypeVar("ComponentT", bound=Component)
Projection = Callable[[Any], Any]


class ComponentFactory:
    """Create bound form components for one request.

    Parameters:
        configuration: Optional cross-cutting hook run once per component.
            When omitted and ``settings`` are given, the settings are applied.
        name_resolver: Accessor -> submission name (default: the path).
        id_resolver: Accessor + control prefix -> DOM id.
        term_resolver: Localized labels and terms.
        error_provider: Validation results of the previous submission;
            defaults to an empty ``ModelState`` (everything unvalidated).
        validation_message_renderer: Renders validation messages.
        culture: Bound culture for formatting and terms; defaults to
            ``settings.culture``.
        settings: Optional ``FormSettings``.
    """

    def __init__(
        self,
        configuration: Optional[FormConfiguration] = None,
        name_resolver: Optional[NameResolver] = None,
        id_resolver: Optional[IdResolver] = None,
        term_resolver: Optional[TermResolver] = None,
        error_provider: Optional[ErrorProvider] = None,
        validation_message_renderer: Optional[ValidationMessageRenderer] = None,
        culture: Optional[Culture] = None,
        settings: Optional[FormSettings] = None,
    ) -> None:
        if configuration is None and settings is not None:
            configuration = SettingsFormConfiguration(settings)
        self.configuration = configuration
        self.settings = settings
        self.name_resolver: NameResolver = name_resolver or DefaultNameResolver()
        self.id_resolver: IdResolver = id_resolver or DefaultIdResolver()
        self.term_resolver: TermResolver = term_resolver or DictionaryTermResolver()
        self.error_provider: ErrorProvider = error_provider or ModelState()
        self.validation_message_renderer = validation_message_renderer or ValidationMessageRenderer()
        self.culture: Culture = culture or (settings.culture if settings else DEFAULT_CULTURE)
        # Fail fast on unknown cultures instead of at first render.
        resolve_culture(self.culture)

    # -- binding --------------------------------------------------------------

    def _visible_options(self) -> dict:
        return {
            "term_resolver": self.term_resolver,
            "culture": self.culture,
            "validation_message_renderer": self.validation_message_renderer,
        }

    @staticmethod
    def resolve_value(accessor: Accessor, model: Any) -> Any:
        try:
            return accessor.evaluate(model)
        except (AttributeError, KeyError, IndexError, TypeError) as exc:
            raise ValueResolutionError(accessor.description) from exc

    def bind(self, component: ComponentT, prop: PropertyRef, model: Any) -> ComponentT:
        """Populate, configure and wire ``component`` for ``prop`` on ``model``.

        Every ``*_for`` method goes through here; new component kinds can be
        bound the same way without changing the factory.
        """
        accessor = Accessor.of(prop)

        component.with_name(self.name_resolver.resolve_name(accessor))
        if model is not None:
            component.with_value(self.resolve_value(accessor, model))
        component.with_id(self.id_resolver.resolve_id(accessor, component.control_prefix))

        visible = isinstance(component, VisibleComponent)
        if visible:
            component.with_label(self.term_resolver.resolve_label(accessor, self.culture)).without_label()

        if self.configuration is not None:
            try:
                self.configuration.initialize(component)
            except Exception:
                _log.warning(
                    "form configuration failed for %s (name=%s)",
                    type(component).__name__,
                    component.name,
                )
                raise
        component.configured = True

        if visible:
            component.on_prepare_for_render(self._prepare_for_render)

        _log.debug("bound %s name=%s id=%s", type(component).__name__, component.name, component.id)
        return component

    def _prepare_for_render(self, component: VisibleComponent) -> None:
        apply_validation_state(component, self.error_provider)

    # -- component kinds ------------------------------------------------------

    def hidden_field_for(self, prop: PropertyRef, model: Any, to_string: Optional[Callable[[Any], str]] = None) -> HiddenField:
        return self.bind(HiddenField(to_string), prop, model)

    def text_box_for(self, prop: PropertyRef, model: Any) -> TextBox:
        return self.bind(TextBox(**self._visible_options()), prop, model)

    def email_box_for(self, prop: PropertyRef, model: Any) -> EmailBox:
        return self.bind(EmailBox(**self._visible_options()), prop, model)

    def number_box_for(self, prop: PropertyRef, model: Any) -> NumberBox:
        return self.bind(NumberBox(**self._visible_options()), prop, model)

    def password_box_for(self, prop: PropertyRef, model: Any) -> PasswordBox:
        return self.bind(PasswordBox(**self._visible_options()), prop, model)

    def text_area_for(self, prop: PropertyRef, model: Any) -> TextArea:
        return self.bind(TextArea(**self._visible_options()), prop, model)

    def drop_down_for(
        self,
        prop: PropertyRef,
        model: Any,
        items: Optional[Iterable[Any]],
        item_value: Optional[Projection] = None,
        item_text: Optional[Projection] = None,
        item_attributes: Optional[Callable[[Any], Optional[Mapping[str, Any]]]] = None,
        property_value: Optional[Projection] = None,
    ) -> DropDown:
        component = DropDown(
            items,
            item_value,
            item_text,
            item_attributes,
            property_value=property_value,
            **self._visible_options(),
        )
        return self.bind(component, prop, model)

    def list_box_for(
        self,
        prop: PropertyRef,
        model: Any,
        items: Optional[Iterable[Any]],
        item_value: Optional[Projection] = None,
        item_text: Optional[Projection] = None,
        item_attributes: Optional[Callable[[Any], Optional[Mapping[str, Any]]]] = None,
        property_value: Optional[Projection] = None,
    ) -> ListBox:
        component = ListBox(
            items,
            item_value,
            item_text,
            item_attributes,
            property_value=property_value,
            **self._visible_options(),
        )
        return self.bind(component, prop, model)

    def check_box_for(self, prop: PropertyRef, model: Any) -> CheckBoxForBool:
        return self.bind(CheckBoxForBool(**self._visible_options()), prop, model)

    def check_box_for_member(self, prop: PropertyRef, model: Any, member: Any) -> CheckBoxForEnumerable:
        """Checkbox for one ``member`` of a collection-valued property."""
        return self.bind(CheckBoxForEnumerable(member, **self._visible_options()), prop, model)

    def check_box_list_for(
        self,
        prop: PropertyRef,
        model: Any,
        items: Optional[Iterable[Any]],
        item_value: Optional[Projection] = None,
        item_text: Optional[Projection] = None,
        is_selected: Optional[Callable[[Any, Any], bool]] = None,
    ) -> CheckBoxList:
        component = CheckBoxList(items, item_value, item_text, is_selected, **self._visible_options())
        return self.bind(component, prop, model)

    def radio_button_list_for(
        self,
        prop: PropertyRef,
        model: Any,
        items: Optional[Iterable[Any]],
        item_value: Optional[Projection] = None,
        item_text: Optional[Projection] = None,
        is_selected: Optional[Callable[[Any, Any], bool]] = None,
    ) -> RadioButtonList:
        component = RadioButtonList(items, item_value, item_text, is_selected, **self._visible_options())
        return self.bind(component, prop, model)

    def file_upload_for(self, prop: PropertyRef, model: Any) -> FileUpload:
        return self.bind(FileUpload(**self._visible_options()), prop, model)

    # -- validation messages --------------------------------------------------

    def validation_message_for(self, prop: PropertyRef, model: Any = None) -> str:
        """Standalone validation message for ``prop``; no component is built.

        ``model`` is accepted so call sites read like the ``*_for`` methods;
        the message depends only on the resolved name.
        """
        return self.validation_message_for_name(self.name_resolver.resolve_name(Accessor.of(prop)))

    def validation_message_for_name(self, name: str) -> str:
        return self.validation_message_renderer.render(
            self.error_provider.get_state_for(name),
            ValidationMarkerMode.ALWAYS,
            self.error_provider.get_errors_for(name),
            validation_message_id(name),
        )


__all__ = ["ComponentFactory"]
