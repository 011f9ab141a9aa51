# formbind
# Server-side form components: bind a view-model property, render HTML.

from .components import (
    Component,
    VisibleComponent,
    TextBox,
    EmailBox,
    NumberBox,
    PasswordBox,
    TextArea,
    CheckBoxForBool,
    CheckBoxForEnumerable,
    DropDown,
    ListBox,
    CheckBoxList,
    RadioButtonList,
    HiddenField,
    FileUpload,
)
from .config import FormSettings, SettingsFormConfiguration, CompositeFormConfiguration, load_settings
from .exceptions import (
    FormbindError,
    ComponentConstructionError,
    ComponentRenderingError,
    ValueResolutionError,
    ConfigurationError,
)
from .factory import ComponentFactory
from .model_state import ModelState
from .ports import Accessor, ComponentPart, ComponentState, ValidationMarkerMode
from .resolvers import DefaultIdResolver, DefaultNameResolver, DictionaryTermResolver
from .tag_builder import HTML_PROPERTY, TagBuilder
from .validation_message import ValidationMessageRenderer

__all__ = [
    "Component",
    "VisibleComponent",
    "TextBox",
    "EmailBox",
    "NumberBox",
    "PasswordBox",
    "TextArea",
    "CheckBoxForBool",
    "CheckBoxForEnumerable",
    "DropDown",
    "ListBox",
    "CheckBoxList",
    "RadioButtonList",
    "HiddenField",
    "FileUpload",
    "FormSettings",
    "SettingsFormConfiguration",
    "CompositeFormConfiguration",
    "load_settings",
    "FormbindError",
    "ComponentConstructionError",
    "ComponentRenderingError",
    "ValueResolutionError",
    "ConfigurationError",
    "ComponentFactory",
    "ModelState",
    "Accessor",
    "ComponentPart",
    "ComponentState",
    "ValidationMarkerMode",
    "DefaultIdResolver",
    "DefaultNameResolver",
    "DictionaryTermResolver",
    "HTML_PROPERTY",
    "TagBuilder",
    "ValidationMessageRenderer",
]
