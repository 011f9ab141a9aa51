"""
Form control components.

Provides the component base classes and the fixed catalog of form-control
kinds rendered by the component factory.
"""

from .base import Component, RenderState
from .visible import VisibleComponent, apply_validation_state
from .text import FormattableComponent, TextBox, EmailBox, NumberBox, PasswordBox, TextArea
from .checkbox import CheckBoxForBool, CheckBoxForEnumerable
from .choice import ItemsComponent, SelectComponent, DropDown, ListBox
from .lists import ChoiceListComponent, CheckBoxList, RadioButtonList
from .hidden import HiddenField
from .upload import FileUpload

__all__ = [
    "Component",
    "RenderState",
    "VisibleComponent",
    "apply_validation_state",
    "FormattableComponent",
    "TextBox",
    "EmailBox",
    "NumberBox",
    "PasswordBox",
    "TextArea",
    "CheckBoxForBool",
    "CheckBoxForEnumerable",
    "ItemsComponent",
    "SelectComponent",
    "DropDown",
    "ListBox",
    "ChoiceListComponent",
    "CheckBoxList",
    "RadioButtonList",
    "HiddenField",
    "FileUpload",
]
