"""
ComponentFactory: binding view-model properties to components.

Why:
    Call sites only name a property; the factory must derive name, id, value
    and label consistently, run the configuration hook once and defer the
    validation lookup until the component renders.
"""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from formbind import (
    Accessor,
    CheckBoxForBool,
    ComponentFactory,
    ComponentPart,
    DictionaryTermResolver,
    DropDown,
    FormSettings,
    ModelState,
    TextBox,
    ValidationMarkerMode,
    ValueResolutionError,
)


def test_text_box_for_renders_exact_markup() -> None:
    """Default factory: no configuration, hidden label, unvalidated state."""
    model = SimpleNamespace(greeting="hello")
    html = ComponentFactory(culture="en-GB").text_box_for("greeting", model).render()
    assert html == '<input type="text" name="greeting" id="txt_greeting" value="hello" />'


def test_bound_component_carries_name_id_value_and_label(factory: ComponentFactory, person) -> None:
    box = factory.text_box_for("first_name", person)
    assert isinstance(box, TextBox)
    assert box.name == "first_name"
    assert box.id == "txt_first_name"
    assert box.value == "Ada"
    assert box.label == "First name"
    assert box.label_visible is False
    assert box.configured is True


def test_nested_path_binds_value_and_safe_id(factory: ComponentFactory, person) -> None:
    box = factory.text_box_for("address.city", person)
    assert box.render() == '<input type="text" name="address.city" id="txt_address_city" value="London" />'


def test_accessor_with_getter(factory: ComponentFactory, person) -> None:
    accessor = Accessor("display_name", lambda p: f"{p.first_name}!")
    assert 'value="Ada!"' in factory.text_box_for(accessor, person).render()


def test_control_prefixes_per_kind(factory: ComponentFactory, person) -> None:
    assert factory.email_box_for("email", person).id == "txt_email"
    assert factory.number_box_for("age", person).id == "num_age"
    assert factory.password_box_for("first_name", person).id == "pwd_first_name"
    assert factory.text_area_for("first_name", person).id == "txa_first_name"
    assert factory.check_box_for("subscribed", person).id == "chk_subscribed"
    assert factory.drop_down_for("first_name", person, ["Ada"]).id == "ddl_first_name"
    assert factory.list_box_for("roles", person, ["admin"]).id == "lst_roles"
    assert factory.check_box_list_for("roles", person, ["admin"]).id == "chkl_roles"
    assert factory.radio_button_list_for("first_name", person, ["Ada"]).id == "rbl_first_name"
    assert factory.file_upload_for("first_name", person).id == "fu_first_name"
    assert factory.hidden_field_for("age", person).id == "hdn_age"


def test_missing_intermediate_raises_value_resolution_error(factory: ComponentFactory) -> None:
    model = SimpleNamespace(address=None)
    with pytest.raises(ValueResolutionError) as info:
        factory.text_box_for("address.city", model)
    assert info.value.accessor == "address.city"
    assert isinstance(info.value.__cause__, AttributeError)
    assert "address.city" in str(info.value)


def test_none_model_leaves_value_unset(factory: ComponentFactory) -> None:
    html = factory.text_box_for("greeting", None).render()
    assert html == '<input type="text" name="greeting" id="txt_greeting" />'


def test_label_is_localized_but_hidden_until_requested() -> None:
    terms = DictionaryTermResolver({"de": {"first_name": "Vorname"}})
    factory = ComponentFactory(term_resolver=terms, culture="de-DE")
    box = factory.text_box_for("first_name", SimpleNamespace(first_name="Ada"))
    assert "<label" not in box.render()
    box.with_visible_label()
    assert box.render().startswith('<label for="txt_first_name">Vorname</label>')


def test_validation_state_is_looked_up_at_render_time(factory: ComponentFactory, model_state: ModelState, person) -> None:
    box = factory.number_box_for("age", person)
    model_state.add_error("age", "Must be a number").set_attempted_value("age", "abc")
    html = box.render()
    assert html.startswith(
        '<input type="number" name="age" id="num_age" value="abc" '
        'aria-invalid="true" aria-describedby="age-validation" class="input-validation-error" />'
    )
    assert '<p class="form-error">Must be a number</p>' in html


def test_factory_preparer_overrides_manual_state(factory: ComponentFactory, model_state: ModelState, person) -> None:
    model_state.mark_validated()
    box = factory.text_box_for("first_name", person)
    box.with_state("invalid", ["manual"])
    html = box.render()
    assert "manual" not in html
    assert box.state.value == "valid"


def test_configuration_runs_once_per_component(person) -> None:
    seen = []

    class Recording:
        def initialize(self, component) -> None:
            seen.append((type(component).__name__, component.name, component.configured))
            component.with_class("form-control")

    factory = ComponentFactory(configuration=Recording())
    html = factory.text_box_for("first_name", person).render()
    factory.hidden_field_for("age", person)
    assert seen == [("TextBox", "first_name", False), ("HiddenField", "age", False)]
    assert 'class="form-control"' in html


def test_configuration_failure_propagates(person, caplog: pytest.LogCaptureFixture) -> None:
    class Broken:
        def initialize(self, component) -> None:
            raise RuntimeError("boom")

    factory = ComponentFactory(configuration=Broken())
    with pytest.raises(RuntimeError, match="boom"):
        factory.text_box_for("first_name", person)
    assert "form configuration failed" in caplog.text


def test_settings_are_applied_as_configuration(person) -> None:
    settings = FormSettings(input_class="form-input", validation_marker=ValidationMarkerMode.ALWAYS)
    factory = ComponentFactory(settings=settings)
    html = factory.text_box_for("first_name", person).render()
    assert html == (
        '<input type="text" name="first_name" id="txt_first_name" value="Ada" class="form-input" />'
        '<div class="validation-message" id="first_name-validation"></div>'
    )


def test_check_box_for_binds_boolean(factory: ComponentFactory, person) -> None:
    box = factory.check_box_for("subscribed", person)
    assert isinstance(box, CheckBoxForBool)
    assert box.render() == (
        '<input type="checkbox" name="subscribed" id="chk_subscribed" value="TRUE" checked="checked" />'
        '<input type="hidden" name="subscribed" value="FALSE" />'
    )


def test_check_box_for_member(factory: ComponentFactory, person) -> None:
    box = factory.check_box_for_member("roles", person, "editor")
    assert 'value="editor" checked="checked"' in box.render()


def test_drop_down_for_with_null_option(factory: ComponentFactory) -> None:
    model = SimpleNamespace(colour_id=2)
    colours = [(1, "Red"), (2, "Green")]
    drop_down = factory.drop_down_for(
        "colour_id",
        model,
        colours,
        item_value=lambda c: str(c[0]),
        item_text=lambda c: c[1],
        property_value=str,
    )
    assert isinstance(drop_down, DropDown)
    drop_down.with_null_option().with_rendering_order(ComponentPart.COMPONENT)
    assert drop_down.render() == (
        '<select name="colour_id" id="ddl_colour_id">'
        '<option value="" data-null-value="true">Choose</option>'
        '<option value="1">Red</option>'
        '<option value="2" selected="selected">Green</option>'
        "</select>"
    )


def test_check_box_list_for_with_predicate(factory: ComponentFactory, person) -> None:
    boxes = factory.check_box_list_for(
        "roles",
        person,
        ["admin", "viewer"],
        is_selected=lambda bound, item: item in bound,
    )
    html = boxes.render()
    assert 'id="chkl_roles_0" value="admin" checked="checked"' in html
    assert 'id="chkl_roles_1" value="viewer" />' in html


def test_validation_message_for_always_renders_container(factory: ComponentFactory, model_state: ModelState) -> None:
    assert factory.validation_message_for("email") == '<div class="validation-message" id="email-validation"></div>'
    model_state.add_error("email", "Invalid address")
    assert factory.validation_message_for_name("email") == (
        '<div class="validation-message validation-message--invalid" id="email-validation" role="alert">'
        '<p class="form-error">Invalid address</p></div>'
    )
