"""
DropDown and ListBox: option rendering and selection.

Why:
    Select controls combine application items with a bound value that may be
    a different type (an id versus an entity); option order, the null option
    markup and selection matching must be predictable.
"""

from __future__ import annotations

from dataclasses import dataclass

import pytest

from formbind import (
    ComponentConstructionError,
    ComponentPart,
    DictionaryTermResolver,
    DropDown,
    ListBox,
)


@dataclass(frozen=True)
class Colour:
    id: int
    name: str
    hex: str = "#000"


COLOURS = [Colour(1, "Red", "#f00"), Colour(2, "Green", "#0f0")]


def test_null_option_renders_first_with_marker_attribute() -> None:
    drop_down = DropDown(["a", "b"]).with_name("letter").with_id("ddl_letter")
    drop_down.with_null_option("Choose")
    assert drop_down.render() == (
        '<select name="letter" id="ddl_letter">'
        '<option value="" data-null-value="true">Choose</option>'
        '<option value="a">a</option>'
        '<option value="b">b</option>'
        "</select>"
    )


def test_null_option_text_defaults_to_localized_term() -> None:
    terms = DictionaryTermResolver({"de": {"Choose": "Bitte wählen"}})
    drop_down = DropDown(["a"], term_resolver=terms, culture="de-DE").with_name("letter")
    drop_down.with_null_option()
    assert '<option value="" data-null-value="true">Bitte wählen</option>' in drop_down.render()


def test_null_option_can_submit_a_projected_value() -> None:
    drop_down = DropDown(COLOURS, lambda c: str(c.id), lambda c: c.name).with_name("colour")
    drop_down.with_null_option("None", value=Colour(0, "None"))
    assert '<option value="0" data-null-value="true">None</option>' in drop_down.render()


def test_bound_item_is_selected_by_equality() -> None:
    drop_down = DropDown(["a", "b", "c"]).with_name("letter").with_value("b")
    html = drop_down.render()
    assert '<option value="b" selected="selected">b</option>' in html
    assert html.count('selected="selected"') == 1


def test_property_value_projection_matches_bound_id() -> None:
    drop_down = DropDown(
        COLOURS,
        lambda c: str(c.id),
        lambda c: c.name,
        property_value=str,
    ).with_name("colour_id")
    drop_down.with_value(2)
    html = drop_down.render()
    assert '<option value="2" selected="selected">Green</option>' in html
    assert '<option value="1">Red</option>' in html


def test_item_attributes_render_before_value() -> None:
    drop_down = DropDown(
        COLOURS,
        lambda c: str(c.id),
        lambda c: c.name,
        lambda c: {"data-hex": c.hex},
    ).with_name("colour_id")
    assert '<option data-hex="#f00" value="1">Red</option>' in drop_down.render()


def test_attempted_value_selects_option() -> None:
    drop_down = DropDown(COLOURS, lambda c: str(c.id), lambda c: c.name).with_name("colour_id")
    drop_down.with_value(Colour(2, "Green", "#0f0"))
    drop_down.with_attempted_value("1")
    html = drop_down.render()
    assert '<option value="1" selected="selected">Red</option>' in html
    assert '<option value="2">Green</option>' in html


def test_option_text_is_escaped() -> None:
    drop_down = DropDown(["<b>"]).with_name("x")
    assert '<option value="&lt;b&gt;">&lt;b&gt;</option>' in drop_down.render()


def test_label_part_renders_before_select() -> None:
    drop_down = DropDown(["a"]).with_name("letter").with_id("ddl_letter").with_label("Letter")
    html = drop_down.render()
    assert html.startswith('<label for="ddl_letter">Letter</label><select')


def test_none_items_are_rejected_at_construction() -> None:
    with pytest.raises(ComponentConstructionError):
        DropDown(None)
    with pytest.raises(ValueError):
        ListBox(None)


def test_list_box_selects_every_member_of_bound_collection() -> None:
    list_box = ListBox(["a", "b", "c"]).with_name("tags").with_value(["a", "c"])
    list_box.with_rendering_order(ComponentPart.COMPONENT)
    assert list_box.render() == (
        '<select name="tags" multiple="multiple">'
        '<option value="a" selected="selected">a</option>'
        '<option value="b">b</option>'
        '<option value="c" selected="selected">c</option>'
        "</select>"
    )


def test_list_box_attempted_values_are_comma_separated() -> None:
    list_box = ListBox(["a", "b", "c"]).with_name("tags").with_value(["a"])
    list_box.with_attempted_value("b,c")
    html = list_box.render()
    assert '<option value="a">a</option>' in html
    assert '<option value="b" selected="selected">b</option>' in html
    assert '<option value="c" selected="selected">c</option>' in html


def test_list_box_property_value_matches_members() -> None:
    list_box = ListBox(COLOURS, lambda c: str(c.id), lambda c: c.name, property_value=str)
    list_box.with_name("colour_ids").with_value([1])
    assert '<option value="1" selected="selected">Red</option>' in list_box.render()
