"""
CheckBoxList and RadioButtonList: one input per item.

Why:
    Each item gets its own input and label with a derived id, and selection
    is decided by a predicate so collection-valued properties can be matched
    however the application needs.
"""

from __future__ import annotations

import pytest

from formbind import CheckBoxList, ComponentState, RadioButtonList
from formbind.components import ChoiceListComponent


def test_check_box_list_markup() -> None:
    boxes = CheckBoxList(["a", "b"]).with_name("tags").with_id("chkl_tags").with_value(["b"])
    assert boxes.render() == (
        '<div id="chkl_tags" class="checkbox-list" role="group">'
        '<span class="checkbox-list__item">'
        '<input type="checkbox" name="tags" id="chkl_tags_0" value="a" />'
        '<label for="chkl_tags_0">a</label>'
        "</span>"
        '<span class="checkbox-list__item">'
        '<input type="checkbox" name="tags" id="chkl_tags_1" value="b" checked="checked" />'
        '<label for="chkl_tags_1">b</label>'
        "</span>"
        "</div>"
    )


def test_check_box_list_custom_predicate() -> None:
    boxes = CheckBoxList(
        ["apple", "banana", "cherry"],
        is_selected=lambda bound, item: item.startswith(bound),
    ).with_name("fruit")
    boxes.with_value("b")
    html = boxes.render()
    assert 'value="banana" checked="checked"' in html
    assert html.count('checked="checked"') == 1


def test_check_box_list_matches_formatted_values() -> None:
    boxes = CheckBoxList([1, 2, 3], item_value=str).with_name("days").with_value([2, 3])
    html = boxes.render()
    assert 'value="1" checked' not in html
    assert 'value="2" checked="checked"' in html
    assert 'value="3" checked="checked"' in html


def test_check_box_list_attempted_values_override_bound() -> None:
    boxes = CheckBoxList(["a", "b"]).with_name("tags").with_value(["a"])
    boxes.with_attempted_value("b")
    html = boxes.render()
    assert 'value="a" checked' not in html
    assert 'value="b" checked="checked"' in html


def test_disabled_list_disables_every_input() -> None:
    boxes = CheckBoxList(["a", "b"]).with_name("tags").with_disabled()
    html = boxes.render()
    assert html.count('disabled="disabled"') == 2
    assert html.startswith('<div class="checkbox-list" role="group"><span')


def test_choice_list_base_requires_a_selection_rule() -> None:
    with pytest.raises(TypeError):
        ChoiceListComponent(["a"])


def test_item_text_is_escaped() -> None:
    boxes = CheckBoxList(["x"], item_text=lambda item: "<i>x</i>").with_name("tags")
    assert "&lt;i&gt;x&lt;/i&gt;" in boxes.render()


def test_radio_button_list_checks_single_item() -> None:
    radios = RadioButtonList([1, 2, 3]).with_name("rating").with_id("rbl_rating").with_value(2)
    html = radios.render()
    assert html.startswith('<div id="rbl_rating" class="radio-list" role="radiogroup">')
    assert '<input type="radio" name="rating" id="rbl_rating_1" value="2" checked="checked" />' in html
    assert html.count('checked="checked"') == 1
    assert '<span class="radio-list__item">' in html


def test_radio_button_list_with_attempted_value() -> None:
    radios = RadioButtonList(["s", "m", "l"]).with_name("size").with_value("s")
    radios.with_attempted_value("l")
    html = radios.render()
    assert 'value="l" checked="checked"' in html
    assert 'value="s" checked' not in html


def test_invalid_list_marks_container() -> None:
    radios = RadioButtonList(["s", "m"]).with_name("size").with_id("rbl_size")
    radios.with_state(ComponentState.INVALID, ["Pick a size"])
    html = radios.render()
    assert html.startswith(
        '<div id="rbl_size" class="radio-list radio-list--invalid input-validation-error" role="radiogroup" '
        'aria-invalid="true" aria-describedby="size-validation">'
    )
    assert '<p class="form-error">Pick a size</p>' in html
