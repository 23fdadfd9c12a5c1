import pytest
from unittest.mock import MagicMock, patch

from pagekit.core.selectors import Selector
from pagekit.elements import (
    CheckboxElement,
    DropdownElement,
    Element,
    ElementType,
    InputElement,
    TableElement,
    resolve_element_class,
)
from pagekit.elements.element import FIRE_EVENT_SCRIPT
from pagekit.exceptions import InvalidElementTypeError


@pytest.fixture
def source(make_web_element):
    parent = Element(make_web_element("form"))
    return Element(make_web_element("field"), parent=parent, by=Selector.parse("id", "field"))


def _attributes(values):
    return lambda name: values.get(name)


@pytest.mark.parametrize("element_type,element_class", [
    (ElementType.ELEMENT, Element),
    (ElementType.CHECKBOX, CheckboxElement),
    (ElementType.DROPDOWN, DropdownElement),
    (ElementType.INPUT, InputElement),
    (ElementType.TABLE, TableElement),
    ("table", TableElement),
    (CheckboxElement, CheckboxElement),
])
def test_resolve_element_class(element_type, element_class):
    """Types, type names and classes resolve to element classes."""
    assert resolve_element_class(element_type) is element_class


@pytest.mark.parametrize("target", ["radio", int, 3])
def test_resolve_element_class_rejects_unknown(target):
    """Unknown types are rejected."""
    with pytest.raises(ValueError):
        resolve_element_class(target)


def test_cast_to_checkbox(source):
    """Casting to a checkbox keeps parent and selector."""
    with patch.object(CheckboxElement, "get_tag_name", return_value="input"), \
         patch.object(CheckboxElement, "get_attribute", side_effect=_attributes({"type": "checkbox"})):
        checkbox = source.cast(ElementType.CHECKBOX)

    assert isinstance(checkbox, CheckboxElement)
    assert checkbox.id == source.id
    assert checkbox.parent_element is source.parent_element
    assert checkbox.by == source.by


def test_cast_to_checkbox_rejects_other_inputs(source):
    """Only checkbox inputs cast to CheckboxElement."""
    with patch.object(CheckboxElement, "get_tag_name", return_value="input"), \
         patch.object(CheckboxElement, "get_attribute", side_effect=_attributes({"type": "text"})):
        with pytest.raises(InvalidElementTypeError):
            source.cast(ElementType.CHECKBOX)


@pytest.mark.parametrize("checked,target,clicks", [
    (False, True, 1),
    (True, True, 0),
    (True, False, 1),
    (False, False, 0),
])
def test_checkbox_set(source, checked, target, clicks):
    """set() clicks only when the state has to change."""
    with patch.object(CheckboxElement, "normalize"):
        checkbox = source.cast(ElementType.CHECKBOX)

    with patch.object(checkbox, "is_selected", return_value=checked), \
         patch.object(checkbox, "click") as click:
        assert checkbox.set(target) is checkbox

    assert click.call_count == clicks


def test_cast_to_dropdown_rejects_non_select(source):
    """Only select elements cast to DropdownElement."""
    with patch.object(DropdownElement, "get_tag_name", return_value="div"):
        with pytest.raises(InvalidElementTypeError):
            source.cast(ElementType.DROPDOWN)


@patch("pagekit.elements.dropdown.Select")
def test_dropdown_caches_select_helper_until_reload(mock_select, source, driver, make_web_element):
    """The Select helper is rebuilt after a reload."""
    with patch.object(DropdownElement, "get_tag_name", return_value="select"):
        dropdown = source.cast(ElementType.DROPDOWN)

        assert dropdown.select_helper is dropdown.select_helper
        assert mock_select.call_count == 1

        with patch.object(dropdown.parent_element, "reload", return_value=dropdown.parent_element), \
             patch.object(dropdown.parent_element, "find_element", return_value=make_web_element("field-2")):
            dropdown.reload()

        assert dropdown.id == "field-2"
        dropdown.select_helper
        assert mock_select.call_count == 2


@patch("pagekit.elements.dropdown.Select")
def test_dropdown_reads_and_selects(mock_select, source):
    """Dropdown reads options and selection, and selects by text."""
    helper = mock_select.return_value
    first, second = MagicMock(text="Latvia"), MagicMock(text="Lithuania")
    helper.options = [first, second]
    helper.all_selected_options = [second]

    with patch.object(DropdownElement, "get_tag_name", return_value="select"):
        dropdown = source.cast(ElementType.DROPDOWN)

    assert dropdown.get_options() == ["Latvia", "Lithuania"]
    assert dropdown.get_value() == "Lithuania"
    assert dropdown.select("Latvia") is dropdown
    helper.select_by_visible_text.assert_called_once_with("Latvia")

    helper.all_selected_options = []
    assert dropdown.get_value() is None


def test_input_overwrite(source, driver):
    """overwrite() clears, types and fires change."""
    with patch.object(InputElement, "get_tag_name", return_value="textarea"):
        field = source.cast(ElementType.INPUT)

    with patch.object(field, "clear") as clear, patch.object(field, "send_keys") as send_keys:
        assert field.overwrite("hello") is field

    clear.assert_called_once_with()
    send_keys.assert_called_once_with("hello")
    driver.execute_script.assert_called_once_with(FIRE_EVENT_SCRIPT, field, "change")


def test_cast_to_input_rejects_div(source):
    """Only input and textarea elements cast to InputElement."""
    with patch.object(InputElement, "get_tag_name", return_value="div"):
        with pytest.raises(InvalidElementTypeError):
            source.cast(ElementType.INPUT)


def _text_elements(*texts):
    elements = []
    for text in texts:
        element = MagicMock()
        element.get_text.return_value = text
        elements.append(element)
    return elements


def _row(*texts):
    row = MagicMock()
    row.query.return_value.all.return_value = _text_elements(*texts)
    return row


def _table_queries(headers, rows):
    def query(selector):
        result = MagicMock()
        if selector == Selector.parse("css:thead th"):
            result.all.return_value = headers
        else:
            result.all.return_value = rows
        return result
    return query


def test_table_rows(source):
    """Table rows map header names to cell text."""
    with patch.object(TableElement, "get_tag_name", return_value="table"):
        table = source.cast(ElementType.TABLE)

    headers = _text_elements(" Name ", "Status")
    rows = [_row("web-01", "Up"), _row("db-01", "Down", "extra")]

    with patch.object(table, "query", side_effect=_table_queries(headers, rows)):
        assert table.get_headers() == ["Name", "Status"]
        assert table.get_rows() == [
            {"Name": "web-01", "Status": "Up"},
            {"Name": "db-01", "Status": "Down", "2": "extra"},
        ]
        assert table.find_row("Status", "Down") == {"Name": "db-01", "Status": "Down", "2": "extra"}
        assert table.find_row("Status", "Unknown") is None


def test_table_headers_cached_until_invalidate(source):
    """Headers are cached until invalidate()."""
    with patch.object(TableElement, "get_tag_name", return_value="table"):
        table = source.cast(ElementType.TABLE)

    with patch.object(table, "query", side_effect=_table_queries(_text_elements("Name"), [])) as query:
        table.get_headers()
        table.get_headers()
        assert query.call_count == 1

        table.invalidate()
        table.get_headers()
        assert query.call_count == 2


def test_table_options_from_cast(source):
    """cast() passes table options through."""
    with patch.object(TableElement, "get_tag_name", return_value="table"):
        table = source.cast(ElementType.TABLE, row_selector="css:tbody tr.data")

    assert table.options.row_selector == "css:tbody tr.data"
    assert table.options.header_selector == "css:thead th"
    assert table.by == source.by
