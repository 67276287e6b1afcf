"""
Unit tests for CaseProperties, the owner of the integer and double registries.

These tests validate:
- Routing of keywords to the registry of matching element type
- The PORV keyword registered through the catalog extension and its computed default
- Box-scoped EQUALS / MULTIPLY / ADD / COPY operations and explicit value loading
- The shared diagnostic sink and region listing
"""

import numpy as np
import pytest

from gridprops.core.case_properties import CaseProperties
from gridprops.core.errors import UnsupportedKeywordError
from gridprops.core.loader import build_config
from gridprops.schema.box import Box
from gridprops.schema.grid import GridGeometry


@pytest.fixture
def grid():
    """2x2x1 grid with distinct cell volumes."""
    return GridGeometry(2, 2, 1, cell_volumes=[1.0, 2.0, 3.0, 4.0])


@pytest.fixture
def case(grid):
    return CaseProperties(grid)


def test_supports_and_routing(case):
    assert case.supports_grid_property("SATNUM")
    assert case.supports_grid_property("PORO")
    assert case.supports_grid_property("PORV")
    assert not case.supports_grid_property("SWAT")

    assert case.get_int_grid_property("SATNUM").data.tolist() == [1, 1, 1, 1]
    np.testing.assert_allclose(case.get_double_grid_property("NTG").data, [1.0] * 4)
    assert not case.has_deck_int_grid_property("SATNUM")
    assert not case.has_deck_double_grid_property("NTG")

    with pytest.raises(UnsupportedKeywordError):
        case.has_deck_int_grid_property("PORO")
    with pytest.raises(UnsupportedKeywordError):
        case.get_int_grid_property("PORO")
    with pytest.raises(UnsupportedKeywordError):
        case.load_keyword("SWAT", [0.0] * 4)


def test_catalog_extension_already_claimed(case):
    with pytest.raises(RuntimeError):
        case.double_grid_properties.claim_catalog_extension()
    # the integer registry never issued its capability
    case.int_grid_properties.claim_catalog_extension()


def test_porv_default_from_rock_properties(case):
    case.load_keyword("PORO", [0.1, 0.2, 0.3, 0.4])
    case.load_keyword("NTG", [1.0, 0.5, 1.0, 0.5])

    porv = case.get_double_grid_property("PORV")
    np.testing.assert_allclose(porv.data, [0.1, 0.2, 0.9, 0.8])
    assert case.double_grid_properties.is_auto_generated("PORV")
    assert len(case.messages) == 0


def test_porv_auto_generates_dependencies_and_warns_on_late_poro(case):
    porv = case.get_double_grid_property("PORV")
    np.testing.assert_allclose(porv.data, [0.0] * 4)
    assert case.double_grid_properties.keywords() == ["PORV", "PORO", "NTG", "MULTPV"]
    assert not case.has_deck_double_grid_property("PORO")

    case.load_keyword("PORO", [0.25] * 4)

    assert case.has_deck_double_grid_property("PORO")
    assert len(case.messages) == 1
    assert "PORO" in case.messages[0].text
    # dependent state computed earlier is kept as is
    np.testing.assert_allclose(case.get_double_grid_property("PORV").data, [0.0] * 4)


def test_explicit_porv_keeps_deck_values(case):
    case.load_keyword("PORO", [0.2] * 4)
    case.load_keyword("PORV", [5.0, 6.0, 7.0, 8.0])
    np.testing.assert_allclose(case.get_double_grid_property("PORV").data, [5.0, 6.0, 7.0, 8.0])
    assert case.has_deck_double_grid_property("PORV")


def test_load_keyword_in_box(case):
    box = Box(2, 2, 1, 0, 1, 1, 1, 0, 0)
    case.load_keyword("SATNUM", [2, 3], box=box)
    assert case.get_int_grid_property("SATNUM").data.tolist() == [1, 1, 2, 3]
    assert case.has_deck_int_grid_property("SATNUM")
    assert case.get_regions("SATNUM") == [1, 2, 3]

    with pytest.raises(ValueError, match="box holds 2 cells"):
        case.load_keyword("SATNUM", [1, 2, 3], box=box)


def test_box_operations(case):
    column = Box(2, 2, 1, 0, 0, 0, 1, 0, 0)
    case.equals("PERMX", 100.0)
    case.multiply("PERMX", 0.5, column)
    case.add("PERMX", 1.0, column)
    np.testing.assert_allclose(case.get_double_grid_property("PERMX").data, [51.0, 100.0, 51.0, 100.0])
    assert case.has_deck_double_grid_property("PERMX")

    case.copy("PERMX", "PERMY")
    case.copy("PERMX", "PERMZ", column)
    case.multiply("PERMZ", 0.1)
    np.testing.assert_allclose(case.get_double_grid_property("PERMY").data, [51.0, 100.0, 51.0, 100.0])
    np.testing.assert_allclose(case.get_double_grid_property("PERMZ").data, [5.1, 0.0, 5.1, 0.0])


def test_copy_between_element_types_rejected(case):
    with pytest.raises(ValueError, match="element types differ"):
        case.copy("SATNUM", "PORO")


def test_box_on_wrong_grid_rejected(case):
    with pytest.raises(ValueError, match="do not match grid dims"):
        case.equals("PORO", 0.1, Box.whole((4, 1, 1)))


def test_shared_message_sink(case):
    case.get_int_grid_property("FIPNUM")
    case.get_double_grid_property("NTG")
    case.equals("FIPNUM", 2)
    case.equals("NTG", 0.9)
    assert [m.text.split()[2] for m in case.messages] == ["FIPNUM", "NTG"]
    assert case.int_grid_properties.messages is case.double_grid_properties.messages


def test_from_config(grid):
    config = build_config(grid, int_keywords=[], verbose=True)
    case = CaseProperties.from_config(config)
    assert case.config is config
    assert case.grid is grid
    assert not case.supports_grid_property("SATNUM")
    assert case.supports_grid_property("PORV")


def test_copy_on_zero_cell_grid():
    case = CaseProperties(GridGeometry(0, 2, 1))
    case.copy("PERMX", "PERMY")
    assert case.has_deck_double_grid_property("PERMY")
    assert len(case.get_double_grid_property("PERMY")) == 0


def test_non_integral_operands_rejected_for_region_keywords(case):
    with pytest.raises(ValueError, match="non-integral"):
        case.equals("SATNUM", 2.7)
    with pytest.raises(ValueError, match="non-integral"):
        case.multiply("FIPNUM", 1.5)
    case.multiply("FIPNUM", 2.0)
    assert case.get_regions("FIPNUM") == [2]
