"""Tests for the default keyword tables and config building."""

import numpy as np
import pytest

from gridprops.core.loader import build_config
from gridprops.core.registry import GridProperties
from gridprops.data.keywords import DOUBLE_KEYWORDS, INT_KEYWORDS, list_keywords
from gridprops.schema.grid import GridGeometry
from gridprops.schema.keyword_info import SupportedKeywordInfo


def test_tables_are_typed():
    assert all(info.dtype == np.int64 for info in INT_KEYWORDS)
    assert all(info.dtype == np.float64 for info in DOUBLE_KEYWORDS)


def test_list_keywords_natural_order():
    table = [SupportedKeywordInfo(name, 1) for name in ("FIPNUM10", "FIPNUM2", "FIPNUM1")]
    assert list_keywords(table) == ["FIPNUM1", "FIPNUM2", "FIPNUM10"]
    assert "PORV" not in list_keywords(DOUBLE_KEYWORDS)


def test_build_config_defaults():
    grid = GridGeometry(1, 1, 1)
    config = build_config(grid)
    assert config.grid is grid
    assert [k.keyword_name for k in config.int_keywords] == [k.keyword_name for k in INT_KEYWORDS]
    assert config.double_keywords is not DOUBLE_KEYWORDS
    assert not config.verbose


def test_build_config_custom_tables():
    config = build_config(GridGeometry(1, 1, 1), int_keywords=[], double_keywords=[SupportedKeywordInfo("PORO", 0.1)])
    assert config.int_keywords == []
    assert [k.keyword_name for k in config.double_keywords] == ["PORO"]


@pytest.mark.parametrize("name, error", [("", ValueError), ("   ", ValueError), (5, TypeError), (None, TypeError)])
def test_keyword_names_validated(name, error):
    with pytest.raises(error):
        SupportedKeywordInfo(name, 0.0)


def test_catalog_extension_validates_name():
    registry = GridProperties(GridGeometry(1, 1, 1), [])
    extension = registry.claim_catalog_extension()
    with pytest.raises(ValueError, match="must not be empty"):
        extension.post_add_keyword("", 0.0)
    assert len(registry.catalog) == 0
