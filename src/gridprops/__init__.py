"""gridprops package."""

from gridprops._version import __version__
from gridprops.core.case_properties import CaseProperties
from gridprops.core.errors import KeywordIndexError, NotInitializedError, UnsupportedKeywordError
from gridprops.core.registry import GridProperties
from gridprops.properties.grid_property import GridProperty
from gridprops.schema.box import Box
from gridprops.schema.grid import GridGeometry
from gridprops.schema.keyword_info import SupportedKeywordInfo

__all__ = [
    "Box",
    "CaseProperties",
    "GridGeometry",
    "GridProperties",
    "GridProperty",
    "KeywordIndexError",
    "NotInitializedError",
    "SupportedKeywordInfo",
    "UnsupportedKeywordError",
    "__version__",
]
