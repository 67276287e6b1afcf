"""Registry core and the case-level owner."""

from gridprops.core.case_properties import CaseProperties
from gridprops.core.catalog import CatalogExtension, KeywordCatalog
from gridprops.core.loader import build_config
from gridprops.core.messages import Message, MessageContainer, MessageType
from gridprops.core.registry import GridProperties

__all__ = [
    "CaseProperties",
    "CatalogExtension",
    "GridProperties",
    "KeywordCatalog",
    "Message",
    "MessageContainer",
    "MessageType",
    "build_config",
]
