"""Configuration container for assembling the grid properties of one simulation case."""

import logging
from dataclasses import dataclass

from gridprops.schema.grid import GridGeometry
from gridprops.schema.keyword_info import SupportedKeywordInfo


@dataclass
class PropertiesConfig:
    """
    Inputs required to build the integer and double property registries of a case.

    Notes
    -----
    - ``grid`` is borrowed by every registry built from this config.
    - Keyword lists are handed to the registries unchanged; duplicates resolve last-wins.
    """

    grid: GridGeometry
    int_keywords: list[SupportedKeywordInfo]
    double_keywords: list[SupportedKeywordInfo]
    logger: logging.Logger
    verbose: bool = False
