"""Builds PropertiesConfig objects from a grid and optional keyword tables."""

from typing import Optional

from gridprops.data.keywords import DOUBLE_KEYWORDS, INT_KEYWORDS
from gridprops.schema.config import PropertiesConfig
from gridprops.schema.grid import GridGeometry
from gridprops.schema.keyword_info import SupportedKeywordInfo
from gridprops.utils.logging import get_logger


def build_config(
    grid: GridGeometry,
    int_keywords: Optional[list[SupportedKeywordInfo]] = None,
    double_keywords: Optional[list[SupportedKeywordInfo]] = None,
    verbose: bool = False,
) -> PropertiesConfig:
    """
    Construct a PropertiesConfig for one case.

    Parameters
    ----------
    grid : GridGeometry
        Geometry of the case.
    int_keywords : list[SupportedKeywordInfo], optional
        Integer keyword catalog. Defaults to ``gridprops.data.keywords.INT_KEYWORDS``.
    double_keywords : list[SupportedKeywordInfo], optional
        Double keyword catalog. Defaults to ``gridprops.data.keywords.DOUBLE_KEYWORDS``.
    verbose : bool, optional
        If True, enables detailed logging output.

    Returns
    -------
    PropertiesConfig
        Configuration consumed by ``CaseProperties``.
    """
    logger = get_logger(f"{__name__}.build_config", verbose=verbose)
    int_keywords = list(INT_KEYWORDS if int_keywords is None else int_keywords)
    double_keywords = list(DOUBLE_KEYWORDS if double_keywords is None else double_keywords)
    logger.debug(
        f"Building config for {grid.nx}x{grid.ny}x{grid.nz} grid with "
        f"{len(int_keywords)} integer and {len(double_keywords)} double keywords"
    )
    return PropertiesConfig(
        grid=grid,
        int_keywords=int_keywords,
        double_keywords=double_keywords,
        logger=logger,
        verbose=verbose,
    )
