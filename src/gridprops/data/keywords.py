"""Default catalogs of the integer and floating point grid keywords."""

from natsort import natsorted

from gridprops.schema.keyword_info import SupportedKeywordInfo

REGION_KEYWORDS = (
    "SATNUM",
    "IMBNUM",
    "PVTNUM",
    "EQLNUM",
    "ENDNUM",
    "FLUXNUM",
    "MULTNUM",
    "FIPNUM",
    "MISCNUM",
    "OPERNUM",
)

TRANSMISSIBILITY_MULTIPLIERS = ("MULTX", "MULTX-", "MULTY", "MULTY-", "MULTZ", "MULTZ-")

# region numbers are one-based; every cell starts in region 1
INT_KEYWORDS: list[SupportedKeywordInfo] = [SupportedKeywordInfo(name, 1, dimension="1") for name in REGION_KEYWORDS]
INT_KEYWORDS.append(SupportedKeywordInfo("ACTNUM", 1, dimension="1"))

DOUBLE_KEYWORDS: list[SupportedKeywordInfo] = [
    SupportedKeywordInfo("PORO", 0.0, dimension="1"),
    SupportedKeywordInfo("PERMX", 0.0, dimension="Permeability"),
    SupportedKeywordInfo("PERMY", 0.0, dimension="Permeability"),
    SupportedKeywordInfo("PERMZ", 0.0, dimension="Permeability"),
    SupportedKeywordInfo("NTG", 1.0, dimension="1"),
    SupportedKeywordInfo("MULTPV", 1.0, dimension="1"),
    SupportedKeywordInfo("SWATINIT", 0.0, dimension="1"),
    SupportedKeywordInfo("TEMPI", float("nan"), dimension="Temperature"),
    SupportedKeywordInfo("THCONR", 0.0, dimension="Energy/AbsoluteTemperature*Length*Time"),
]
DOUBLE_KEYWORDS.extend(SupportedKeywordInfo(name, 1.0, dimension="1") for name in TRANSMISSIBILITY_MULTIPLIERS)


def list_keywords(table: list[SupportedKeywordInfo]) -> list[str]:
    """
    Return the keyword names of a table in natural sort order.

    Examples
    --------
    >>> list_keywords([SupportedKeywordInfo("MULTZ", 1.0), SupportedKeywordInfo("MULTX", 1.0)])
    ['MULTX', 'MULTZ']
    """
    return natsorted(info.keyword_name for info in table)
