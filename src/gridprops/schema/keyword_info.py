"""
Structured description of a keyword the property registry is able to hold.

Defines the SupportedKeywordInfo dataclass, which pairs a keyword name with the value
used to fill a new property, the post-processor applied after filling, and an opaque
physical-dimension tag forwarded to downstream unit handling.
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Union

import numpy as np
from numpy.typing import NDArray

from gridprops.utils.validation import validate_keyword_name

PostProcessor = Callable[[NDArray[Any]], None]


def noop(values: NDArray[Any]) -> None:
    """Post-processor that leaves the property values untouched."""
    return None


@dataclass(frozen=True)
class SupportedKeywordInfo:
    """
    Catalog entry for a single supported grid keyword.

    Attributes
    ----------
    keyword_name : str
        Deck keyword, e.g. "PORO" or "SATNUM".
    default_value : int or float
        Value assigned to every cell when the property is materialized.
        Its Python type selects the element dtype of the property array.
    post_processor : callable, optional
        Called with the live value array right after default filling;
        it mutates the array in place.
    dimension : str, optional
        Physical-dimension tag (e.g. "Permeability"); not interpreted here.
    """

    keyword_name: str
    default_value: Union[int, float]
    post_processor: PostProcessor = field(default=noop, compare=False)
    dimension: str = "1"

    def __post_init__(self) -> None:
        validate_keyword_name(self.keyword_name)

    @property
    def dtype(self) -> np.dtype:
        """np.dtype: Element type of properties built from this entry."""
        if isinstance(self.default_value, (bool, np.bool_)):
            raise TypeError(f"Keyword {self.keyword_name} has a boolean default; use 0/1 integers.")
        if isinstance(self.default_value, (int, np.integer)):
            return np.dtype(np.int64)
        return np.dtype(np.float64)
