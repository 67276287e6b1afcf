"""
Dense per-cell property array for a single grid keyword.

GridProperty stores one value per grid cell in flat (i-fastest) order and offers the
region-scoped assignment, arithmetic and copy operations used while a case is assembled.
The defaulting behavior comes from the SupportedKeywordInfo it is built from.
"""

from typing import Any, Optional

import numpy as np
from numpy.typing import ArrayLike, NDArray

from gridprops.schema.box import Box
from gridprops.schema.keyword_info import SupportedKeywordInfo
from gridprops.utils.validation import validate_dims


class GridProperty:
    """
    Per-cell values of one keyword on an (nx, ny, nz) grid.

    Parameters
    ----------
    nx, ny, nz : int
        Grid extents.
    keyword_info : SupportedKeywordInfo
        Catalog entry providing name, default value, post-processor and dimension.
    """

    def __init__(self, nx: int, ny: int, nz: int, keyword_info: SupportedKeywordInfo) -> None:
        self._dims = validate_dims(nx, ny, nz)
        self._keyword_info = keyword_info
        self._data = np.full(nx * ny * nz, keyword_info.default_value, dtype=keyword_info.dtype)

    def __repr__(self) -> str:
        nx, ny, nz = self._dims
        return f"GridProperty({self.keyword_name!r}, dims={nx}x{ny}x{nz}, dtype={self._data.dtype})"

    def __len__(self) -> int:
        return self._data.size

    def __getitem__(self, index: Any) -> Any:
        return self._data[index]

    def __setitem__(self, index: Any, value: Any) -> None:
        self._data[index] = value

    @property
    def keyword_name(self) -> str:
        """str: Keyword this property holds values for."""
        return self._keyword_info.keyword_name

    @property
    def keyword_info(self) -> SupportedKeywordInfo:
        """SupportedKeywordInfo: Catalog entry the property was built from."""
        return self._keyword_info

    @property
    def dimension(self) -> str:
        """str: Physical-dimension tag of the keyword."""
        return self._keyword_info.dimension

    @property
    def dims(self) -> tuple[int, int, int]:
        """tuple[int, int, int]: Grid extents (nx, ny, nz)."""
        return self._dims

    @property
    def data(self) -> NDArray[Any]:
        """NDArray: Live value array; writes go straight into the property."""
        return self._data

    def _global_index(self, i: int, j: int, k: int) -> int:
        nx, ny, nz = self._dims
        if not (0 <= i < nx and 0 <= j < ny and 0 <= k < nz):
            raise IndexError(f"Cell ({i}, {j}, {k}) is outside the {nx}x{ny}x{nz} grid of {self.keyword_name}")
        return i + j * nx + k * nx * ny

    def _indices(self, box: Optional[Box]) -> Any:
        """Flat indices selected by ``box``; a slice over everything when no box is given."""
        if box is None:
            return slice(None)
        if box.dims != self._dims:
            raise ValueError(f"Box dims {box.dims} do not match property dims {self._dims}")
        if box.is_global():
            return slice(None)
        return box.index_list()

    def iget(self, i: int, j: int, k: int) -> Any:
        """Value at logical cell (i, j, k)."""
        return self._data[self._global_index(i, j, k)]

    def iset(self, i: int, j: int, k: int, value: Any) -> None:
        """Assign the value at logical cell (i, j, k)."""
        self._data[self._global_index(i, j, k)] = value

    def set_data(self, values: ArrayLike) -> None:
        """
        Overwrite every cell with explicit values.

        Parameters
        ----------
        values : array_like
            One value per cell in flat order.
        """
        values = np.asarray(values).reshape(-1)
        if values.size != self._data.size:
            raise ValueError(f"Size mismatch for {self.keyword_name}: expected {self._data.size} values, got {values.size}")
        self._data[:] = values

    def _check_operand(self, value: Any) -> None:
        """Integer properties only accept whole-number operands."""
        if np.issubdtype(self._data.dtype, np.integer) and not np.all(np.mod(value, 1) == 0):
            raise ValueError(f"Integer keyword {self.keyword_name} cannot take non-integral operand {value!r}")

    def set_scalar(self, value: Any, box: Optional[Box] = None) -> None:
        """Assign ``value`` to every cell in ``box`` (whole grid when omitted)."""
        self._check_operand(value)
        self._data[self._indices(box)] = value

    def scale(self, factor: float, box: Optional[Box] = None) -> None:
        """Multiply cells in ``box`` by ``factor``."""
        self._check_operand(factor)
        idx = self._indices(box)
        self._data[idx] = self._data[idx] * factor

    def add(self, shift: Any, box: Optional[Box] = None) -> None:
        """Add ``shift`` to cells in ``box``."""
        self._check_operand(shift)
        idx = self._indices(box)
        self._data[idx] = self._data[idx] + shift

    def copy_from(self, src: "GridProperty", box: Optional[Box] = None) -> None:
        """
        Copy values from another property, restricted to ``box``.

        Cells outside the box keep their current values.
        """
        if src.dims != self._dims:
            raise ValueError(f"Cannot copy {src.keyword_name} {src.dims} into {self.keyword_name} {self._dims}")
        idx = self._indices(box)
        self._data[idx] = src.data[idx]

    def run_post_processor(self) -> None:
        """Apply the keyword's post-processor to the live value array."""
        self._keyword_info.post_processor(self._data)

    def contains_nan(self) -> bool:
        """Return True if any cell holds NaN."""
        return bool(np.issubdtype(self._data.dtype, np.floating) and np.isnan(self._data).any())

    def unique_values(self) -> list[Any]:
        """Sorted list of the distinct cell values."""
        return np.unique(self._data).tolist()
