"""
Structured representation of a rectangular sub-volume of the grid.

A Box is the region used by the COPY, EQUALS, MULTIPLY and ADD style operations:
zero-based, inclusive cell ranges along each axis, interpreted within the global
grid extents that produce the flat cell index.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray

from gridprops.utils.validation import validate_dims


@dataclass(frozen=True)
class Box:
    """
    Inclusive, zero-based cell ranges within a grid of extents (nx, ny, nz).

    Attributes
    ----------
    nx, ny, nz : int
        Global grid extents.
    i1, i2, j1, j2, k1, k2 : int
        First and last cell index along each axis (both inclusive).

    Examples
    --------
    >>> box = Box(2, 2, 1, 0, 1, 0, 0, 0, 0)
    >>> box.index_list().tolist()
    [0, 1]
    """

    nx: int
    ny: int
    nz: int
    i1: int
    i2: int
    j1: int
    j2: int
    k1: int
    k2: int

    def __post_init__(self) -> None:
        validate_dims(self.nx, self.ny, self.nz)
        for axis, lo, hi, n in (("i", self.i1, self.i2, self.nx), ("j", self.j1, self.j2, self.ny), ("k", self.k1, self.k2, self.nz)):
            if not 0 <= lo <= hi < n:
                raise ValueError(f"Invalid {axis} range [{lo}, {hi}] for extent {n}")

    @classmethod
    def whole(cls, dims: tuple[int, int, int]) -> "Box":
        """Box covering every cell of a grid with the given extents."""
        nx, ny, nz = dims
        return cls(nx, ny, nz, 0, nx - 1, 0, ny - 1, 0, nz - 1)

    @property
    def dims(self) -> tuple[int, int, int]:
        """tuple[int, int, int]: Global grid extents."""
        return (self.nx, self.ny, self.nz)

    @property
    def shape(self) -> tuple[int, int, int]:
        """tuple[int, int, int]: Number of cells covered along each axis."""
        return (self.i2 - self.i1 + 1, self.j2 - self.j1 + 1, self.k2 - self.k1 + 1)

    @property
    def size(self) -> int:
        """int: Number of cells covered."""
        ni, nj, nk = self.shape
        return ni * nj * nk

    def is_global(self) -> bool:
        """Return True if the box spans the full grid."""
        return self.shape == self.dims

    def index_list(self) -> NDArray[np.int64]:
        """Flat cell indices covered by the box, i varying fastest."""
        i = np.arange(self.i1, self.i2 + 1)
        j = np.arange(self.j1, self.j2 + 1)
        k = np.arange(self.k1, self.k2 + 1)
        kk, jj, ii = np.meshgrid(k, j, i, indexing="ij")
        return (ii + jj * self.nx + kk * self.nx * self.ny).reshape(-1).astype(np.int64)
