"""Borrowed view of grid geometry: the three cell-count extents and optional cell volumes."""

from dataclasses import dataclass, field
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from gridprops.utils.validation import validate_dims


@dataclass(frozen=True)
class GridGeometry:
    """
    Minimal geometry collaborator consumed by the property registries.

    Attributes
    ----------
    nx, ny, nz : int
        Number of cells along each axis.
    cell_volumes : NDArray[np.float64], optional
        Bulk volume per cell in flat (i-fastest) order. Unit volumes are assumed when omitted.
    """

    nx: int
    ny: int
    nz: int
    cell_volumes: Optional[NDArray[np.float64]] = field(default=None, repr=False, compare=False)

    def __post_init__(self) -> None:
        nx, ny, nz = validate_dims(self.nx, self.ny, self.nz)
        object.__setattr__(self, "nx", nx)
        object.__setattr__(self, "ny", ny)
        object.__setattr__(self, "nz", nz)
        if self.cell_volumes is not None:
            volumes = np.asarray(self.cell_volumes, dtype=float).reshape(-1)
            if volumes.size != self.num_cells:
                raise ValueError(
                    f"Expected {self.num_cells} cell volumes for a {self.nx}x{self.ny}x{self.nz} grid, got {volumes.size}"
                )
            object.__setattr__(self, "cell_volumes", volumes)

    @property
    def dims(self) -> tuple[int, int, int]:
        """tuple[int, int, int]: Extents (nx, ny, nz)."""
        return (self.nx, self.ny, self.nz)

    @property
    def num_cells(self) -> int:
        """int: Total number of cells."""
        return self.nx * self.ny * self.nz

    def get_cell_volume(self) -> NDArray[np.float64]:
        """Return a copy of the per-cell bulk volumes."""
        if self.cell_volumes is None:
            return np.ones(self.num_cells, dtype=float)
        return self.cell_volumes.copy()
