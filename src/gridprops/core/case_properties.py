"""
Owner of the integer and double grid property registries of one simulation case.

CaseProperties is the component a deck-processing driver talks to: it routes keyword
requests to the registry that supports them, applies box-scoped EQUALS / MULTIPLY / ADD /
COPY operations, and registers the pore-volume keyword PORV, whose default is derived
from porosity, net-to-gross and the cell volumes of the grid.
"""

from typing import Any, Optional

import numpy as np
from numpy.typing import ArrayLike, NDArray

from gridprops.core.errors import UnsupportedKeywordError
from gridprops.core.loader import build_config
from gridprops.core.messages import MessageContainer
from gridprops.core.registry import GridProperties
from gridprops.properties.grid_property import GridProperty
from gridprops.schema.box import Box
from gridprops.schema.config import PropertiesConfig
from gridprops.schema.grid import GridGeometry
from gridprops.schema.keyword_info import SupportedKeywordInfo
from gridprops.utils.logging import get_logger

PORV_MULTIPLIERS = ("NTG", "MULTPV")


class CaseProperties:
    """
    Grid properties of a single case, split by element type.

    Parameters
    ----------
    grid : GridGeometry
        Geometry of the case; borrowed by both registries.
    int_keywords : list[SupportedKeywordInfo], optional
        Integer keyword catalog. Defaults to the standard region keywords and ACTNUM.
    double_keywords : list[SupportedKeywordInfo], optional
        Double keyword catalog. Defaults to the standard rock and multiplier keywords.
    verbose : bool, optional
        If True, enables detailed logging output.
    """

    def __init__(
        self,
        grid: GridGeometry,
        int_keywords: Optional[list[SupportedKeywordInfo]] = None,
        double_keywords: Optional[list[SupportedKeywordInfo]] = None,
        verbose: bool = False,
    ) -> None:
        config = build_config(grid, int_keywords=int_keywords, double_keywords=double_keywords, verbose=verbose)
        self._setup(config)

    @classmethod
    def from_config(cls, config: PropertiesConfig) -> "CaseProperties":
        """Build CaseProperties from an existing PropertiesConfig."""
        obj = cls.__new__(cls)
        obj._setup(config)
        return obj

    def _setup(self, config: PropertiesConfig) -> None:
        self.config = config
        self.logger = get_logger(f"{__name__}.{self.__class__.__name__}", verbose=config.verbose)
        self.messages = MessageContainer(verbose=config.verbose)

        self.int_grid_properties = GridProperties(
            config.grid, config.int_keywords, messages=self.messages, verbose=config.verbose
        )
        self.double_grid_properties = GridProperties(
            config.grid, config.double_keywords, messages=self.messages, verbose=config.verbose
        )

        # PORV depends on the cell volumes, which are only known here
        extension = self.double_grid_properties.claim_catalog_extension()
        extension.post_add_keyword("PORV", float("nan"), self._fill_pore_volume, "ReservoirVolume")

    @property
    def grid(self) -> GridGeometry:
        """GridGeometry: Geometry of the case."""
        return self.config.grid

    def _fill_pore_volume(self, values: NDArray[np.float64]) -> None:
        """Replace NaN PORV cells with PORO * NTG * MULTPV * cell volume."""
        mask = np.isnan(values)
        if not mask.any():
            return

        props = self.double_grid_properties
        pore_volume = props.get_keyword("PORO").data * self.grid.get_cell_volume()
        for name in PORV_MULTIPLIERS:
            if props.supports_keyword(name):
                pore_volume = pore_volume * props.get_keyword(name).data

        values[mask] = pore_volume[mask]
        self.logger.debug(f"Computed default pore volume for {int(mask.sum())} cells")

    def _registry_for(self, name: str) -> GridProperties:
        if self.int_grid_properties.supports_keyword(name):
            return self.int_grid_properties
        if self.double_grid_properties.supports_keyword(name):
            return self.double_grid_properties
        raise UnsupportedKeywordError(name)

    def supports_grid_property(self, name: str) -> bool:
        """Return True if either registry supports ``name``."""
        return self.int_grid_properties.supports_keyword(name) or self.double_grid_properties.supports_keyword(name)

    def has_deck_int_grid_property(self, name: str) -> bool:
        """Return True if the integer keyword ``name`` was explicitly requested."""
        if not self.int_grid_properties.supports_keyword(name):
            raise UnsupportedKeywordError(name)
        return self.int_grid_properties.has_keyword(name)

    def has_deck_double_grid_property(self, name: str) -> bool:
        """Return True if the double keyword ``name`` was explicitly requested."""
        if not self.double_grid_properties.supports_keyword(name):
            raise UnsupportedKeywordError(name)
        return self.double_grid_properties.has_keyword(name)

    def get_int_grid_property(self, name: str) -> GridProperty:
        """Integer property ``name``, materialized with defaults if absent."""
        return self.int_grid_properties.get_keyword(name)

    def get_double_grid_property(self, name: str) -> GridProperty:
        """Double property ``name``, materialized with defaults if absent."""
        return self.double_grid_properties.get_keyword(name)

    def _check_box(self, box: Optional[Box]) -> Optional[Box]:
        if box is not None and box.dims != self.grid.dims:
            raise ValueError(f"Box dims {box.dims} do not match grid dims {self.grid.dims}")
        return box

    def load_keyword(self, name: str, values: ArrayLike, box: Optional[Box] = None) -> GridProperty:
        """
        Explicitly request ``name`` and assign deck values.

        Parameters
        ----------
        name : str
            Keyword to assign.
        values : array_like
            One value per cell of ``box``, or per grid cell when no box is given.
        box : Box, optional
            Region the values apply to.

        Returns
        -------
        GridProperty
            The updated property.
        """
        box = self._check_box(box)
        prop = self._registry_for(name).get_or_create_property(name)
        if box is None:
            prop.set_data(values)
        else:
            values = np.asarray(values).reshape(-1)
            if values.size != box.size:
                raise ValueError(f"Size mismatch for {name}: box holds {box.size} cells, got {values.size} values")
            prop.data[box.index_list()] = values
        self.logger.debug(f"Loaded explicit values for '{name}'")
        return prop

    def equals(self, name: str, value: Any, box: Optional[Box] = None) -> None:
        """Set every cell of ``box`` in ``name`` to ``value``."""
        box = self._check_box(box)
        prop = self._registry_for(name).get_or_create_property(name)
        prop.set_scalar(value, box)

    def multiply(self, name: str, factor: float, box: Optional[Box] = None) -> None:
        """Multiply the cells of ``box`` in ``name`` by ``factor``."""
        box = self._check_box(box)
        prop = self._registry_for(name).get_or_create_property(name)
        prop.scale(factor, box)

    def add(self, name: str, shift: Any, box: Optional[Box] = None) -> None:
        """Add ``shift`` to the cells of ``box`` in ``name``."""
        box = self._check_box(box)
        prop = self._registry_for(name).get_or_create_property(name)
        prop.add(shift, box)

    def copy(self, src_name: str, target_name: str, box: Optional[Box] = None) -> None:
        """
        Copy ``src_name`` into ``target_name`` over ``box`` (whole grid when omitted).

        Both keywords must share an element type.
        """
        registry = self._registry_for(src_name)
        if self._registry_for(target_name) is not registry:
            raise ValueError(f"Cannot copy between {src_name} and {target_name}: element types differ")
        registry.copy_keyword(src_name, target_name, self._check_box(box))

    def get_regions(self, name: str) -> list[int]:
        """Sorted distinct region numbers of the integer keyword ``name``."""
        return self.int_grid_properties.get_keyword(name).unique_values()
