"""
Lazily populated container of per-cell grid properties keyed by keyword name.

Every keyword is in one of three states relative to the catalog: unsupported, supported
but absent, or present. A present property is either auto-generated (materialized with
defaults by a read) or explicit (requested through ``add_keyword``); the only legal
transition between the two is the promotion auto-generated -> explicit.
"""

from collections.abc import Iterable, Iterator
from numbers import Integral
from typing import Optional, Union

from gridprops.core.catalog import CatalogExtension, KeywordCatalog
from gridprops.core.errors import KeywordIndexError, NotInitializedError, UnsupportedKeywordError
from gridprops.core.messages import MessageContainer
from gridprops.properties.grid_property import GridProperty
from gridprops.schema.box import Box
from gridprops.schema.grid import GridGeometry
from gridprops.schema.keyword_info import SupportedKeywordInfo
from gridprops.utils.logging import get_logger


class GridProperties:
    """
    Registry of GridProperty instances for one element type.

    Parameters
    ----------
    grid : GridGeometry
        Geometry supplying the (nx, ny, nz) extents used to size new properties.
        The registry borrows it and must not outlive it.
    supported_keywords : iterable of SupportedKeywordInfo
        Catalog entries; a repeated name replaces the earlier entry.
    messages : MessageContainer, optional
        Diagnostic sink to append to; a private one is created when omitted.
    verbose : bool, optional
        If True, enables detailed logging output.

    Examples
    --------
    >>> grid = GridGeometry(2, 1, 1)
    >>> props = GridProperties(grid, [SupportedKeywordInfo("PORO", 0.2)])
    >>> props.get_keyword("PORO").data.tolist()
    [0.2, 0.2]
    >>> props.has_keyword("PORO")
    False
    """

    def __init__(
        self,
        grid: GridGeometry,
        supported_keywords: Iterable[SupportedKeywordInfo],
        messages: Optional[MessageContainer] = None,
        verbose: bool = False,
    ) -> None:
        self._grid = grid
        self._catalog = KeywordCatalog(supported_keywords)
        self._properties: list[GridProperty] = []
        self._index: dict[str, int] = {}
        self._auto_generated: set[str] = set()
        self._extension_claimed = False
        self.messages = messages if messages is not None else MessageContainer(verbose=verbose)
        self.logger = get_logger(f"{__name__}.{self.__class__.__name__}", verbose=verbose)

    @property
    def grid(self) -> GridGeometry:
        """GridGeometry: Borrowed geometry the properties are sized against."""
        return self._grid

    @property
    def catalog(self) -> KeywordCatalog:
        """KeywordCatalog: Supported keywords of this registry."""
        return self._catalog

    def supports_keyword(self, name: str) -> bool:
        """Return True if ``name`` is in the catalog."""
        return self._catalog.is_supported(name)

    def has_keyword(self, name: str) -> bool:
        """
        Return True if an explicit property exists for ``name``.

        Auto-generated properties are not reported.
        """
        return name in self._index and name not in self._auto_generated

    def is_auto_generated(self, name: str) -> bool:
        """Return True if ``name`` is present only because a read materialized it."""
        return name in self._auto_generated

    def size(self) -> int:
        """Number of materialized properties, auto-generated and explicit combined."""
        return len(self._properties)

    def keywords(self) -> list[str]:
        """Names of the materialized properties in creation order."""
        return [prop.keyword_name for prop in self._properties]

    def peek_keyword(self, name: str) -> Optional[GridProperty]:
        """
        Return the property for ``name`` without materializing it.

        Returns None when the keyword is supported but absent.
        """
        self._require_supported(name)
        if name in self._index:
            return self._properties[self._index[name]]
        return None

    def get_keyword(self, key: Union[str, int]) -> GridProperty:
        """
        Return a property by name or by creation-order position.

        A supported name without a property is materialized with catalog defaults
        and tagged auto-generated, so this read can grow the registry.

        Parameters
        ----------
        key : str or int
            Keyword name, or position in creation order.

        Returns
        -------
        GridProperty
            Live property; mutations are visible to every later lookup.
        """
        if isinstance(key, Integral) and not isinstance(key, bool):
            return self._get_by_index(key)

        self._require_supported(key)
        if key not in self._index:
            self._materialize(key, auto_generated=True)
        return self._properties[self._index[key]]

    def _get_by_index(self, index: int) -> GridProperty:
        if 0 <= index < self.size():
            return self._properties[int(index)]
        raise KeywordIndexError(index, self.size())

    def get_initialized_keyword(self, name: str) -> GridProperty:
        """
        Return the explicit property for ``name`` without materializing defaults.

        Raises
        ------
        NotInitializedError
            If the keyword is supported but has no explicit property.
        UnsupportedKeywordError
            If the keyword is not in the catalog.
        """
        if self.has_keyword(name):
            return self._properties[self._index[name]]
        self._require_supported(name)
        raise NotInitializedError(name)

    def add_keyword(self, name: str) -> bool:
        """
        Explicitly request the property for ``name``.

        Returns
        -------
        bool
            False if an explicit property already existed, True otherwise.
            An auto-generated property is promoted in place, keeping its values,
            and a warning is appended to ``messages``.
        """
        self._require_supported(name)
        if self.has_keyword(name):
            return False

        if name in self._auto_generated:
            self.messages.warning(
                f"The keyword {name} has been used to calculate the defaults of another keyword "
                f"before the first time it was explicitly mentioned in the deck. Maybe you need "
                f"to change the ordering of your keywords (move {name} to the front?)."
            )
            self._auto_generated.discard(name)
            self.logger.debug(f"Promoted auto-generated keyword '{name}' to explicit")
            return True

        self._materialize(name, auto_generated=False)
        return True

    def get_or_create_property(self, name: str) -> GridProperty:
        """Explicitly request ``name`` if needed and return its property."""
        if not self.has_keyword(name):
            self.add_keyword(name)
        return self.get_keyword(name)

    def copy_keyword(self, src_name: str, target_name: str, box: Optional[Box] = None) -> None:
        """
        Copy values of ``src_name`` into ``target_name`` for the cells in ``box``.

        The whole grid is copied when no box is given.

        The source is read through the lazy path; the target is obtained explicitly.
        """
        src = self.get_keyword(src_name)
        target = self.get_or_create_property(target_name)
        target.copy_from(src, box)

    def claim_catalog_extension(self) -> CatalogExtension:
        """
        Issue the single capability allowed to add catalog entries after construction.

        Raises
        ------
        RuntimeError
            If the capability was already claimed.
        """
        if self._extension_claimed:
            raise RuntimeError("The catalog extension of this registry has already been claimed")
        self._extension_claimed = True
        return CatalogExtension(self._catalog)

    def _require_supported(self, name: str) -> None:
        if not self.supports_keyword(name):
            raise UnsupportedKeywordError(name)

    def _materialize(self, name: str, auto_generated: bool) -> GridProperty:
        # index and list are updated together before post-processing, which may read
        # other keywords from this registry
        nx, ny, nz = self._grid.nx, self._grid.ny, self._grid.nz
        prop = GridProperty(nx, ny, nz, self._catalog.get(name))
        self._index[name] = len(self._properties)
        self._properties.append(prop)
        if auto_generated:
            self._auto_generated.add(name)
        self.logger.debug(f"Materialized {'auto-generated' if auto_generated else 'explicit'} keyword '{name}'")
        try:
            prop.run_post_processor()
        except Exception:
            # a failed post-processor leaves no trace; keywords it read stay materialized
            self._properties = [p for p in self._properties if p is not prop]
            self._index = {p.keyword_name: i for i, p in enumerate(self._properties)}
            self._auto_generated.discard(name)
            raise
        return prop

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[GridProperty]:
        return iter(list(self._properties))

    def __getitem__(self, key: Union[str, int]) -> GridProperty:
        return self.get_keyword(key)
