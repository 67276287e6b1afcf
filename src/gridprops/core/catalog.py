"""Immutable lookup table of the keywords a registry supports."""

from collections.abc import Iterable, Iterator
from typing import Union

from gridprops.schema.keyword_info import PostProcessor, SupportedKeywordInfo, noop


class KeywordCatalog:
    """
    Name-keyed table of SupportedKeywordInfo entries.

    Built once from caller-supplied entries; a repeated name replaces the earlier entry.
    The only way to add entries afterwards is a ``CatalogExtension`` issued by the owning
    registry.
    """

    def __init__(self, entries: Iterable[SupportedKeywordInfo]) -> None:
        self._entries: dict[str, SupportedKeywordInfo] = {}
        for entry in entries:
            self._entries[entry.keyword_name] = entry

    def is_supported(self, name: str) -> bool:
        """Return True if ``name`` has a catalog entry."""
        return name in self._entries

    def get(self, name: str) -> SupportedKeywordInfo:
        """Catalog entry for ``name``; raises KeyError when absent."""
        return self._entries[name]

    def names(self) -> list[str]:
        """Supported keyword names in insertion order."""
        return list(self._entries)

    def _insert(self, entry: SupportedKeywordInfo) -> None:
        if entry.keyword_name in self._entries:
            raise ValueError(f"Keyword {entry.keyword_name} is already supported")
        self._entries[entry.keyword_name] = entry

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


class CatalogExtension:
    """
    Capability to add supported keywords to one registry after construction.

    Obtained from ``GridProperties.claim_catalog_extension``, which hands out a single
    instance per registry. Reserved for ``CaseProperties``, which registers PORV with a
    default computed from geometry it owns.
    """

    def __init__(self, catalog: KeywordCatalog) -> None:
        self._catalog = catalog

    def post_add_keyword(
        self,
        name: str,
        default_value: Union[int, float],
        post_processor: PostProcessor = noop,
        dimension: str = "1",
    ) -> SupportedKeywordInfo:
        """Register a new keyword in the catalog this capability was issued for."""
        entry = SupportedKeywordInfo(name, default_value, post_processor, dimension)
        self._catalog._insert(entry)
        return entry
