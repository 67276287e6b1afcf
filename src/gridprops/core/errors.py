"""Exceptions raised by the grid property registries."""


class GridPropertiesError(Exception):
    """Base class for registry failures."""


class UnsupportedKeywordError(GridPropertiesError, KeyError):
    """The keyword is not in the registry's catalog."""

    def __init__(self, keyword: str) -> None:
        self.keyword = keyword
        super().__init__(f"The keyword: {keyword} is not supported in this container")

    def __str__(self) -> str:
        return str(self.args[0])


class NotInitializedError(GridPropertiesError, KeyError):
    """The keyword is supported but was never explicitly added."""

    def __init__(self, keyword: str) -> None:
        self.keyword = keyword
        super().__init__(f"Keyword: {keyword} is supported - but not initialized.")

    def __str__(self) -> str:
        return str(self.args[0])


class KeywordIndexError(GridPropertiesError, IndexError):
    """Positional access past the number of materialized properties."""

    def __init__(self, index: int, size: int) -> None:
        self.index = index
        self.size = size
        super().__init__(f"Invalid index {index}: registry holds {size} properties")
