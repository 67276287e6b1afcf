"""Argument checks for grid extents and keyword names."""

from numbers import Integral


def validate_dims(nx: int, ny: int, nz: int) -> tuple[int, int, int]:
    """Check that grid extents are non-negative integers and return them as plain ints."""
    dims = (nx, ny, nz)
    for axis, n in zip("xyz", dims):
        # bool is an int subclass but never a valid extent
        if isinstance(n, bool) or not isinstance(n, Integral):
            raise TypeError(f"Extent n{axis} must be an integer, got {type(n).__name__}: {n!r}")
        if n < 0:
            raise ValueError(f"Extent n{axis} must be non-negative, got {n}")
    return (int(nx), int(ny), int(nz))


def validate_keyword_name(name: str) -> str:
    if not isinstance(name, str):
        raise TypeError(f"Keyword name must be a string, got {type(name).__name__}: {name!r}")
    if not name.strip():
        raise ValueError("Keyword name must not be empty")
    return name
