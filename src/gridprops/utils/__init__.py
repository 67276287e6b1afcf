"""Infrastructure helpers."""

from gridprops.utils.logging import get_logger
from gridprops.utils.validation import validate_dims, validate_keyword_name

__all__ = ["get_logger", "validate_dims", "validate_keyword_name"]
