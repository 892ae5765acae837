"""Утилиты для генератора"""

from .naming import (
    capitalize,
    is_valid_identifier,
    property_name,
)

__all__ = [
    "capitalize",
    "is_valid_identifier",
    "property_name",
]
