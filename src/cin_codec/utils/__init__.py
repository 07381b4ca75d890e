"""Utility functions shared by the codecs."""

# Text predicates
from cin_codec.utils.text import (
    contains_whitespace,
    equals,
    is_blank,
    mask_identifier,
)

# Calendar helpers
from cin_codec.utils.dates import (
    age_at,
    make_date,
    parse_pure_date,
)

__all__ = [
    # Text
    "is_blank",
    "contains_whitespace",
    "equals",
    "mask_identifier",
    # Dates
    "make_date",
    "parse_pure_date",
    "age_at",
]
