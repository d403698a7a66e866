"""Name casing and type mapping for extracted schemas."""

from .naming import (
    NameTransformer,
    DEFAULT_NAME_OVERRIDES,
    UPPER_WORDS,
    camel_case,
    title,
)
from .type_mapping import TypeMapper, sql_type_to_go, is_known_type
from .normalizer import SchemaNormalizer

__all__ = [
    "NameTransformer",
    "DEFAULT_NAME_OVERRIDES",
    "UPPER_WORDS",
    "camel_case",
    "title",
    "TypeMapper",
    "sql_type_to_go",
    "is_known_type",
    "SchemaNormalizer",
]
