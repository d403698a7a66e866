"""Table and column extraction from MySQL DDL text."""

from .ddl_extractor import (
    SchemaExtractor,
    TABLE_PATTERN,
    COLUMN_PATTERN,
    table_pattern_for,
    find_table_blocks,
    find_table_block,
    find_columns,
    decode_source,
)

__all__ = [
    "SchemaExtractor",
    "TABLE_PATTERN",
    "COLUMN_PATTERN",
    "table_pattern_for",
    "find_table_blocks",
    "find_table_block",
    "find_columns",
    "decode_source",
]
