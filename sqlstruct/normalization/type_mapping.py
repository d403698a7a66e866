"""
SQL column type to Go type mapping.

Only the integer family honours the `unsigned` modifier. Every other family
maps to a fixed Go type regardless of signedness, and unknown types map to
an empty type ("u" when unsigned). Both quirks are kept so that generated
code stays identical to what existing callers already rely on.
"""

import logging
from types import MappingProxyType
from typing import Mapping

from ..errors import UnknownSQLTypeError

logger = logging.getLogger(__name__)

# Integer types: unsigned columns get a "u" prefix
INTEGER_TYPE_MAP: Mapping[str, str] = MappingProxyType({
    "int": "int32",
    "mediumint": "int32",
    "tinyint": "int8",
    "smallint": "int16",
    "bigint": "int64",
})

# Fixed types: the unsigned flag is ignored
FIXED_TYPE_MAP: Mapping[str, str] = MappingProxyType({
    "bool": "bool",
    "float": "float32",
    "double": "float64",

    # String types
    "varchar": "string",
    "char": "string",
    "text": "string",
    "tinytext": "string",
    "mediumtext": "string",
    "longtext": "string",

    # Binary types
    "binary": "[]byte",
    "varbinary": "[]byte",
    "blob": "[]byte",
    # Mixed-case key never matches lowercased input, so tinyblob falls
    # through to the unknown branch. Kept as-is for output compatibility.
    "TinyBlob": "[]byte",
    "mediumblob": "[]byte",
    "longblob": "[]byte",

    "datetime": "time.Time",
})


def sql_type_to_go(raw_type: str, unsigned: bool = False) -> str:
    """Map a lowercase SQL type keyword to a Go type name.

    Unknown types return "" (or "u" when unsigned).
    """
    fixed = FIXED_TYPE_MAP.get(raw_type)
    if fixed is not None:
        return fixed

    go_type = INTEGER_TYPE_MAP.get(raw_type, "")
    if unsigned:
        return "u" + go_type
    return go_type


def is_known_type(raw_type: str) -> bool:
    return raw_type in INTEGER_TYPE_MAP or raw_type in FIXED_TYPE_MAP


class TypeMapper:
    """
    Maps column types, reporting types that have no Go equivalent.

    In the default mode an unknown type is logged and the placeholder type is
    returned; with strict=True an UnknownSQLTypeError is raised instead.
    """

    def __init__(self, strict: bool = False):
        self.strict = strict

    def to_go(self, raw_type: str, unsigned: bool = False, column: str = "") -> str:
        if not is_known_type(raw_type):
            if self.strict:
                raise UnknownSQLTypeError(raw_type, column)
            logger.warning(f"No Go type for SQL type '{raw_type}' (column '{column}'), leaving it empty")
        return sql_type_to_go(raw_type, unsigned)
