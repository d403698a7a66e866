"""sqlstruct: generate Go struct declarations from MySQL CREATE TABLE statements."""

from .errors import SQLStructError, TableNotFoundError, UnknownSQLTypeError
from .models import Column, Table
from .parser import parse_sql

__version__ = "0.1.0"

__all__ = [
    "Column",
    "Table",
    "parse_sql",
    "SQLStructError",
    "TableNotFoundError",
    "UnknownSQLTypeError",
]
