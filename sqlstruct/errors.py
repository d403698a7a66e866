"""Exceptions raised by the schema parser."""


class SQLStructError(Exception):
    """Base class for schema parsing errors."""
    pass


class TableNotFoundError(SQLStructError, LookupError):
    """Raised when a requested table has no CREATE TABLE block in the source."""

    def __init__(self, table_name: str):
        self.table_name = table_name
        super().__init__(f"Table not found: {table_name}")


class UnknownSQLTypeError(SQLStructError, ValueError):
    """Raised in strict mode when a column's SQL type has no Go mapping."""

    def __init__(self, raw_type: str, column: str = ""):
        self.raw_type = raw_type
        self.column = column
        where = f" (column {column})" if column else ""
        super().__init__(f"Unknown SQL type: {raw_type!r}{where}")
