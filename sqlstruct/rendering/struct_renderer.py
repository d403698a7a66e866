"""
Go Struct Renderer

Renders normalized tables as Go struct declarations in one of three
flavors:

    sql   plain struct with `db` tags
    json  struct with `db` and `json` tags
    sb    table-mapping struct embedding sb.Table, one sb.Column per column

Field lines are aligned into columns the way gofmt does it.
"""

import logging
from enum import Enum
from typing import Iterable, List, Optional, Sequence

from ..models import Column, Table
from .buffer_pool import BufferPool

logger = logging.getLogger(__name__)


class OutputType(str, Enum):
    """Output flavor, keyed by its mode name."""
    SQL = "sql"
    SQL_WITH_JSON = "json"
    SB = "sb"


DEFAULT_OUTPUT_TYPES = (OutputType.SQL_WITH_JSON, OutputType.SB)

MODE_PREFIX = "mode="


def parse_modes(
    value: Optional[str],
    default: Optional[Sequence[OutputType]] = None,
) -> List[OutputType]:
    """Parse a `mode=sql+json+sb` argument.

    Unknown names are skipped. Without the prefix, or with no known name,
    `default` (or DEFAULT_OUTPUT_TYPES) is returned.
    """
    if value and value.startswith(MODE_PREFIX):
        output_types = []
        for name in value[len(MODE_PREFIX):].split("+"):
            try:
                output_types.append(OutputType(name))
            except ValueError:
                logger.debug(f"Ignoring unknown output mode '{name}'")
        if output_types:
            return output_types
    return list(default or DEFAULT_OUTPUT_TYPES)


def align_cells(rows: Sequence[Sequence[str]], padding: int = 1) -> List[str]:
    """Align rows of cells like Go's tabwriter.

    Every cell except the last of its row is padded to the width of its
    column. Column widths are computed over consecutive rows that have a
    non-final cell in that column.
    """
    padded = [list(row) for row in rows]
    max_cells = max((len(row) for row in rows), default=0)

    for col in range(max_cells - 1):
        start = 0
        while start < len(rows):
            if len(rows[start]) <= col + 1:
                start += 1
                continue
            end = start
            while end < len(rows) and len(rows[end]) > col + 1:
                end += 1
            width = max(len(rows[i][col]) for i in range(start, end))
            for i in range(start, end):
                padded[i][col] = rows[i][col].ljust(width + padding)
            start = end

    return ["".join(row) for row in padded]


class StructRenderer:
    """Writes Go struct source for tables, reusing buffers from a pool."""

    def __init__(self, align_fields: bool = True, pool: Optional[BufferPool] = None):
        self.align_fields = align_fields
        self.pool = pool or BufferPool()

    def render(self, table: Table, output_type: OutputType) -> str:
        with self.pool.borrow() as buf:
            self.write(buf, table, output_type)
            return buf.getvalue()

    def render_all(self, tables: Iterable[Table], output_types: Sequence[OutputType]) -> List[str]:
        """Render every table once per flavor, tables first then flavors."""
        return [
            self.render(table, output_type)
            for table in tables
            for output_type in output_types
        ]

    def write(self, buf, table: Table, output_type: OutputType) -> None:
        rows = []
        if output_type == OutputType.SB:
            buf.write(f"type {table.name}Table struct {{\n")
            rows.append(["sb.Table", f'`db:"{table.raw_name}"`'])
        else:
            buf.write(f"type {table.name} struct {{\n")

        for column in table.columns:
            rows.append(self._field_cells(column, output_type))

        for line in self._format_rows(rows):
            buf.write(f"\t{line}\n")
        buf.write("}\n")

    def _field_cells(self, column: Column, output_type: OutputType) -> List[str]:
        if output_type == OutputType.SB:
            return [column.name, "sb.Column", f'`db:"{column.raw_name}"`']

        tag = f'db:"{column.raw_name}"'
        if output_type == OutputType.SQL_WITH_JSON:
            tag += f' json:"{column.raw_name}"'
        return [column.name, column.type, f"`{tag}`"]

    def _format_rows(self, rows: List[List[str]]) -> List[str]:
        if self.align_fields:
            return align_cells(rows)
        return [" ".join(row) for row in rows]
