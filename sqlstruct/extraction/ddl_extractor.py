"""
Schema Extractor for MySQL DDL

Finds `CREATE TABLE IF NOT EXISTS` blocks in SQL text and the column
declarations inside each block. This is pattern matching over a known
dump shape, not a SQL parser: anything that does not look like

    create table if not exists `name` ( `col` type [modifier] ... ) engine

is ignored.
"""

import logging
import re
from typing import List, Optional, Union

from ..errors import TableNotFoundError
from ..models import RawColumnMatch, RawTableMatch

logger = logging.getLogger(__name__)

# \w is ASCII-only, as in MySQL unquoted identifiers
TABLE_PATTERN = re.compile(
    r"create table if not exists `(\w+)`(.+?)\)\s*engine",
    re.DOTALL | re.ASCII,
)
COLUMN_PATTERN = re.compile(r"`(\w+)`\s+(\w+)\s*(\w+)?", re.ASCII)

_TABLE_PATTERN_TEMPLATE = r"create table if not exists `({name})`(.+?)\)\s*engine"


def table_pattern_for(table_name: str) -> "re.Pattern[str]":
    """Build the table pattern for one exact (lowercased) table name."""
    name = re.escape(table_name.lower())
    return re.compile(_TABLE_PATTERN_TEMPLATE.format(name=name), re.DOTALL | re.ASCII)


def find_table_blocks(text: str) -> List[RawTableMatch]:
    """Return every table block in source order."""
    return [
        RawTableMatch(name=match.group(1), body=match.group(2))
        for match in TABLE_PATTERN.finditer(text)
    ]


def find_table_block(text: str, table_name: str) -> RawTableMatch:
    """Return the first block declaring `table_name`.

    Raises:
        TableNotFoundError: if no block declares that table.
    """
    match = table_pattern_for(table_name).search(text)
    if match is None:
        raise TableNotFoundError(table_name)
    return RawTableMatch(name=match.group(1), body=match.group(2))


def find_columns(body: str) -> List[RawColumnMatch]:
    """Return every column declaration of a table body in declaration order."""
    return [
        RawColumnMatch(name=m.group(1), sql_type=m.group(2), modifier=m.group(3) or "")
        for m in COLUMN_PATTERN.finditer(body)
    ]


def decode_source(content: Union[bytes, str]) -> str:
    """Decode raw file content and fold it to lowercase."""
    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="replace")
    return content.lower()


class SchemaExtractor:
    """
    Extract raw table matches from SQL dump text.

    With no table filter every block is returned; with a filter exactly one
    block is returned or TableNotFoundError is raised.
    """

    def extract(
        self,
        content: Union[bytes, str],
        table_name: Optional[str] = None,
    ) -> List[RawTableMatch]:
        text = decode_source(content)

        if table_name:
            block = find_table_block(text, table_name)
            logger.debug(f"Found table block for {block.name}")
            return [block]

        blocks = find_table_blocks(text)
        if not blocks:
            logger.info("No CREATE TABLE blocks found in source")
        else:
            logger.debug(f"Found {len(blocks)} table blocks: {', '.join(b.name for b in blocks)}")
        return blocks
