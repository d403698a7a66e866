"""Entry point tying extraction and normalization together."""

import logging
from typing import List, Optional, Union

from .extraction.ddl_extractor import SchemaExtractor
from .models import Table
from .normalization.normalizer import SchemaNormalizer

logger = logging.getLogger(__name__)


def parse_sql(
    content: Union[bytes, str],
    table_name: Optional[str] = None,
    normalizer: Optional[SchemaNormalizer] = None,
) -> List[Table]:
    """Parse CREATE TABLE statements into normalized tables.

    Args:
        content: Raw file bytes or text.
        table_name: Only extract this table; raises TableNotFoundError if absent.
        normalizer: Custom normalizer (configured overrides, strict types).

    Returns:
        Tables in source order.
    """
    normalizer = normalizer or SchemaNormalizer()
    raw_tables = SchemaExtractor().extract(content, table_name)
    tables = [normalizer.normalize_table(raw) for raw in raw_tables]
    logger.info(f"Parsed {len(tables)} tables, {sum(len(t.columns) for t in tables)} columns")
    return tables
