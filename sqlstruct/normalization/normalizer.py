"""
Schema Normalizer

Turns raw extractor matches into Table/Column values: names are
PascalCased and column types mapped to Go.
"""

from typing import Optional

from ..extraction.ddl_extractor import find_columns
from ..models import Column, RawColumnMatch, RawTableMatch, Table
from .naming import NameTransformer
from .type_mapping import TypeMapper


class SchemaNormalizer:
    """Builds the typed schema model from raw matches. Holds no per-call state."""

    def __init__(
        self,
        name_transformer: Optional[NameTransformer] = None,
        type_mapper: Optional[TypeMapper] = None,
    ):
        self.names = name_transformer or NameTransformer()
        self.types = type_mapper or TypeMapper()

    def normalize_column(self, raw: RawColumnMatch) -> Column:
        unsigned = raw.modifier == "unsigned"
        return Column(
            raw_name=raw.name,
            name=self.names.camel_case(raw.name),
            raw_type=raw.sql_type,
            type=self.types.to_go(raw.sql_type, unsigned, column=raw.name),
            unsigned=unsigned,
        )

    def normalize_table(self, raw: RawTableMatch) -> Table:
        columns = tuple(self.normalize_column(c) for c in find_columns(raw.body))
        return Table(
            raw_name=raw.name,
            name=self.names.camel_case(raw.name),
            columns=columns,
        )
