"""
Schema Model

Raw regex captures produced by the extractor, and the normalized
Table/Column values handed to the renderer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Tuple


# ─── Raw matches ─────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class RawColumnMatch:
    """Capture groups of one column declaration."""
    name: str
    sql_type: str
    modifier: str = ""  # second bareword, e.g. "unsigned"; empty when absent


@dataclass(frozen=True)
class RawTableMatch:
    """Capture groups of one CREATE TABLE block."""
    name: str
    body: str


# ─── Normalized schema ───────────────────────────────────────────────────────

@dataclass(frozen=True)
class Column:
    """A column with its Go field name and Go type."""
    raw_name: str
    name: str
    raw_type: str
    type: str
    unsigned: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return {
            "raw_name": self.raw_name,
            "name": self.name,
            "raw_type": self.raw_type,
            "type": self.type,
            "unsigned": self.unsigned,
        }


@dataclass(frozen=True)
class Table:
    """A table with its Go type name and columns in declaration order."""
    raw_name: str
    name: str
    columns: Tuple[Column, ...] = field(default_factory=tuple)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "raw_name": self.raw_name,
            "name": self.name,
            "columns": [c.to_dict() for c in self.columns],
        }
