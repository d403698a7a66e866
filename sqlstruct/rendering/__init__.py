"""Go source rendering for normalized tables."""

from .buffer_pool import BufferPool
from .struct_renderer import (
    OutputType,
    DEFAULT_OUTPUT_TYPES,
    StructRenderer,
    align_cells,
    parse_modes,
)

__all__ = [
    "BufferPool",
    "OutputType",
    "DEFAULT_OUTPUT_TYPES",
    "StructRenderer",
    "align_cells",
    "parse_modes",
]
