"""
Configuration Loader

Loads generator settings from a YAML file: default output flavors,
field alignment, extra naming overrides and strict type checking.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from .normalization.naming import NameTransformer
from .normalization.normalizer import SchemaNormalizer
from .normalization.type_mapping import TypeMapper
from .rendering.struct_renderer import DEFAULT_OUTPUT_TYPES, OutputType, StructRenderer

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILE = "sqlstruct.yaml"


@dataclass
class GeneratorConfig:
    """Complete generator configuration."""
    version: str = "1.0"
    config_name: str = "default"

    # Output
    default_modes: List[OutputType] = field(default_factory=lambda: list(DEFAULT_OUTPUT_TYPES))
    align_fields: bool = True

    # Naming
    naming_overrides: Dict[str, str] = field(default_factory=dict)

    # Types
    strict_types: bool = False

    def build_normalizer(self) -> SchemaNormalizer:
        return SchemaNormalizer(
            name_transformer=NameTransformer(self.naming_overrides),
            type_mapper=TypeMapper(strict=self.strict_types),
        )

    def build_renderer(self) -> StructRenderer:
        return StructRenderer(align_fields=self.align_fields)


class ConfigLoader:
    """
    Loads and validates generator configuration.
    """

    def __init__(self, config_dir: Optional[Path] = None):
        """Initialize with optional custom config directory."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent / "config"
        self.config_dir = Path(config_dir)

    @property
    def config_path(self) -> Path:
        return self.config_dir / DEFAULT_CONFIG_FILE

    def load_config(self, config_file: str = DEFAULT_CONFIG_FILE) -> GeneratorConfig:
        """Load the configuration file."""
        config_path = self.config_dir / config_file

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path) as f:
            raw_config = yaml.safe_load(f) or {}

        output = raw_config.get("output", {})
        naming = raw_config.get("naming", {})
        types = raw_config.get("types", {})

        config = GeneratorConfig(
            version=str(raw_config.get("version", "1.0")),
            config_name=raw_config.get("config_name", "default"),

            # Output
            default_modes=self._parse_modes(output.get("default_modes")),
            align_fields=output.get("align_fields", True),

            # Naming
            naming_overrides=self._parse_overrides(naming.get("overrides")),

            # Types
            strict_types=types.get("strict", False),
        )

        logger.debug(f"Loaded config '{config.config_name}' from {config_path}")
        return config

    def _parse_modes(self, modes: Optional[List[str]]) -> List[OutputType]:
        if not modes:
            return list(DEFAULT_OUTPUT_TYPES)

        output_types = []
        for mode in modes:
            try:
                output_types.append(OutputType(mode))
            except ValueError:
                raise ValueError(
                    f"Unknown output mode '{mode}', expected one of: "
                    f"{', '.join(t.value for t in OutputType)}"
                ) from None
        return output_types

    def _parse_overrides(self, overrides: Optional[Dict]) -> Dict[str, str]:
        if not overrides:
            return {}
        if not isinstance(overrides, dict):
            raise ValueError("naming.overrides must be a mapping of word to spelling")

        # Lookups happen on lowercased source text
        return {str(word).lower(): str(spelling) for word, spelling in overrides.items()}
