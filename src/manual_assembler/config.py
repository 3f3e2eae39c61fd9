"""
Configuration for the manual build.

Manages where the manual source lives, where output goes and which
formats are produced.
"""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any

import yaml

from manual_assembler.errors import ConfigError, InvalidConfigError
from manual_assembler.naming import ItemNameStyle

KNOWN_FORMATS = ("markdown", "html", "text")


@dataclass
class ManualConfig:
    """Configuration for a manual build.

    Attributes:
        manual_dir: Root of the manual source tree (one directory per section)
        output_dir: Where to write generated output
        title: Manual title used in page headers
        formats: Output formats to generate
        item_names: ``raw`` keeps item names as written, ``decoded`` applies
            the section rule (underscores to spaces, capitalised)
        template_dir: Directory with Jinja2 templates overriding the bundled ones
        include_timestamps: Stamp generated output with the build date
    """

    manual_dir: Path = field(default_factory=lambda: Path("docs/manual"))
    output_dir: Path = field(default_factory=lambda: Path("docs"))
    title: str = "Manual"

    formats: list[str] = field(default_factory=lambda: list(KNOWN_FORMATS))
    item_names: ItemNameStyle = ItemNameStyle.RAW

    template_dir: Path | None = None
    include_timestamps: bool = False

    def __post_init__(self):
        """Normalise paths and validate values."""
        if isinstance(self.manual_dir, str):
            self.manual_dir = Path(self.manual_dir)
        if isinstance(self.output_dir, str):
            self.output_dir = Path(self.output_dir)
        if isinstance(self.template_dir, str):
            self.template_dir = Path(self.template_dir)

        try:
            self.item_names = ItemNameStyle(self.item_names)
        except ValueError:
            raise InvalidConfigError("item_names", self.item_names) from None

        if isinstance(self.formats, str):
            self.formats = [self.formats]
        for fmt in self.formats:
            if fmt not in KNOWN_FORMATS:
                raise InvalidConfigError(
                    "formats",
                    fmt,
                    f"Unknown output format {fmt!r} (expected one of {', '.join(KNOWN_FORMATS)})",
                )

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "ManualConfig":
        """Load configuration from YAML file.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            ManualConfig instance
        """
        try:
            with open(yaml_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read config file {yaml_path}", cause=e) from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {yaml_path}", cause=e) from e

        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ManualConfig":
        """Create config from dictionary, rejecting unknown keys."""
        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidConfigError(
                unknown[0], data[unknown[0]], f"Unknown configuration key: {unknown[0]}"
            )
        return cls(**data)

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary."""
        return {
            "manual_dir": str(self.manual_dir),
            "output_dir": str(self.output_dir),
            "title": self.title,
            "formats": list(self.formats),
            "item_names": self.item_names.value,
            "template_dir": str(self.template_dir) if self.template_dir else None,
            "include_timestamps": self.include_timestamps,
        }

    def merge(self, **overrides: Any) -> "ManualConfig":
        """Return a copy with the non-None overrides applied."""
        data = self.to_dict()
        data.update({key: value for key, value in overrides.items() if value is not None})
        return ManualConfig.from_dict(data)
