"""Conversion settings and their YAML file format."""

from dataclasses import dataclass, field
from pathlib import Path

import yaml

DEFAULT_IMPORTS = ["com.raquo.laminar.api.L.*"]

KNOWN_SECTIONS = frozenset(["target", "component", "transform", "validate"])


@dataclass
class ConvertConfig:
    """Settings for generating Laminar modules."""

    extension: str = "scala"
    package: str | None = None
    imports: list[str] = field(default_factory=lambda: list(DEFAULT_IMPORTS))
    default_size: int = 48
    color_constants: bool = True
    strict_transforms: bool = False
    validate: bool = True


def _section(data: dict, name: str) -> dict:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"'{name}' section must be a dictionary")
    return section


def _flag(data: dict, key: str, label: str) -> bool:
    value = data[key]
    if not isinstance(value, bool):
        raise ValueError(f"'{label}' must be true or false, got {value!r}")
    return value


def parse_config(data: dict) -> ConvertConfig:
    """Build a ConvertConfig from parsed YAML data.

    Args:
        data: Top-level configuration dictionary.

    Returns:
        Parsed ConvertConfig. Missing keys keep their defaults.

    Raises:
        ValueError: If the format is invalid.
    """
    unknown = set(data) - KNOWN_SECTIONS
    if unknown:
        raise ValueError(f"Unknown configuration sections: {', '.join(sorted(unknown))}")

    config = ConvertConfig()

    # Target
    target = _section(data, "target")
    if "extension" in target:
        extension = str(target["extension"]).lstrip(".")
        if not extension:
            raise ValueError("'target.extension' must not be empty")
        config.extension = extension
    if "package" in target:
        config.package = str(target["package"]) if target["package"] else None
    if "imports" in target:
        imports = target["imports"]
        if not isinstance(imports, list):
            raise ValueError("'target.imports' must be a list")
        config.imports = [str(item) for item in imports]

    # Component
    component = _section(data, "component")
    if "default_size" in component:
        try:
            config.default_size = int(component["default_size"])
        except (TypeError, ValueError):
            raise ValueError(
                f"'component.default_size' must be an integer, "
                f"got {component['default_size']!r}"
            ) from None
        if config.default_size <= 0:
            raise ValueError("'component.default_size' must be positive")
    if "color_constants" in component:
        config.color_constants = _flag(
            component, "color_constants", "component.color_constants"
        )

    # Transform
    transform = _section(data, "transform")
    if "strict" in transform:
        config.strict_transforms = _flag(transform, "strict", "transform.strict")

    if "validate" in data:
        config.validate = _flag(data, "validate", "validate")

    return config


def parse_config_file(config_path: Path) -> ConvertConfig:
    """Parse a YAML configuration file.

    Args:
        config_path: Path to the YAML file.

    Returns:
        Parsed ConvertConfig.

    Raises:
        FileNotFoundError: If the file does not exist.
        yaml.YAMLError: If the file is not valid YAML.
        ValueError: If the configuration format is invalid.
    """
    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return ConvertConfig()
    if not isinstance(data, dict):
        raise ValueError("Configuration file must be a YAML dictionary")

    return parse_config(data)
