"""svg2laminar - Convert SVG files to Laminar (Scala) SVG builder code."""

__version__ = "0.1.0"

from .config import (
    ConvertConfig,
    parse_config,
    parse_config_file,
)
from .context import ConversionContext
from .convert import (
    ConversionResult,
    convert_directory,
    convert_file,
    format_conversion_report,
)
from .transform import (
    Matrix,
    Rotate,
    Scale,
    SkewX,
    SkewY,
    Transform,
    Translate,
    format_transform,
    parse_transform,
)
from .validate import ValidationResult, validate_conversion

__all__ = [
    # Config
    "ConvertConfig",
    "parse_config",
    "parse_config_file",
    # Conversion
    "ConversionContext",
    "ConversionResult",
    "convert_directory",
    "convert_file",
    "format_conversion_report",
    # Transforms
    "Matrix",
    "Rotate",
    "Scale",
    "SkewX",
    "SkewY",
    "Transform",
    "Translate",
    "format_transform",
    "parse_transform",
    # Validation
    "ValidationResult",
    "validate_conversion",
]
