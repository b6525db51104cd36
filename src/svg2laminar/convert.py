"""Conversion of SVG files and directories to Laminar modules."""

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path

from .config import ConvertConfig
from .context import ConversionContext
from .document import assemble_module
from .utils import module_name_for, parse_svg_string, strip_svg_extension
from .validate import ValidationResult, validate_conversion

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    """Result of converting one SVG file."""

    file_path: Path
    code: str
    original: str
    validation: ValidationResult
    warnings: tuple[str, ...] = ()
    errors: tuple[str, ...] = ()
    log: tuple[str, ...] = ()

    @property
    def file_name(self) -> str:
        """Name of the converted file."""
        return self.file_path.name

    @property
    def has_errors(self) -> bool:
        """Check if there are any errors."""
        return len(self.errors) > 0

    @property
    def has_warnings(self) -> bool:
        """Check if there are any warnings."""
        return len(self.warnings) > 0


def _build_result(
    file_path: Path,
    code: str,
    original: str,
    validation: ValidationResult,
    context: ConversionContext,
) -> ConversionResult:
    return ConversionResult(
        file_path=file_path,
        code=code,
        original=original,
        validation=validation,
        warnings=tuple(context.warnings),
        errors=tuple(context.errors),
        log=tuple(context.log),
    )


def output_file_for(input_path: Path, output_dir: Path, extension: str = "scala") -> Path:
    """Path of the generated module for an input file.

    Example:
        >>> output_file_for(Path("in/icon.svg"), Path("out"))
        PosixPath('out/icon.scala')
    """
    return output_dir / f"{strip_svg_extension(input_path.name)}.{extension}"


def check_input_file(input_path: Path) -> None:
    """Check that an input path is a readable regular file.

    Raises:
        FileNotFoundError: If the path does not exist or is not a file.
        PermissionError: If the file cannot be read.
    """
    if not input_path.is_file():
        raise FileNotFoundError(f"SVG file not found: {input_path}")
    if not os.access(input_path, os.R_OK):
        raise PermissionError(f"SVG file is not readable: {input_path}")


def check_output_dir(output_dir: Path) -> None:
    """Check that an output path is an existing, writable directory.

    Raises:
        NotADirectoryError: If the path is not an existing directory.
        PermissionError: If the directory is not writable.
    """
    if not output_dir.is_dir():
        raise NotADirectoryError(f"Output directory does not exist: {output_dir}")
    if not os.access(output_dir, os.W_OK):
        raise PermissionError(f"Output directory is not writable: {output_dir}")


def _convert(
    input_path: Path,
    output_dir: Path | None,
    config: ConvertConfig,
    context: ConversionContext,
) -> ConversionResult:
    """Convert one file with an existing context; see ``convert_file``."""
    check_input_file(input_path)
    if output_dir is not None:
        check_output_dir(output_dir)

    context.info(f"Converting file: {input_path}")
    source = input_path.read_bytes()
    original = source.decode("utf-8", errors="replace")
    root = parse_svg_string(source)

    code = assemble_module(
        root,
        module_name_for(input_path),
        input_path.name,
        context,
        config,
    )

    if output_dir is None:
        sys.stdout.write(code)
    else:
        output_file = output_file_for(input_path, output_dir, config.extension)
        try:
            output_file.write_text(code, encoding="utf-8")
            context.info(f"Output written to: {output_file}")
        except OSError as e:
            context.error(f"Failed to write {output_file}: {e}")

    if config.validate:
        validation = validate_conversion(original, code)
        for difference in validation.differences:
            context.warning(difference)
    else:
        validation = ValidationResult(is_valid=True)

    return _build_result(input_path, code, original, validation, context)


def convert_file(
    input_path: Path | str,
    output_path: Path | str = "",
    config: ConvertConfig | None = None,
) -> ConversionResult:
    """Convert a single SVG file to a Laminar module.

    Args:
        input_path: SVG file to convert.
        output_path: Directory to write ``<name>.<extension>`` into. When empty,
            the generated code is written to standard output.
        config: Conversion settings (defaults if None).

    Returns:
        ConversionResult with the generated code and diagnostics.

    Raises:
        FileNotFoundError: If the input is not an existing file.
        PermissionError: If the input is unreadable or the output unwritable.
        NotADirectoryError: If the output path is not an existing directory.
        lxml.etree.XMLSyntaxError: If the input is not valid XML.
    """
    if config is None:
        config = ConvertConfig()
    output_dir = Path(output_path) if str(output_path) else None
    return _convert(Path(input_path), output_dir, config, ConversionContext())


def is_svg_file_name(name: str) -> bool:
    """Check if a directory entry name has an ``.svg`` extension (any case)."""
    return name.lower().endswith(".svg")


def convert_directory(
    input_path: Path | str,
    output_path: Path | str = "",
    config: ConvertConfig | None = None,
) -> list[ConversionResult]:
    """Convert every SVG file in a directory.

    Files are processed in directory listing order. A failure for one file
    is recorded as an error in its result and does not stop the batch.

    Args:
        input_path: Directory containing SVG files.
        output_path: Directory for generated modules (stdout when empty).
        config: Conversion settings (defaults if None).

    Returns:
        One ConversionResult per ``.svg`` entry.

    Raises:
        NotADirectoryError: If the input path is not a directory.
    """
    if config is None:
        config = ConvertConfig()
    directory = Path(input_path)
    if not directory.is_dir():
        raise NotADirectoryError(f"{directory} is not a directory")

    output_dir = Path(output_path) if str(output_path) else None

    results: list[ConversionResult] = []
    for entry in directory.iterdir():
        if not is_svg_file_name(entry.name):
            continue

        context = ConversionContext()
        try:
            results.append(_convert(entry, output_dir, config, context))
        except Exception as e:
            logger.debug("Conversion of %s failed", entry, exc_info=True)
            context.error(str(e) or type(e).__name__)
            results.append(
                _build_result(entry, "", "", ValidationResult(is_valid=False), context)
            )
    return results


def format_conversion_report(results: list[ConversionResult]) -> str:
    """Format conversion results as text.

    Args:
        results: Results of one or more conversions.

    Returns:
        Formatted text.
    """
    lines: list[str] = []

    for result in results:
        lines.append(f"Processed: {result.file_name}")
        if result.warnings:
            lines.append("Warnings:")
            for warning in result.warnings:
                lines.append(f"  - {warning}")
        if result.errors:
            lines.append("Errors:")
            for error in result.errors:
                lines.append(f"  - {error}")
        lines.append("")

    failed = sum(1 for r in results if r.has_errors)
    invalid = sum(1 for r in results if not r.has_errors and not r.validation.is_valid)

    lines.append("=" * 60)
    lines.append("SUMMARY")
    lines.append("=" * 60)
    lines.append(f"Files processed: {len(results)}")
    lines.append(f"Converted: {len(results) - failed}")
    lines.append(f"Failed: {failed}")
    lines.append(f"Validation mismatches: {invalid}")

    return "\n".join(lines)
