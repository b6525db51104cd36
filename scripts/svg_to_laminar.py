#!/usr/bin/env python3
"""Convert SVG files to Laminar (Scala) SVG components."""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from svg2laminar.config import ConvertConfig, parse_config_file
from svg2laminar.convert import (
    convert_directory,
    convert_file,
    format_conversion_report,
)


def main() -> int:
    """Main entry point.

    Returns:
        Exit code:
        - 0: Success
        - 1: I/O error
        - 2: Configuration error
        - 3: Conversion errors detected
    """
    parser = argparse.ArgumentParser(
        description="Convert SVG files to Laminar (Scala) SVG components.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print the generated code for one file
  %(prog)s icon.svg

  # Convert one file into an output directory
  %(prog)s icon.svg generated/

  # Convert every SVG file of a directory
  %(prog)s icons/ generated/ --config svg2laminar.yaml
""",
    )
    parser.add_argument(
        "input", type=Path, help="SVG file or directory containing SVG files"
    )
    parser.add_argument(
        "output",
        type=Path,
        nargs="?",
        help="Output directory (default: print generated code)",
    )
    parser.add_argument("--config", "-c", type=Path, help="Path to YAML config file")
    parser.add_argument(
        "--strict-transforms",
        action="store_true",
        help="Report unsupported transform functions as errors",
    )
    parser.add_argument(
        "--no-validate",
        action="store_true",
        help="Skip comparing generated code against the original SVG",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Log every conversion step"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    # Validate input path exists
    if not args.input.exists():
        print(f"Error: Input not found: {args.input}", file=sys.stderr)
        return 1

    # Parse config file
    config = ConvertConfig()
    if args.config is not None:
        if not args.config.exists():
            print(f"Error: Config file not found: {args.config}", file=sys.stderr)
            return 1
        try:
            config = parse_config_file(args.config)
        except Exception as e:
            print(f"Error: Failed to parse config file: {e}", file=sys.stderr)
            return 2

    if args.strict_transforms:
        config.strict_transforms = True
    if args.no_validate:
        config.validate = False

    output = args.output if args.output is not None else ""

    # Convert
    try:
        if args.input.is_dir():
            results = convert_directory(args.input, output, config)
        else:
            results = [convert_file(args.input, output, config)]
    except Exception as e:
        print(f"Error: Failed to convert: {e}", file=sys.stderr)
        return 1

    # Print report unless a single file's code went to stdout; warnings and
    # errors still reach stderr through logging
    if args.output is not None or args.input.is_dir():
        print(format_conversion_report(results))

    if any(result.has_errors for result in results):
        return 3

    return 0


if __name__ == "__main__":
    sys.exit(main())
