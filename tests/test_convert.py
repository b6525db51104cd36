"""Tests for svg2laminar.convert module."""

import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from lxml import etree

from svg2laminar.config import ConvertConfig
from svg2laminar.convert import (
    ConversionResult,
    check_output_dir,
    convert_directory,
    convert_file,
    format_conversion_report,
    is_svg_file_name,
    output_file_for,
)
from svg2laminar.validate import ValidationResult


MINIMAL_SVG = '<svg viewBox="0 0 24 24"><path d="M0 0"/></svg>'

ELECTRON_SVG = """<?xml version="1.0" encoding="UTF-8"?>
<svg xmlns="http://www.w3.org/2000/svg" width="48" height="48">
  <title>Electron</title>
  <circle cx="24" cy="24" r="4" fill="#3366FF"/>
  <ellipse cx="24" cy="24" rx="20" ry="8" style="fill:none;stroke:#3366FF" transform="rotate(60 24 24)"/>
</svg>"""


@pytest.fixture
def minimal_svg(tmp_path) -> Path:
    """Create a minimal SVG file."""
    svg_file = tmp_path / "icon.svg"
    svg_file.write_text(MINIMAL_SVG)
    return svg_file


@pytest.fixture
def output_dir(tmp_path) -> Path:
    """Create an output directory."""
    out = tmp_path / "out"
    out.mkdir()
    return out


class TestHelpers:
    """Tests for small helper functions."""

    def test_output_file_for(self):
        assert output_file_for(Path("in/icon.svg"), Path("out")) == Path("out/icon.scala")

    def test_output_file_for_extension(self):
        assert output_file_for(Path("in/Logo.SVG"), Path("out"), "sc") == Path("out/Logo.sc")

    @pytest.mark.parametrize(
        "name,expected",
        [("a.svg", True), ("B.SVG", True), ("c.Svg", True), ("d.png", False), ("svg", False)],
    )
    def test_is_svg_file_name(self, name, expected):
        assert is_svg_file_name(name) is expected

    def test_check_output_dir_missing(self, tmp_path):
        with pytest.raises(NotADirectoryError):
            check_output_dir(tmp_path / "missing")


class TestConversionResult:
    """Tests for ConversionResult dataclass."""

    def test_properties(self):
        result = ConversionResult(
            file_path=Path("dir/icon.svg"),
            code="",
            original="",
            validation=ValidationResult(is_valid=True),
            warnings=("w",),
        )
        assert result.file_name == "icon.svg"
        assert result.has_errors is False
        assert result.has_warnings is True

    def test_immutable(self):
        result = ConversionResult(
            file_path=Path("icon.svg"),
            code="",
            original="",
            validation=ValidationResult(is_valid=True),
        )
        with pytest.raises(AttributeError):
            result.code = "changed"


class TestConvertFile:
    """Tests for convert_file function."""

    def test_minimal_file(self, minimal_svg, output_dir):
        result = convert_file(minimal_svg, output_dir)
        assert result.errors == ()
        assert 'svg.viewBox := "0 0 24 24"' in result.code
        assert 'svg.d := "M0 0"' in result.code
        assert "object Icon:" in result.code
        assert result.original == MINIMAL_SVG
        assert result.validation.is_valid is True

    def test_output_written(self, minimal_svg, output_dir):
        result = convert_file(minimal_svg, output_dir)
        output_file = output_dir / "icon.scala"
        assert output_file.exists()
        assert output_file.read_text(encoding="utf-8") == result.code

    def test_custom_extension(self, minimal_svg, output_dir):
        convert_file(minimal_svg, output_dir, ConvertConfig(extension="sc"))
        assert (output_dir / "icon.sc").exists()

    def test_empty_output_prints_code(self, minimal_svg, capsys):
        result = convert_file(minimal_svg)
        captured = capsys.readouterr()
        assert captured.out == result.code

    def test_log_collected(self, minimal_svg, output_dir):
        result = convert_file(minimal_svg, output_dir)
        assert "Converting element: svg" in result.log
        assert "Converting element: path" in result.log
        assert "Processing attribute: d" in result.log

    def test_file_with_title_and_colors(self, tmp_path, output_dir):
        svg_file = tmp_path / "electron.svg"
        svg_file.write_text(ELECTRON_SVG)
        result = convert_file(svg_file, output_dir)
        assert result.errors == ()
        assert " * Electron" in result.code
        assert "object Electron:" in result.code
        assert 'svg.viewBox := "0 0 48 48"' in result.code
        assert 'svg.transform := "rotate(60,24,24)"' in result.code
        assert 'svg.style := Map("fill" -> "none", "stroke" -> "#3366FF")' in result.code
        assert 'val color_3366ff = "#3366FF"' in result.code
        assert result.validation.is_valid is True, result.validation.differences

    def test_missing_view_box_warns(self, tmp_path, output_dir):
        svg_file = tmp_path / "plain.svg"
        svg_file.write_text("<svg><rect/></svg>")
        result = convert_file(svg_file, output_dir)
        assert result.warnings == ("No viewBox attribute found, this may affect scaling",)
        assert result.errors == ()

    def test_comment_content_counts_on_both_sides(self, tmp_path, output_dir):
        svg_file = tmp_path / "note.svg"
        svg_file.write_text('<svg viewBox="0 0 1 1"><!-- <blink rate="2"> --></svg>')
        result = convert_file(svg_file, output_dir)
        assert "// <blink rate=\"2\">" in result.code
        assert result.validation.is_valid is True

    def test_validation_differences_become_warnings(self, tmp_path, output_dir):
        svg_file = tmp_path / "quoted.svg"
        svg_file.write_text('<svg viewBox="0 0 1 1"><text>a="b"</text></svg>')
        result = convert_file(svg_file, output_dir)
        assert result.validation.is_valid is False
        assert result.validation.differences == ("Missing attributes in generated code: a",)
        assert result.warnings == result.validation.differences
        assert result.errors == ()

    def test_validation_disabled(self, minimal_svg, output_dir):
        result = convert_file(minimal_svg, output_dir, ConvertConfig(validate=False))
        assert result.validation == ValidationResult(is_valid=True)

    def test_prolog_stylesheet_does_not_fail_validation(self, tmp_path, output_dir):
        svg_file = tmp_path / "styled.svg"
        svg_file.write_text(
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            '<?xml-stylesheet href="icons.css" type="text/css"?>\n'
            "<!-- Created with Inkscape (http://www.inkscape.org/) -->\n"
            '<svg viewBox="0 0 1 1"><rect width="1"/></svg>\n'
        )
        result = convert_file(svg_file, output_dir)
        assert result.validation.is_valid is True, result.validation.differences
        assert result.warnings == ()

    def test_strict_transforms(self, tmp_path, output_dir):
        svg_file = tmp_path / "skewed.svg"
        svg_file.write_text('<svg viewBox="0 0 1 1"><g transform="skew(5)"/></svg>')
        result = convert_file(svg_file, output_dir, ConvertConfig(strict_transforms=True))
        assert result.errors == ("Unsupported transform function: skew(5)",)

    def test_missing_input(self, tmp_path, output_dir):
        with pytest.raises(FileNotFoundError):
            convert_file(tmp_path / "missing.svg", output_dir)

    def test_input_is_directory(self, tmp_path, output_dir):
        with pytest.raises(FileNotFoundError):
            convert_file(tmp_path, output_dir)

    def test_missing_output_dir(self, minimal_svg, tmp_path):
        with pytest.raises(NotADirectoryError):
            convert_file(minimal_svg, tmp_path / "nowhere")

    def test_invalid_xml(self, tmp_path, output_dir):
        svg_file = tmp_path / "broken.svg"
        svg_file.write_text("<svg><g></svg>")
        with pytest.raises(etree.XMLSyntaxError):
            convert_file(svg_file, output_dir)

    def test_write_failure_recorded(self, minimal_svg, output_dir):
        (output_dir / "icon.scala").mkdir()
        result = convert_file(minimal_svg, output_dir)
        assert len(result.errors) == 1
        assert result.errors[0].startswith("Failed to write")


class TestConvertDirectory:
    """Tests for convert_directory function."""

    @pytest.fixture
    def svg_dir(self, tmp_path) -> Path:
        """Create a directory with SVG and non-SVG files."""
        svg_dir = tmp_path / "icons"
        svg_dir.mkdir()
        (svg_dir / "one.svg").write_text(MINIMAL_SVG)
        (svg_dir / "Two.SVG").write_text(MINIMAL_SVG)
        (svg_dir / "three.svg").write_text(ELECTRON_SVG)
        (svg_dir / "readme.txt").write_text("not an svg")
        (svg_dir / "image.png").write_bytes(b"\x89PNG")
        return svg_dir

    def test_one_result_per_svg(self, svg_dir, output_dir):
        results = convert_directory(svg_dir, output_dir)
        assert len(results) == 3
        assert {r.file_name for r in results} == {"one.svg", "Two.SVG", "three.svg"}
        assert all(not r.has_errors for r in results)

    def test_listing_order(self, svg_dir, output_dir):
        results = convert_directory(svg_dir, output_dir)
        expected = [p.name for p in svg_dir.iterdir() if p.name.lower().endswith(".svg")]
        assert [r.file_name for r in results] == expected

    def test_outputs_written(self, svg_dir, output_dir):
        convert_directory(svg_dir, output_dir)
        assert sorted(p.name for p in output_dir.iterdir()) == [
            "Two.scala",
            "one.scala",
            "three.scala",
        ]

    def test_failure_does_not_stop_batch(self, svg_dir, output_dir):
        (svg_dir / "broken.svg").write_text("<svg><g></svg>")
        results = convert_directory(svg_dir, output_dir)
        assert len(results) == 4

        broken = next(r for r in results if r.file_name == "broken.svg")
        assert broken.code == ""
        assert len(broken.errors) == 1
        assert broken.validation.is_valid is False
        assert "Converting file:" in broken.log[0]

        others = [r for r in results if r.file_name != "broken.svg"]
        assert all(not r.has_errors for r in others)

    def test_missing_output_dir_recorded_per_file(self, svg_dir, tmp_path):
        results = convert_directory(svg_dir, tmp_path / "nowhere")
        assert len(results) == 3
        assert all(r.errors[0].startswith("Output directory does not exist") for r in results)

    def test_not_a_directory(self, minimal_svg, output_dir):
        with pytest.raises(NotADirectoryError, match="is not a directory"):
            convert_directory(minimal_svg, output_dir)

    def test_empty_directory(self, tmp_path, output_dir):
        empty = tmp_path / "empty"
        empty.mkdir()
        assert convert_directory(empty, output_dir) == []


class TestFormatConversionReport:
    """Tests for format_conversion_report function."""

    def test_report(self):
        ok = ConversionResult(
            file_path=Path("ok.svg"),
            code="x",
            original="<svg/>",
            validation=ValidationResult(is_valid=True),
            warnings=("No viewBox attribute found, this may affect scaling",),
        )
        failed = ConversionResult(
            file_path=Path("bad.svg"),
            code="",
            original="",
            validation=ValidationResult(is_valid=False),
            errors=("boom",),
        )
        report = format_conversion_report([ok, failed])
        assert "Processed: ok.svg" in report
        assert "  - No viewBox attribute found, this may affect scaling" in report
        assert "Processed: bad.svg" in report
        assert "Errors:\n  - boom" in report
        assert "Files processed: 2" in report
        assert "Converted: 1" in report
        assert "Failed: 1" in report
        assert "Validation mismatches: 0" in report
