"""Lexical comparison of the original SVG with the generated module.

This is a heuristic: names are collected with regular expressions, so a
name that only occurs in text or comment content still counts, and names
the mapper renames are mapped back through ``MEMBER_ALIASES``.
"""

import re
from dataclasses import dataclass

# <name followed by whitespace, "/" or ">", or a svg.name( builder call
ELEMENT_PATTERN = re.compile(
    r"<(?:[A-Za-z_][\w.-]*:)?([A-Za-z_][\w.-]*)(?=[\s/>])"
    r"|\bsvg\.(?!svgAttr\()([A-Za-z_][\w-]*)\("
)

# name=" markup attributes, svg.name := builder statements, svgAttr("name"
ATTRIBUTE_PATTERN = re.compile(
    r"(?<![\w:.-])([A-Za-z_][\w:.-]*)=[\"']"
    r"|\bsvg\.([A-Za-z_][\w-]*)\s*:="
    r"|\bsvgAttr\(\"([^\"]+)\""
)

# Comments, PIs and whitespace allowed outside the root element
_MISC = r"(?:\s|<\?(?:(?!\?>).)*\?>|<!--(?:(?!-->).)*-->)"

# XML declaration, stylesheet PIs, comments and DOCTYPE before the root
PROLOG = re.compile(
    rf"\A(?:\ufeff|<!DOCTYPE[^>\[]*(?:\[.*?\])?\s*>|{_MISC})*", re.S
)

# Comments and PIs after the root
EPILOG = re.compile(rf"{_MISC}*\Z", re.S)

# Builder members that stand for a differently named SVG attribute
MEMBER_ALIASES = {
    "cls": "class",
    "idAttr": "id",
    "stopColor": "stop-color",
}


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of comparing original and generated text."""

    is_valid: bool
    differences: tuple[str, ...] = ()


def normalize_name(name: str) -> str:
    """Map a builder member name back to the SVG attribute it represents."""
    if name.startswith("xmlns_"):
        return "xmlns:" + name[len("xmlns_"):]
    return MEMBER_ALIASES.get(name, name)


def _collect(pattern: re.Pattern, text: str) -> set[str]:
    names = set()
    text = EPILOG.sub("", PROLOG.sub("", text, count=1), count=1)
    for match in pattern.finditer(text):
        name = next(group for group in match.groups() if group)
        names.add(normalize_name(name))
    return names


def extract_element_names(text: str) -> set[str]:
    """Collect element names from markup tags and builder calls."""
    return _collect(ELEMENT_PATTERN, text)


def extract_attribute_names(text: str) -> set[str]:
    """Collect attribute names from markup and builder statements."""
    return _collect(ATTRIBUTE_PATTERN, text)


def validate_conversion(original: str, generated: str) -> ValidationResult:
    """Report element and attribute names of the original missing from the output.

    Args:
        original: Source SVG text.
        generated: Generated module text.

    Returns:
        ValidationResult; valid when nothing is missing.
    """
    differences: list[str] = []

    missing_elements = extract_element_names(original) - extract_element_names(generated)
    if missing_elements:
        differences.append(
            f"Missing elements in generated code: {', '.join(sorted(missing_elements))}"
        )

    missing_attributes = extract_attribute_names(original) - extract_attribute_names(
        generated
    )
    if missing_attributes:
        differences.append(
            f"Missing attributes in generated code: {', '.join(sorted(missing_attributes))}"
        )

    return ValidationResult(is_valid=not differences, differences=tuple(differences))
