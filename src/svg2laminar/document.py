"""Assembly of the generated Scala module for one SVG document."""

import re
import textwrap

from lxml import etree

from .config import ConvertConfig
from .context import ConversionContext
from .nodes import SEPARATOR, convert_element, convert_node
from .utils import find_first, get_local_name, is_element, quote_string

DEFAULT_TITLE = "SVG Component"

# Root attributes emitted by the wrapper instead of the converted body
WRAPPER_ATTRIBUTES = frozenset(["width", "height", "viewBox"])

COLOR_PATTERN = re.compile(r"#[0-9A-Fa-f]{3,8}\b|rgba?\([^)]+\)")

MODULE_INDENT = "  "
BODY_INDENT = "      "


def extract_view_box(root: etree._Element, context: ConversionContext) -> str:
    """Determine the viewBox of a document.

    Uses the ``viewBox`` attribute, or ``0 0 <width> <height>`` when only
    width and height are given.

    Args:
        root: Root SVG element.
        context: Diagnostics for the current conversion.

    Returns:
        viewBox value, or an empty string (with a warning) if none is available.
    """
    view_box = root.get("viewBox")
    if view_box:
        return view_box.strip()

    width = root.get("width")
    height = root.get("height")
    if width and height:
        context.info("Computing viewBox from width and height")
        return f"0 0 {width.strip()} {height.strip()}"

    context.warning("No viewBox attribute found, this may affect scaling")
    return ""


def extract_defs(
    root: etree._Element, context: ConversionContext, strict: bool = False
) -> list[str]:
    """Convert the ``<defs>`` elements placed directly under the root."""
    defs = []
    for child in root:
        if is_element(child) and get_local_name(child.tag) == "defs":
            defs.append(convert_node(child, context, strict=strict))
    return defs


def _element_text(root: etree._Element, local_name: str) -> str:
    element = find_first(root, local_name)
    if element is None:
        return ""
    return "".join(element.itertext()).strip()


def _doc_text(text: str) -> str:
    """Collapse whitespace and escape comment delimiters for a Scaladoc line.

    Scala comments nest, so both ``*/`` and ``/*`` are replaced by HTML
    entities.

    Example:
        >>> _doc_text("a */ b")
        'a *&#47; b'
    """
    text = " ".join(text.split())
    return text.replace("*/", "*&#47;").replace("/*", "/&#42;")


def generate_docs(root: etree._Element) -> str:
    """Build the Scaladoc block from ``<title>`` and ``<desc>``."""
    title = _element_text(root, "title") or DEFAULT_TITLE
    desc = _element_text(root, "desc")

    lines = ["/**", f" * {_doc_text(title)}"]
    if desc:
        lines.append(" *")
        lines.append(f" * Description: {_doc_text(desc)}")
    lines.extend(
        [
            " *",
            " * @param size The size of the SVG (both width and height)",
            " * @param className Optional CSS class name to apply to the SVG",
            " * @param customAttributes Additional SVG attributes to apply",
            " */",
        ]
    )
    return "\n".join(lines)


def color_name(color: str) -> str:
    """Derive a constant name for a color literal.

    Example:
        >>> color_name("#FF0000")
        'color_ff0000'
        >>> color_name("rgb(255, 0, 0)")
        'color_rgb_255_0_0'
    """
    if color.startswith("#"):
        return f"color_{color[1:].lower()}"
    function, _, args = color.partition("(")
    parts = [re.sub(r"\W", "", part) for part in args.rstrip(")").split(",")]
    return "_".join(["color", function.lower()] + [p for p in parts if p])


def extract_colors(root: etree._Element) -> dict[str, str]:
    """Collect color literals used in attribute values.

    Returns:
        Constant name -> color, in order of first appearance.
    """
    colors: dict[str, str] = {}
    for elem in root.iter():
        if not is_element(elem):
            continue
        for value in elem.attrib.values():
            for color in COLOR_PATTERN.findall(value):
                colors.setdefault(color_name(color), color)
    return colors


def generate_constants(root: etree._Element) -> str:
    """Build the ``Colors`` object, or an empty string if no colors are used."""
    colors = extract_colors(root)
    if not colors:
        return ""

    lines = ["// Color constants used in this SVG", "object Colors:"]
    for name, value in colors.items():
        lines.append(f"{MODULE_INDENT}val {name} = {quote_string(value)}")
    return "\n".join(lines)


def generate_header(config: ConvertConfig) -> str:
    lines = []
    if config.package:
        lines.append(f"package {config.package}")
        lines.append("")
    lines.extend(f"import {module}" for module in config.imports)
    return "\n".join(lines)


def assemble_module(
    root: etree._Element,
    module_name: str,
    source_name: str,
    context: ConversionContext,
    config: ConvertConfig | None = None,
) -> str:
    """Generate the complete Scala module for one SVG document.

    Args:
        root: Root SVG element.
        module_name: Name of the generated object.
        source_name: Input file name, mentioned in a comment.
        context: Diagnostics for the current conversion.
        config: Conversion settings (defaults if None).

    Returns:
        Module source text.
    """
    if config is None:
        config = ConvertConfig()
    strict = config.strict_transforms

    view_box = extract_view_box(root, context)
    defs = extract_defs(root, context, strict=strict)
    body = convert_element(
        root,
        context,
        include_root=False,
        skip_attributes=WRAPPER_ATTRIBUTES,
        skip_children={"defs"},
        strict=strict,
    )

    wrapper = ["svg.width := size.toString", "svg.height := size.toString"]
    if view_box:
        wrapper.append(f"svg.viewBox := {quote_string(view_box)}")
    wrapper.append("className.map(svg.cls := _).toSeq")
    wrapper.append("customAttributes")
    wrapper.extend(defs)
    if body:
        wrapper.append(body)

    svg_call = "svg.svg(\n" + textwrap.indent(SEPARATOR.join(wrapper), BODY_INDENT)
    svg_call += "\n    )"

    sections = [
        generate_header(config),
        "",
        generate_docs(root),
        f"object {module_name}:",
        f"{MODULE_INDENT}// Generated from SVG file: {source_name}",
        f"{MODULE_INDENT}def apply(",
        f"{MODULE_INDENT * 2}size: Int = {config.default_size},",
        f"{MODULE_INDENT * 2}className: Option[String] = None,",
        f"{MODULE_INDENT * 2}customAttributes: Seq[Modifier[SvgElement]] = Seq.empty",
        f"{MODULE_INDENT}): SvgElement =",
        f"{MODULE_INDENT * 2}{svg_call}",
    ]

    if config.color_constants:
        constants = generate_constants(root)
        if constants:
            sections.append("")
            sections.append(textwrap.indent(constants, MODULE_INDENT))

    return "\n".join(sections) + "\n"
