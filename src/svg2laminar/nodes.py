"""Recursive conversion of SVG nodes to builder expressions."""

import textwrap
from typing import Collection

from lxml import etree

from .attributes import attribute_map, convert_attributes
from .context import ConversionContext
from .namespaces import convert_namespaces
from .utils import get_local_name, is_element, quote_string

INDENT = "  "
SEPARATOR = ",\n"


def direct_text(element: etree._Element) -> str:
    """Concatenate the text directly inside an element, trimmed.

    Text of nested elements is not included, only the element's leading text
    and the tails following its children.
    """
    pieces = [element.text or ""]
    for child in element:
        pieces.append(child.tail or "")
    return "".join(pieces).strip()


def line_comment(text: str) -> str:
    """Render text as Scala line comments, one per line."""
    return "\n".join(f"// {line}".rstrip() for line in text.strip().splitlines() or [""])


def convert_comment(node: etree._Comment, context: ConversionContext) -> str:
    context.info("Preserving comment")
    return line_comment(node.text or "")


def convert_processing_instruction(
    node: etree._ProcessingInstruction, context: ConversionContext
) -> str:
    context.info(f"Preserving processing instruction: {node.target}")
    body = f"{node.target} {node.text}" if node.text else node.target
    return line_comment(f"<?{body}?>")


def convert_element(
    element: etree._Element,
    context: ConversionContext,
    include_root: bool = True,
    skip_attributes: Collection[str] = (),
    skip_children: Collection[str] = (),
    strict: bool = False,
) -> str:
    """Convert an element and its subtree to a builder expression.

    Args:
        element: Element to convert.
        context: Diagnostics for the current conversion.
        include_root: If False and the element is the document root, only the
            inner content is returned, without the ``svg.svg(...)`` call.
        skip_attributes: Attribute names of this element to leave out.
        skip_children: Local names of direct child elements to leave out.
        strict: Report unsupported transform functions as errors.

    Returns:
        Builder expression text.
    """
    label = get_local_name(element.tag)
    context.info(f"Converting element: {label}")

    children = []
    for child in element:
        if is_element(child) and get_local_name(child.tag) in skip_children:
            continue
        converted = convert_node(child, context, strict=strict)
        if converted:
            children.append(converted)

    statements = convert_namespaces(element, context)
    statements.extend(
        convert_attributes(attribute_map(element, skip_attributes), context, strict=strict)
    )

    text = direct_text(element)
    if text:
        statements.append(quote_string(text))

    content = SEPARATOR.join(statements + children)

    if not include_root and element.getparent() is None:
        return content
    if not content:
        return f"svg.{label}()"
    return f"svg.{label}(\n{textwrap.indent(content, INDENT)}\n)"


def convert_node(
    node: etree._Element,
    context: ConversionContext,
    include_root: bool = True,
    strict: bool = False,
) -> str:
    """Convert any tree node to builder text.

    Elements are converted recursively, comments and processing instructions
    become line comments. Other node kinds (entities) produce empty text.
    """
    if node.tag is etree.Comment:
        return convert_comment(node, context)
    if node.tag is etree.ProcessingInstruction:
        return convert_processing_instruction(node, context)
    if is_element(node):
        return convert_element(node, context, include_root=include_root, strict=strict)
    return ""
