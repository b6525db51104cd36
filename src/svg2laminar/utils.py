"""Utility functions for SVG parsing and name handling."""

from pathlib import Path
from typing import Iterator

from lxml import etree

# SVG namespace mappings
SVG_NAMESPACES = {
    "svg": "http://www.w3.org/2000/svg",
    "inkscape": "http://www.inkscape.org/namespaces/inkscape",
    "sodipodi": "http://sodipodi.sourceforge.net/DTD/sodipodi-0.dtd",
    "xlink": "http://www.w3.org/1999/xlink",
    "xml": "http://www.w3.org/XML/1998/namespace",
}

# Escapes needed to embed a value in a Scala string literal
_SCALA_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
}


def make_parser() -> etree.XMLParser:
    """Create a parser that keeps comments and processing instructions."""
    return etree.XMLParser(
        remove_comments=False,
        remove_pis=False,
        resolve_entities=False,
        no_network=True,
    )


def parse_svg_string(text: str | bytes) -> etree._Element:
    """Parse SVG markup held in memory and return the root element."""
    if isinstance(text, str):
        text = text.encode("utf-8")
    return etree.fromstring(text, make_parser())


def get_local_name(tag: str) -> str:
    """Extract local name from a namespaced tag.

    Args:
        tag: Full tag name, possibly with namespace.

    Returns:
        Local name without namespace prefix.

    Example:
        >>> get_local_name("{http://www.w3.org/2000/svg}rect")
        'rect'
    """
    if tag.startswith("{"):
        return tag.split("}", 1)[1]
    return tag


def get_namespace_uri(tag: str) -> str | None:
    """Extract the namespace URI from a Clark-notation name, if any."""
    if tag.startswith("{"):
        return tag[1:].split("}", 1)[0]
    return None


def is_element(node) -> bool:
    """Check if a tree node is a regular element (not a comment, PI or entity)."""
    return isinstance(node.tag, str)


def qualified_name(element: etree._Element, name: str) -> str:
    """Turn a Clark-notation attribute name into its ``prefix:local`` form.

    The prefix is taken from the element's in-scope namespace map, then from
    the well-known SVG namespaces. Names without a namespace are returned as-is.

    Example:
        ``{http://www.w3.org/1999/xlink}href`` becomes ``xlink:href``.
    """
    uri = get_namespace_uri(name)
    if uri is None:
        return name

    local = get_local_name(name)
    for prefix, scope_uri in element.nsmap.items():
        if prefix and scope_uri == uri:
            return f"{prefix}:{local}"
    for prefix, known_uri in SVG_NAMESPACES.items():
        if known_uri == uri:
            return f"{prefix}:{local}"
    return local


def iter_elements(root: etree._Element, local_name: str) -> Iterator[etree._Element]:
    """Iterate over descendant elements (root included) with a given local name.

    Args:
        root: Element to search from.
        local_name: Tag name without namespace.

    Yields:
        Matching elements in document order.
    """
    for elem in root.iter():
        if is_element(elem) and get_local_name(elem.tag) == local_name:
            yield elem


def find_first(root: etree._Element, local_name: str) -> etree._Element | None:
    """Find the first descendant element with a given local name."""
    return next(iter_elements(root, local_name), None)


def quote_string(value: str) -> str:
    """Render a value as a double-quoted Scala string literal.

    Example:
        >>> quote_string('say "hi"')
        '"say \\\\"hi\\\\""'
    """
    escaped = "".join(_SCALA_ESCAPES.get(ch, ch) for ch in value)
    return f'"{escaped}"'


def module_name_for(file_path: Path) -> str:
    """Derive the generated module name from an input file name.

    The base name without its ``.svg`` extension gets its first letter
    upper-cased; the rest is kept unchanged.

    Example:
        >>> module_name_for(Path("icons/arrowLeft.svg"))
        'ArrowLeft'
    """
    stem = strip_svg_extension(Path(file_path).name)
    return stem[:1].upper() + stem[1:]


def strip_svg_extension(file_name: str) -> str:
    """Remove a trailing ``.svg`` extension (any case) from a file name."""
    if file_name.lower().endswith(".svg"):
        return file_name[: -len(".svg")]
    return file_name
