"""Inline style attribute parsing."""

from .context import ConversionContext
from .utils import quote_string


def parse_style(style: str, context: ConversionContext) -> list[tuple[str, str]]:
    """Parse a CSS-like inline style into ordered (key, value) pairs.

    Declarations are separated by ``;`` and must contain exactly one ``:``
    with a non-empty key and value. Anything else is dropped with a
    warning; the remaining declarations are still returned.

    Args:
        style: Value of a ``style`` attribute.
        context: Diagnostics for the current conversion.

    Returns:
        Declarations in source order.

    Example:
        >>> parse_style("fill:red; stroke:blue", ConversionContext())
        [('fill', 'red'), ('stroke', 'blue')]
    """
    declarations: list[tuple[str, str]] = []
    for segment in style.split(";"):
        segment = segment.strip()
        if not segment:
            continue

        parts = [part.strip() for part in segment.split(":")]
        if len(parts) != 2 or not parts[0] or not parts[1]:
            context.warning(f"Invalid style declaration: {segment}")
            continue

        declarations.append((parts[0], parts[1]))
    return declarations


def convert_style(style: str, context: ConversionContext) -> str:
    """Convert a style attribute value to a ``svg.style`` map assignment."""
    entries = ", ".join(
        f"{quote_string(key)} -> {quote_string(value)}"
        for key, value in parse_style(style, context)
    )
    return f"svg.style := Map({entries})"
