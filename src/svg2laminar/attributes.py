"""Attribute classification and conversion to builder statements."""

from dataclasses import dataclass
from typing import Callable, Collection

from lxml import etree

from .context import ConversionContext
from .style import convert_style
from .transform import convert_transform
from .utils import qualified_name, quote_string

# Attributes holding geometry or coordinate-system data
GEOMETRIC_ATTRIBUTES = frozenset(
    [
        "d",
        "points",
        "transform",
        "viewBox",
        "preserveAspectRatio",
        "gradientTransform",
        "patternTransform",
        "maskContentUnits",
    ]
)

# Geometric attributes whose value is a transform list
TRANSFORM_ATTRIBUTES = frozenset(["transform", "gradientTransform", "patternTransform"])

# Builder members used where the attribute name cannot be used verbatim
CLASS_MEMBER = "cls"
ID_MEMBER = "idAttr"
STOP_COLOR_MEMBER = "stopColor"


def attribute_map(
    element: etree._Element, skip: Collection[str] = ()
) -> dict[str, str]:
    """Flatten an element's attributes into an ordered name -> value map.

    Namespaced attributes are keyed as ``prefix:local``.

    Args:
        element: An XML element.
        skip: Attribute names to leave out.

    Returns:
        Attributes in declaration order.
    """
    attributes: dict[str, str] = {}
    for name, value in element.attrib.items():
        key = qualified_name(element, name)
        if key in skip:
            continue
        attributes[key] = value
    return attributes


def _convert_class(name: str, value: str, context: ConversionContext, strict: bool) -> str:
    return f"svg.{CLASS_MEMBER} := {quote_string(value)}"


def _convert_style(name: str, value: str, context: ConversionContext, strict: bool) -> str:
    return convert_style(value, context)


def _convert_fill_reference(
    name: str, value: str, context: ConversionContext, strict: bool
) -> str:
    context.info(f"Keeping paint server reference: {value}")
    return f"svg.fill := {quote_string(value)}"


def _convert_namespaced(
    name: str, value: str, context: ConversionContext, strict: bool
) -> str:
    member = f"svg.svgAttr({quote_string(name)}, StringAsIsCodec, None)"
    return f"{member} := {quote_string(value)}"


def _convert_geometric(
    name: str, value: str, context: ConversionContext, strict: bool
) -> str:
    context.info(f"Converting geometric attribute: {name}")
    if name in TRANSFORM_ATTRIBUTES:
        return convert_transform(name, value, context, strict=strict)
    return f"svg.{name} := {quote_string(value)}"


def _convert_id(name: str, value: str, context: ConversionContext, strict: bool) -> str:
    return f"svg.{ID_MEMBER} := {quote_string(value)}"


def _convert_stop_color(
    name: str, value: str, context: ConversionContext, strict: bool
) -> str:
    return f"svg.{STOP_COLOR_MEMBER} := {quote_string(value)}"


def _convert_default(name: str, value: str, context: ConversionContext, strict: bool) -> str:
    return f"svg.{name} := {quote_string(value)}"


@dataclass(frozen=True)
class AttributeRule:
    """A conversion rule: applies ``convert`` when ``matches`` accepts the attribute."""

    kind: str
    matches: Callable[[str, str], bool]
    convert: Callable[[str, str, ConversionContext, bool], str]


# Evaluated in order; the first matching rule wins.
ATTRIBUTE_RULES: tuple[AttributeRule, ...] = (
    AttributeRule("class", lambda name, value: name == "class", _convert_class),
    AttributeRule("style", lambda name, value: name == "style", _convert_style),
    AttributeRule(
        "fill-reference",
        lambda name, value: name == "fill" and value.startswith("url("),
        _convert_fill_reference,
    ),
    AttributeRule("namespaced", lambda name, value: ":" in name, _convert_namespaced),
    AttributeRule(
        "geometric",
        lambda name, value: name in GEOMETRIC_ATTRIBUTES,
        _convert_geometric,
    ),
    AttributeRule("id", lambda name, value: name == "id", _convert_id),
    AttributeRule("stop-color", lambda name, value: name == "stop-color", _convert_stop_color),
)

DEFAULT_RULE = AttributeRule("default", lambda name, value: True, _convert_default)


def find_rule(name: str, value: str) -> AttributeRule:
    """Find the rule that handles an attribute.

    Example:
        >>> find_rule("fill", "url(#grad)").kind
        'fill-reference'
        >>> find_rule("fill", "red").kind
        'default'
    """
    for rule in ATTRIBUTE_RULES:
        if rule.matches(name, value):
            return rule
    return DEFAULT_RULE


def convert_attribute(
    name: str, value: str, context: ConversionContext, strict: bool = False
) -> str:
    """Convert a single attribute to one builder statement."""
    context.info(f"Processing attribute: {name}")
    rule = find_rule(name, value)
    return rule.convert(name, value, context, strict)


def convert_attributes(
    attributes: dict[str, str], context: ConversionContext, strict: bool = False
) -> list[str]:
    """Convert an attribute map to builder statements.

    Args:
        attributes: Ordered attribute map, see ``attribute_map``.
        context: Diagnostics for the current conversion.
        strict: Report unsupported transform functions as errors.

    Returns:
        One statement per attribute, in map order.
    """
    return [
        convert_attribute(name, value, context, strict=strict)
        for name, value in attributes.items()
    ]
