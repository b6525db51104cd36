"""SVG transform attribute parsing and re-serialization."""

import math
import re
from dataclasses import dataclass
from typing import ClassVar

from .context import ConversionContext
from .utils import quote_string

# One transform function call: name(args)
TRANSFORM_PATTERN = re.compile(r"([A-Za-z_]\w*)\s*\(([^)]*)\)")


def format_number(value: float) -> str:
    """Format a number without a trailing ``.0`` for integral values.

    Example:
        >>> format_number(10.0)
        '10'
        >>> format_number(0.5)
        '0.5'
    """
    if value.is_integer():
        return str(int(value))
    return repr(value)


@dataclass(frozen=True)
class Matrix:
    """matrix(a, b, c, d, e, f)"""

    function: ClassVar[str] = "matrix"

    a: float
    b: float
    c: float
    d: float
    e: float
    f: float

    @property
    def arguments(self) -> tuple[float, ...]:
        return (self.a, self.b, self.c, self.d, self.e, self.f)


@dataclass(frozen=True)
class Translate:
    """translate(x [, y])"""

    function: ClassVar[str] = "translate"

    x: float
    y: float | None = None

    @property
    def arguments(self) -> tuple[float, ...]:
        if self.y is None:
            return (self.x,)
        return (self.x, self.y)


@dataclass(frozen=True)
class Scale:
    """scale(x [, y])"""

    function: ClassVar[str] = "scale"

    x: float
    y: float | None = None

    @property
    def arguments(self) -> tuple[float, ...]:
        if self.y is None:
            return (self.x,)
        return (self.x, self.y)


@dataclass(frozen=True)
class Rotate:
    """rotate(angle [, cx, cy])"""

    function: ClassVar[str] = "rotate"

    angle: float
    cx: float | None = None
    cy: float | None = None

    @property
    def arguments(self) -> tuple[float, ...]:
        # SVG only accepts the centre as a pair
        if self.cx is None or self.cy is None:
            return (self.angle,)
        return (self.angle, self.cx, self.cy)


@dataclass(frozen=True)
class SkewX:
    """skewX(angle)"""

    function: ClassVar[str] = "skewX"

    angle: float

    @property
    def arguments(self) -> tuple[float, ...]:
        return (self.angle,)


@dataclass(frozen=True)
class SkewY:
    """skewY(angle)"""

    function: ClassVar[str] = "skewY"

    angle: float

    @property
    def arguments(self) -> tuple[float, ...]:
        return (self.angle,)


Transform = Matrix | Translate | Scale | Rotate | SkewX | SkewY


def _parse_number(token: str, context: ConversionContext | None) -> float:
    try:
        value = float(token)
    except ValueError:
        value = None
    if value is None or not math.isfinite(value):
        if context is not None:
            context.warning(f"Invalid transform argument '{token}', using 0")
        return 0.0
    return value


def parse_arguments(text: str, context: ConversionContext | None = None) -> list[float]:
    """Parse transform function arguments.

    Arguments are separated by commas; a comma-separated piece may hold
    several whitespace-separated numbers. Empty pieces, unparseable and
    non-finite numbers become 0.0 and are reported as warnings.

    Args:
        text: Raw text between the parentheses.
        context: Diagnostics for the current conversion.

    Returns:
        Parsed numbers in order.

    Example:
        >>> parse_arguments("10,")
        [10.0, 0.0]
    """
    values: list[float] = []
    for piece in text.split(","):
        piece = piece.strip()
        if not piece:
            if context is not None:
                context.warning("Missing transform argument, using 0")
            values.append(0.0)
            continue
        values.extend(_parse_number(token, context) for token in piece.split())
    return values


def _build_transform(function: str, args: list[float]) -> Transform | None:
    """Map a function name and its arguments to a transform, if supported."""
    if function == "matrix" and len(args) == 6:
        return Matrix(*args)

    optional = args[1:] + [None, None]
    if function == "translate":
        return Translate(args[0], optional[0])
    if function == "scale":
        return Scale(args[0], optional[0])
    if function == "rotate":
        return Rotate(args[0], optional[0], optional[1])
    if function == "skewX":
        return SkewX(args[0])
    if function == "skewY":
        return SkewY(args[0])
    return None


def parse_transform(
    value: str,
    context: ConversionContext | None = None,
    strict: bool = False,
) -> list[Transform]:
    """Parse a transform attribute into an ordered list of transforms.

    Unknown functions and functions with too few arguments are replaced by
    ``Translate(0)`` with a warning. In strict mode they are dropped and an
    error is recorded instead.

    Args:
        value: Value of a ``transform`` attribute.
        context: Diagnostics for the current conversion.
        strict: Report unsupported functions as errors instead of substituting.

    Returns:
        Parsed transforms in source order.

    Example:
        >>> parse_transform("translate(10,20) scale(2)")
        [Translate(x=10.0, y=20.0), Scale(x=2.0, y=None)]
    """
    transforms: list[Transform] = []
    for match in TRANSFORM_PATTERN.finditer(value):
        function = match.group(1)
        args = parse_arguments(match.group(2), context)
        transform = _build_transform(function, args)
        if transform is not None:
            transforms.append(transform)
            continue

        if strict:
            if context is not None:
                context.error(f"Unsupported transform function: {match.group(0)}")
            continue

        if context is not None:
            context.warning(
                f"Unsupported transform function: {match.group(0)}, "
                "substituting translate(0)"
            )
        transforms.append(Translate(0.0))
    return transforms


def format_transform(transforms: list[Transform]) -> str:
    """Serialize transforms back to SVG transform syntax.

    Example:
        >>> format_transform([Translate(10, 20), Scale(2)])
        'translate(10,20) scale(2)'
    """
    return " ".join(
        f"{t.function}({','.join(format_number(float(v)) for v in t.arguments)})"
        for t in transforms
    )


def convert_transform(
    name: str,
    value: str,
    context: ConversionContext,
    strict: bool = False,
) -> str:
    """Convert a transform-list attribute to a builder statement."""
    transforms = parse_transform(value, context, strict=strict)
    return f"svg.{name} := {quote_string(format_transform(transforms))}"
