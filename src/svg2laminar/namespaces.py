"""Namespace declaration flattening."""

from dataclasses import dataclass

from lxml import etree

from .context import ConversionContext
from .utils import quote_string


@dataclass(frozen=True)
class NamespaceBinding:
    """A namespace declaration: optional prefix bound to a URI."""

    prefix: str | None
    uri: str

    @property
    def member_name(self) -> str:
        """Builder member that carries this declaration."""
        if self.prefix:
            return f"xmlns_{self.prefix}"
        return "xmlns"


def namespace_bindings(element: etree._Element) -> list[NamespaceBinding]:
    """Collect the namespace bindings declared on an element.

    Bindings inherited unchanged from the parent are not repeated, so the
    root carries every declaration of the document and descendants only
    carry the ones they introduce or rebind. Bindings with an empty URI are
    dropped.

    Args:
        element: An XML element.

    Returns:
        Bindings in declaration order.
    """
    parent = element.getparent()
    inherited = parent.nsmap if parent is not None else {}

    bindings: list[NamespaceBinding] = []
    for prefix, uri in element.nsmap.items():
        if not uri:
            continue
        if inherited.get(prefix) == uri:
            continue
        bindings.append(NamespaceBinding(prefix=prefix, uri=uri))
    return bindings


def convert_namespaces(
    element: etree._Element, context: ConversionContext
) -> list[str]:
    """Convert an element's namespace declarations to builder statements.

    Args:
        element: An XML element.
        context: Diagnostics for the current conversion.

    Returns:
        One ``svg.xmlns`` / ``svg.xmlns_<prefix>`` statement per binding.
    """
    statements = []
    for binding in namespace_bindings(element):
        context.info(f"Processing namespace: {binding.member_name}")
        statements.append(f"svg.{binding.member_name} := {quote_string(binding.uri)}")
    return statements
