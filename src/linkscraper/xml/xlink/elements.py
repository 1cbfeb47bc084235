"""Classification of start tags into XLink elements."""

from dataclasses import dataclass
from typing import Optional, Union

from ...errors import MissingRequiredAttributeError, UnknownTypeError
from ...models.links import QName, TextPosition, XmlAttribute
from ..events import StartElement

XLINK_NAMESPACE = "http://www.w3.org/1999/xlink"


@dataclass(frozen=True)
class XLinkSimple:
    name: QName
    href: Optional[str] = None
    role: Optional[str] = None
    arcrole: Optional[str] = None
    title: Optional[str] = None
    show: Optional[str] = None
    actuate: Optional[str] = None


@dataclass(frozen=True)
class XLinkExtended:
    name: QName
    role: Optional[str] = None
    title: Optional[str] = None


@dataclass(frozen=True)
class XLinkLocator:
    name: QName
    href: str
    role: Optional[str] = None
    title: Optional[str] = None
    label: Optional[str] = None


@dataclass(frozen=True)
class XLinkArc:
    name: QName
    arcrole: Optional[str] = None
    title: Optional[str] = None
    show: Optional[str] = None
    actuate: Optional[str] = None
    from_label: Optional[str] = None
    to_label: Optional[str] = None


@dataclass(frozen=True)
class XLinkResource:
    name: QName
    role: Optional[str] = None
    title: Optional[str] = None
    label: Optional[str] = None


@dataclass(frozen=True)
class XLinkTitle:
    name: QName


XLinkElement = Union[XLinkSimple, XLinkExtended, XLinkLocator, XLinkArc, XLinkResource, XLinkTitle]

# "none" is part of XLink 1.0 and marks an element without link semantics
NONE_TYPE = "none"


def xlink_attribute(key: str, attributes: tuple[XmlAttribute, ...]) -> Optional[str]:
    """Value of the attribute ``xlink:<key>``, matched by namespace URI rather than prefix."""
    for attribute in attributes:
        if attribute.name.local_name == key and attribute.name.namespace == XLINK_NAMESPACE:
            return attribute.value
    return None


def classify(
    element: StartElement,
    position: Optional[TextPosition] = None,
) -> Optional[XLinkElement]:
    """
    Decide whether a start tag is an XLink element and extract its attributes.

    Args:
        element: The start tag
        position: Position of the start tag, attached to raised errors

    Returns:
        The typed XLink element, or None if the tag has no ``xlink:type``

    Raises:
        UnknownTypeError: If ``xlink:type`` holds an unknown value
        MissingRequiredAttributeError: If a required attribute is absent
    """
    attributes = element.attributes
    xlink_type = xlink_attribute("type", attributes)
    if xlink_type is None or xlink_type == NONE_TYPE:
        return None

    def get(key: str) -> Optional[str]:
        return xlink_attribute(key, attributes)

    if xlink_type == "simple":
        return XLinkSimple(
            name=element.name,
            href=get("href"),
            role=get("role"),
            arcrole=get("arcrole"),
            title=get("title"),
            show=get("show"),
            actuate=get("actuate"),
        )
    if xlink_type == "extended":
        return XLinkExtended(name=element.name, role=get("role"), title=get("title"))
    if xlink_type == "locator":
        href = get("href")
        if href is None:
            raise MissingRequiredAttributeError("href", element=element.name, position=position)
        return XLinkLocator(
            name=element.name,
            href=href,
            role=get("role"),
            title=get("title"),
            label=get("label"),
        )
    if xlink_type == "arc":
        return XLinkArc(
            name=element.name,
            arcrole=get("arcrole"),
            title=get("title"),
            show=get("show"),
            actuate=get("actuate"),
            from_label=get("from"),
            to_label=get("to"),
        )
    if xlink_type == "resource":
        return XLinkResource(name=element.name, role=get("role"), title=get("title"), label=get("label"))
    if xlink_type == "title":
        return XLinkTitle(name=element.name)

    raise UnknownTypeError(xlink_type, element=element.name, position=position)
