"""Normalisation of device XML responses into domain objects."""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Union
from xml.etree import ElementTree

from ..errors import AmbiguousActiveApp, MalformedInfoResponse, MalformedResponse
from .models import App, AppCollection, DeviceInfo

LOGGER = logging.getLogger(__name__)

_APP_TAG = "app"


def parse_document(body: Union[bytes, str]) -> ElementTree.Element:
    """Parse a raw response body into its root element."""

    try:
        return ElementTree.fromstring(body)
    except ElementTree.ParseError as exc:
        raise MalformedResponse(f"Response is not valid XML: {exc}") from exc


def camel_case(tag: str) -> str:
    """Convert a hyphen-case tag name to camelCase.

    Examples:
        >>> camel_case("model-name")
        'modelName'
        >>> camel_case("software-build")
        'softwareBuild'
    """

    parts = [part for part in tag.split("-") if part]
    if not parts:
        return tag
    head, *rest = parts
    return head.lower() + "".join(part[:1].upper() + part[1:] for part in rest)


def to_app(element: ElementTree.Element) -> App:
    return App(
        id=element.get("id", ""),
        name=(element.text or "").strip(),
        type=element.get("type", ""),
        version=element.get("version", ""),
    )


def _app_elements(doc: ElementTree.Element) -> Iterable[ElementTree.Element]:
    return doc.iter(_APP_TAG)


def to_app_collection(doc: ElementTree.Element) -> AppCollection:
    """Map every ``app`` element, in document order."""

    return [to_app(element) for element in _app_elements(doc)]


def to_active_app(doc: ElementTree.Element) -> Optional[App]:
    """Resolve the single active application.

    Returns ``None`` when no entry is reported, or when the only entry is the
    home screen placeholder (an ``app`` element without an ``id``).

    Raises:
        AmbiguousActiveApp: If the document holds more than one ``app`` entry.
    """

    elements = list(_app_elements(doc))
    if len(elements) > 1:
        LOGGER.warning("Active app query returned %d entries", len(elements))
        raise AmbiguousActiveApp(len(elements))
    if not elements:
        return None

    element = elements[0]
    if not element.get("id"):
        return None
    return to_app(element)


def to_device_info(doc: ElementTree.Element) -> DeviceInfo:
    """Flatten the device-info document into a camelCase keyed mapping."""

    info: DeviceInfo = {}
    for child in doc:
        key = camel_case(child.tag)
        if key in info:
            raise MalformedInfoResponse(
                f"Device info tag <{child.tag}> collides with an earlier field as {key!r}"
            )
        info[key] = (child.text or "").strip()

    if not info:
        raise MalformedInfoResponse(
            f"Device info response <{doc.tag}> contains no fields"
        )
    return info
