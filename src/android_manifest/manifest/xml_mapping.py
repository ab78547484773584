"""Mapping between manifest element models and XML.

Fields are mapped by their declared type:
- Scalar fields become attributes named by the field alias; an
  ``android:`` prefix maps to the Android namespace
- ``AttributeList`` fields also become attributes; their value is the
  character content produced by the list's XML event support
- ``list[ManifestElement]`` fields become repeated child elements tagged
  with the nested model's ``xml_tag``

Example:
    >>> provider = Provider(name=".Files", authorities="com.example.files;com.example.docs")
    >>> to_xml(provider)
    '<provider xmlns:android="http://schemas.android.com/apk/res/android" android:name=".Files" android:authorities="com.example.files;com.example.docs"/>'
"""

import types
from typing import Any, TypeVar, Union, get_args, get_origin

from aws_lambda_powertools import Logger
from lxml import etree
from pydantic import ValidationError

from ..attribute_list import AttributeList, resolve_codec
from ..shared.config import get_settings
from ..shared.exceptions import AttributeListError, ManifestMappingError, XmlSyntaxError
from ..xml_events import Characters, EndElement, StartElement, XmlEventReader, XmlEventWriter
from .elements import ManifestElement

logger = Logger(service="manifest-mapping", level=get_settings().log_level)

M = TypeVar("M", bound=ManifestElement)

_SCRATCH_TAG = "value"


def _unwrap_optional(annotation: Any) -> Any:
    """Strip ``None`` from an ``X | None`` annotation."""
    if get_origin(annotation) in (Union, types.UnionType):
        args = [arg for arg in get_args(annotation) if arg is not type(None)]
        if len(args) == 1:
            return args[0]
    return annotation


def _attribute_list_type(annotation: Any) -> type[AttributeList] | None:
    inner = _unwrap_optional(annotation)
    if isinstance(inner, type) and issubclass(inner, AttributeList):
        return inner
    return None


def _child_element_type(annotation: Any) -> type[ManifestElement] | None:
    inner = _unwrap_optional(annotation)
    if get_origin(inner) is list:
        (item,) = get_args(inner)
        if isinstance(item, type) and issubclass(item, ManifestElement):
            return item
    return None


def _attribute_name(alias: str, namespace: str) -> str:
    """Convert an alias like 'android:name' to lxml's Clark notation."""
    prefix, _, local = alias.rpartition(":")
    if prefix == "android":
        return f"{{{namespace}}}{local}"
    return alias


def _list_content(value: AttributeList) -> str:
    """Run the list's XML serializer and return the text it produced."""
    writer = XmlEventWriter()
    writer.write(StartElement(name=_SCRATCH_TAG))
    value.xml_serialize(writer)
    writer.write(EndElement(name=_SCRATCH_TAG))
    return "".join(event.text for event in writer.events if isinstance(event, Characters))


def _list_from_attribute(list_type: type[AttributeList], raw: str) -> AttributeList:
    """Decode an attribute value through the list's XML deserializer."""
    reader = XmlEventReader(
        [StartElement(name=_SCRATCH_TAG), Characters(text=raw), EndElement(name=_SCRATCH_TAG)],
        skip_whitespace=False,
    )
    return list_type.xml_deserialize(reader)


def to_element(model: ManifestElement, namespace: str | None = None) -> Any:
    """Build the lxml element of a manifest element model.

    Args:
        model: Element to convert
        namespace: Android namespace URI; defaults to the configured one

    Returns:
        lxml element; the Android prefix is declared on it

    Raises:
        ManifestMappingError: If an attribute list is empty or a value can't be encoded
    """
    namespace = namespace or get_settings().android_namespace
    return _build_element(model, namespace)


def _build_element(model: ManifestElement, namespace: str, parent: Any = None) -> Any:
    attributes: dict[str, str] = {}
    nsmap: dict[str, str] | None = {"android": namespace} if parent is None else None
    children: list[ManifestElement] = []

    for field_name, field_info in type(model).model_fields.items():
        value = getattr(model, field_name)
        annotation = field_info.annotation

        if _child_element_type(annotation) is not None:
            children.extend(value)
            continue
        if value is None:
            continue

        attribute = _attribute_name(field_info.alias or field_name, namespace)
        try:
            if isinstance(value, AttributeList):
                attributes, nsmap = value.xml_serialize_attributes(attributes, nsmap)
                attributes[attribute] = _list_content(value)
            else:
                attributes[attribute] = resolve_codec(type(value)).encode(value)
        except (AttributeListError, TypeError, ValueError) as e:
            raise ManifestMappingError(
                f"Cannot encode attribute '{field_info.alias}' of <{model.xml_tag}>: {e}",
                {"element": model.xml_tag, "attribute": field_info.alias},
            ) from e

    # Children are created in place so they reuse the root's namespace prefix
    if parent is None:
        element = etree.Element(model.xml_tag, attributes, nsmap=nsmap)
    else:
        element = etree.SubElement(parent, model.xml_tag, attributes)
    for child in children:
        _build_element(child, namespace, element)
    return element


def to_xml(model: ManifestElement, pretty_print: bool = False, namespace: str | None = None) -> str:
    """Serialize a manifest element model to an XML string."""
    return etree.tostring(
        to_element(model, namespace),
        encoding="unicode",
        pretty_print=pretty_print,
    )


def from_element(cls: type[M], element: Any, namespace: str | None = None) -> M:
    """Build a manifest element model from an lxml element.

    Args:
        cls: Model class matching the element
        element: lxml element
        namespace: Android namespace URI; defaults to the configured one

    Returns:
        Validated model instance

    Raises:
        ManifestMappingError: If the tag doesn't match or a value is invalid
    """
    namespace = namespace or get_settings().android_namespace
    local_name = etree.QName(element).localname
    if local_name != cls.xml_tag:
        raise ManifestMappingError(
            f"Invalid element: expected '{cls.xml_tag}', got '{local_name}'",
            {"expected": cls.xml_tag, "actual": local_name},
        )

    data: dict[str, Any] = {}
    for field_name, field_info in cls.model_fields.items():
        annotation = field_info.annotation

        child_type = _child_element_type(annotation)
        if child_type is not None:
            data[field_name] = [
                from_element(child_type, child, namespace)
                for child in element
                if isinstance(child.tag, str) and etree.QName(child).localname == child_type.xml_tag
            ]
            continue

        alias = field_info.alias or field_name
        raw = element.get(_attribute_name(alias, namespace))
        if raw is None:
            continue

        list_type = _attribute_list_type(annotation)
        if list_type is None:
            data[field_name] = raw
            continue
        try:
            data[field_name] = _list_from_attribute(list_type, raw)
        except AttributeListError as e:
            raise ManifestMappingError(
                f"Invalid attribute '{alias}' of <{cls.xml_tag}>: {e.message}",
                {"element": cls.xml_tag, "attribute": alias, **e.to_dict()},
            ) from e

    try:
        return cls.model_validate(data)
    except ValidationError as e:
        logger.warning(
            "Manifest element failed validation",
            extra={"element": cls.xml_tag, "error_count": e.error_count()},
        )
        raise ManifestMappingError(
            f"Invalid <{cls.xml_tag}> element: {e.error_count()} validation error(s)",
            {"element": cls.xml_tag, "errors": e.errors(include_url=False)},
        ) from e


def from_xml(cls: type[M], xml: str | bytes, namespace: str | None = None) -> M:
    """Parse an XML string into a manifest element model.

    Raises:
        XmlSyntaxError: If the text isn't well-formed XML
        ManifestMappingError: If the element doesn't match ``cls``
    """
    if isinstance(xml, str):
        xml = xml.encode("utf-8")
    parser = etree.XMLParser(resolve_entities=False, no_network=True)
    try:
        element = etree.fromstring(xml, parser)
    except etree.XMLSyntaxError as e:
        raise XmlSyntaxError(
            f"XML syntax error: {e}",
            {"line": e.lineno, "column": e.offset},
        ) from e

    model = from_element(cls, element, namespace)
    logger.debug("Mapped manifest element", extra={"element": cls.xml_tag})
    return model
