from __future__ import annotations

from typing import Any, Dict

from arrayxml import ArrayToXml, XmlToArray


def round_trip(data: Dict[str, Any], **options: Any) -> Dict[str, Any]:
    """Encode data to XML text and decode it again with the same options."""

    xml = ArrayToXml(options).build_string(data)
    return XmlToArray(options).build_array_from_string(xml)


def round_trip_document(data: Dict[str, Any], **options: Any) -> Dict[str, Any]:
    """Same as round_trip, without going through text."""

    document = ArrayToXml(options).build_xml(data)
    return XmlToArray(options).build_array_from_document(document)
