from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Union
from xml.dom import Node, minidom

from .config import Config
from .document import parse_string
from .exceptions import ParseError
from .utils import append_value, trim

logger = logging.getLogger(__name__)

XMLNS = "xmlns"


def _is_namespace_declaration(name: str) -> bool:
    return name == XMLNS or name.startswith(XMLNS + ":")


def _cdata_run(node: Node) -> str:
    """Join node with the CDATA sections directly following it."""

    parts = [node.data]
    sibling = node.nextSibling
    while sibling is not None and sibling.nodeType == Node.CDATA_SECTION_NODE:
        parts.append(sibling.data)
        sibling = sibling.nextSibling
    return "".join(parts)


class _TreeWalker:
    """Converts one document; holds the namespace table of that call."""

    def __init__(self, config: Config) -> None:
        self.config = config
        self.namespaces: Dict[str, str] = {}

    def convert(self, node: Node) -> Any:
        self._collate(node)
        if node.nodeType == Node.CDATA_SECTION_NODE:
            return {self.config.cdata_key: trim(_cdata_run(node))}
        if node.nodeType == Node.TEXT_NODE:
            return trim(node.data)
        if node.nodeType == Node.ELEMENT_NODE:
            output = self._children(node)
            output = self._normalize(output)
            return self._attributes(node, output)
        return {}

    def _children(self, node: Node) -> Any:
        output: Dict[str, Any] = {}
        for child in node.childNodes:
            value = self.convert(child)
            if child.nodeType == Node.ELEMENT_NODE:
                append_value(output, child.nodeName, value)
            elif value:
                # Inline text or CDATA is the whole content of the element.
                return value
        return output

    def _normalize(self, output: Any) -> Any:
        if not isinstance(output, dict):
            return output
        if not self.config.force_one_element_array:
            output = {
                key: value[0] if isinstance(value, list) and len(value) == 1 else value
                for key, value in output.items()
            }
        if not output:
            return ""
        return output

    def _attributes(self, node: Node, output: Any) -> Any:
        attributes: Dict[str, str] = {}
        for attribute in node.attributes.values():
            if _is_namespace_declaration(attribute.name):
                continue
            attributes[attribute.name] = attribute.value
            self._collate(attribute)
        if not attributes:
            return output
        if not isinstance(output, dict):
            output = {self.config.value_key: output}
        output[self.config.attributes_key] = attributes
        return output

    def _collate(self, node: Node) -> None:
        if not self.config.use_namespaces:
            return
        uri = node.namespaceURI
        if uri and uri not in self.namespaces:
            self.namespaces[uri] = node.prefix or ""


class XmlToArray:
    """Converts XML documents into the array model."""

    def __init__(self, config: Union[Config, Mapping[str, Any], None] = None) -> None:
        self.config = Config.coerce(config)

    def build_array_from_string(self, xml: Union[str, bytes]) -> Dict[str, Any]:
        document = parse_string(xml)
        return self.build_array_from_document(document)

    def build_array_from_document(self, document: minidom.Document) -> Dict[str, Any]:
        root = document.documentElement
        if root is None:
            raise ParseError("Document has no root element")

        walker = _TreeWalker(self.config)
        converted = walker.convert(root)
        logger.debug("Converted XML root %r with %d namespace(s)", root.nodeName, len(walker.namespaces))

        if walker.namespaces:
            if not isinstance(converted, dict):
                converted = {self.config.value_key: converted}
            attributes = converted.setdefault(self.config.attributes_key, {})
            for uri, prefix in walker.namespaces.items():
                attributes[f"{XMLNS}:{prefix}" if prefix else XMLNS] = uri
        return {root.nodeName: converted}


def xml_to_array(
    xml: Union[str, bytes, minidom.Document],
    config: Union[Config, Mapping[str, Any], None] = None,
    **options: Any,
) -> Dict[str, Any]:
    """Parse XML text (or an already parsed document) into the array model.

    Keyword options override the values taken from config.
    """

    decoder = XmlToArray(Config.coerce(config).merged(options))
    if isinstance(xml, minidom.Document):
        return decoder.build_array_from_document(xml)
    return decoder.build_array_from_string(xml)


__all__ = ["XmlToArray", "xml_to_array"]
