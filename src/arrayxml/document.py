from __future__ import annotations

import logging
from typing import Optional, Union
from xml.dom import minidom
from xml.parsers.expat import ExpatError

from lxml import etree

from .exceptions import ConversionError, ParseError

logger = logging.getLogger(__name__)

INDENT = "  "


def create_document(version: str = "1.0", encoding: str = "UTF-8") -> minidom.Document:
    """Create an empty DOM document carrying the XML declaration values."""

    document = minidom.getDOMImplementation().createDocument(None, None, None)
    document.version = version
    document.encoding = encoding
    return document


def _check_well_formed(data: bytes, encoding: Optional[str] = None) -> None:
    parser = etree.XMLParser(
        recover=False, strip_cdata=False, resolve_entities=False, no_network=True, encoding=encoding
    )
    try:
        etree.fromstring(data, parser)
    except etree.XMLSyntaxError as exc:
        diagnostics = list(parser.error_log) or list(exc.error_log)
        if not diagnostics:
            etree.clear_error_log()
            raise ParseError(str(exc) or "Document is empty") from exc
        raise _first_diagnostic(diagnostics) from exc

    diagnostics = list(parser.error_log)
    if diagnostics:
        raise _first_diagnostic(diagnostics)


def _first_diagnostic(diagnostics: list) -> ParseError:
    etree.clear_error_log()
    first = diagnostics[0]
    logger.debug("XML parsing failed, %d further diagnostic(s) discarded", len(diagnostics) - 1)
    return ParseError(first.message.strip(), line=first.line, column=first.column)


def parse_string(xml: Union[str, bytes]) -> minidom.Document:
    """Parse XML text into a DOM document.

    Bytes are decoded as their XML declaration says. Text is already decoded,
    so a declared encoding is ignored for it.

    Raises ParseError with the first parser diagnostic when the text is not
    well-formed.
    """

    if isinstance(xml, str):
        _check_well_formed(xml.encode("utf-8"), "utf-8")
    else:
        xml = bytes(xml)
        _check_well_formed(xml)
    try:
        # pyexpat parses str input as UTF-8 whatever the declaration says.
        return minidom.parseString(xml)
    except ExpatError as exc:
        raise ParseError(str(exc), line=exc.lineno, column=exc.offset) from exc


def save_xml(document: minidom.Document, format_output: bool = False) -> str:
    """Serialize a document: XML declaration, newline, root element, newline.

    Characters the declared encoding cannot represent are written as
    character references.
    """

    version = document.version or "1.0"
    encoding = document.encoding or "UTF-8"
    header = f'<?xml version="{version}" encoding="{encoding}"?>\n'
    root = document.documentElement
    if root is None:
        return header
    if format_output:
        body = root.toprettyxml(indent=INDENT, newl="\n")
    else:
        body = root.toxml() + "\n"
    try:
        return header + body.encode(encoding, "xmlcharrefreplace").decode(encoding)
    except LookupError as exc:
        raise ConversionError(f"Unknown encoding: {encoding}") from exc


__all__ = ["create_document", "parse_string", "save_xml"]
