from xml.dom import minidom

import pytest

from arrayxml import ArrayToXml, XmlToArray

NOTE_XML = "<note><to>Tove</to><from>Jani</from><heading>Reminder</heading><body>Body node</body></note>"

NOTE_ARRAY = {
    "note": {
        "to": "Tove",
        "from": "Jani",
        "heading": "Reminder",
        "body": "Body node",
    }
}


@pytest.fixture
def encoder_factory():
    def _factory(**options):
        return ArrayToXml(options)

    return _factory


@pytest.fixture
def decoder_factory():
    def _factory(**options):
        return XmlToArray(options)

    return _factory


@pytest.fixture
def encoder(encoder_factory):
    return encoder_factory()


@pytest.fixture
def decoder(decoder_factory):
    return decoder_factory()


@pytest.fixture
def dom_document():
    def _parse(xml):
        return minidom.parseString(xml)

    return _parse


@pytest.fixture
def note_xml():
    return NOTE_XML


@pytest.fixture
def note_array():
    return {"note": dict(NOTE_ARRAY["note"])}
