from xml.etree import ElementTree as ET

from traktornrekords.rekordbox_collection import (
    Collection,
    DjPlaylists,
    PositionMark,
    Track,
)


def _track(marks=None):
    return Track(
        title="Rain",
        artist="45 Roller",
        genre="Drum & Bass",
        key="2B",
        location="file://localhost/C:/Music/45 Roller - Rain.flac",
        bpm="176.999725",
        total_time="174",
        position_marks=marks,
    )


def _parse(xml_text):
    return ET.fromstring(xml_text)


def test_root_element_and_version():
    doc = DjPlaylists(version="1.0.0", collection=Collection(tracks=None))
    root = _parse(doc.to_xml())
    assert root.tag == "DJ_PLAYLISTS"
    assert root.attrib == {"Version": "1.0.0"}


def test_xml_declaration_prefix():
    doc = DjPlaylists(version="1.0.0", collection=Collection(tracks=None))
    assert doc.to_xml().startswith("<?xml")


def test_empty_collection_has_no_tracks():
    doc = DjPlaylists(version="1.0.0", collection=Collection(tracks=None))
    root = _parse(doc.to_xml())
    collection = root.find("COLLECTION")
    assert collection is not None
    assert list(collection) == []


def test_track_attributes_round_trip():
    track = _track()
    doc = DjPlaylists(version="1.0.0", collection=Collection(tracks=[track]))
    root = _parse(doc.to_xml())
    elements = root.findall("COLLECTION/TRACK")
    assert len(elements) == 1
    attrs = elements[0].attrib
    assert attrs["Name"] == track.title
    assert attrs["Artist"] == track.artist
    assert attrs["Genre"] == track.genre
    assert attrs["Tonality"] == track.key
    assert attrs["Location"] == track.location
    assert attrs["AverageBpm"] == track.bpm
    assert attrs["TotalTime"] == track.total_time
    assert elements[0].findall("POSITION_MARK") == []


def test_ampersand_is_escaped_in_output():
    doc = DjPlaylists(version="1.0.0", collection=Collection(tracks=[_track()]))
    text = doc.to_xml()
    assert "Drum &amp; Bass" in text


def test_position_marks_round_trip():
    marks = [
        PositionMark(name="1.1Bars", type="0", start="1.356", num=0),
        PositionMark(name="", type="0", start="16.271", num=1),
    ]
    doc = DjPlaylists(version="1.0.0", collection=Collection(tracks=[_track(marks)]))
    root = _parse(doc.to_xml())
    found = root.findall("COLLECTION/TRACK/POSITION_MARK")
    assert [
        (m.get("Name"), m.get("Type"), m.get("Start"), int(m.get("Num")))
        for m in found
    ] == [(m.name, m.type, m.start, m.num) for m in marks]


def test_track_order_preserved():
    first = _track()
    second = _track()
    second.title = "Outrun"
    doc = DjPlaylists(
        version="1.0.0", collection=Collection(tracks=[first, second])
    )
    root = _parse(doc.to_xml())
    names = [t.get("Name") for t in root.findall("COLLECTION/TRACK")]
    assert names == [first.title, second.title]