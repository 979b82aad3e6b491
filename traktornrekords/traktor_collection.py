"""Reading of Traktor NML collection files."""

from __future__ import annotations

import re
from dataclasses import dataclass
from xml.etree import ElementTree as ET

_I32_PATTERN = re.compile(r"[+-]?[0-9]+")
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


class NmlParseError(ValueError):
    """Raised when a Traktor NML document cannot be read."""


@dataclass
class Location:
    """Where a track lives on disk, as Traktor records it."""

    dir: str
    file: str
    volume: str


@dataclass
class Info:
    """Descriptive information about a track."""

    genre: str
    key: str
    playtime: str


@dataclass
class Tempo:
    """Tempo of a track."""

    bpm: str


@dataclass
class CueV2:
    """A cue point (grid marker, hot cue, loop) in a track."""

    name: str
    start: str
    hotcue: int


@dataclass
class Entry:
    """One track in the Traktor collection."""

    title: str
    artist: str
    location: Location
    info: Info
    tempo: Tempo
    cues: list[CueV2] | None = None


@dataclass
class Collection:
    """The collection of tracks; ``entries`` is None when there are none."""

    entries: list[Entry] | None = None


@dataclass
class Nml:
    """A whole NML document."""

    version: str
    collection: Collection


def _attr(element: ET.Element, name: str) -> str:
    try:
        return element.attrib[name]
    except KeyError:
        raise NmlParseError(
            f"missing attribute {name!r} on <{element.tag}>"
        ) from None


def _child(element: ET.Element, tag: str) -> ET.Element:
    child = element.find(tag)
    if child is None:
        raise NmlParseError(f"missing element <{tag}> in <{element.tag}>")
    return child


def _parse_i32(text: str, what: str) -> int:
    if not _I32_PATTERN.fullmatch(text):
        raise NmlParseError(f"invalid integer {text!r} for {what}")
    value = int(text)
    if not _I32_MIN <= value <= _I32_MAX:
        raise NmlParseError(f"integer {text!r} out of range for {what}")
    return value


def _parse_cue(element: ET.Element) -> CueV2:
    return CueV2(
        name=_attr(element, "NAME"),
        start=_attr(element, "START"),
        hotcue=_parse_i32(_attr(element, "HOTCUE"), "HOTCUE"),
    )


def _parse_entry(element: ET.Element) -> Entry:
    location = _child(element, "LOCATION")
    info = _child(element, "INFO")
    tempo = _child(element, "TEMPO")
    cues = [_parse_cue(cue) for cue in element.findall("CUE_V2")]
    return Entry(
        title=_attr(element, "TITLE"),
        artist=_attr(element, "ARTIST"),
        location=Location(
            dir=_attr(location, "DIR"),
            file=_attr(location, "FILE"),
            volume=_attr(location, "VOLUME"),
        ),
        info=Info(
            genre=_attr(info, "GENRE"),
            key=_attr(info, "KEY"),
            playtime=_attr(info, "PLAYTIME"),
        ),
        tempo=Tempo(bpm=_attr(tempo, "BPM")),
        cues=cues or None,
    )


def parse_traktor_collection(data: str) -> Nml:
    """Parse the text of a Traktor NML file."""
    try:
        root = ET.fromstring(data)
    except ET.ParseError as exc:
        raise NmlParseError(f"malformed XML: {exc}") from exc

    version = _attr(root, "VERSION")
    collection = _child(root, "COLLECTION")
    entries = [_parse_entry(entry) for entry in collection.findall("ENTRY")]
    return Nml(version=version, collection=Collection(entries=entries or None))