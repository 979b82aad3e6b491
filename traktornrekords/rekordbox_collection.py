"""Rekordbox collection model and its XML form."""

from __future__ import annotations

from dataclasses import dataclass
from xml.etree import ElementTree as ET

_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


@dataclass
class PositionMark:
    """A cue or grid marker inside a Rekordbox track."""

    name: str
    type: str
    start: str
    num: int

    def _to_element(self) -> ET.Element:
        return ET.Element(
            "POSITION_MARK",
            {
                "Name": self.name,
                "Type": self.type,
                "Start": self.start,
                "Num": str(self.num),
            },
        )


@dataclass
class Track:
    """One track of a Rekordbox collection."""

    title: str
    artist: str
    genre: str
    key: str
    location: str
    bpm: str
    total_time: str
    position_marks: list[PositionMark] | None = None

    def _to_element(self) -> ET.Element:
        element = ET.Element(
            "TRACK",
            {
                "Name": self.title,
                "Artist": self.artist,
                "Genre": self.genre,
                "Tonality": self.key,
                "Location": self.location,
                "AverageBpm": self.bpm,
                "TotalTime": self.total_time,
            },
        )
        element.extend(mark._to_element() for mark in self.position_marks or ())
        return element


@dataclass
class Collection:
    """The tracks of a Rekordbox library; None when there are none."""

    tracks: list[Track] | None = None


@dataclass
class DjPlaylists:
    """The root of a Rekordbox XML library."""

    version: str
    collection: Collection

    def to_xml(self) -> str:
        """Serialise the library as a Rekordbox XML document."""
        root = ET.Element("DJ_PLAYLISTS", {"Version": self.version})
        collection = ET.SubElement(root, "COLLECTION")
        collection.extend(
            track._to_element() for track in self.collection.tracks or ()
        )
        return _DECLARATION + ET.tostring(root, encoding="unicode")