"""Conversion of a Traktor collection into a Rekordbox collection."""

from __future__ import annotations

import math
import re
import struct

from . import rekordbox_collection as rekordbox
from . import traktor_collection as traktor

_U8_PATTERN = re.compile(r"\+?[0-9]+")
_KEY_LETTERS = {"m": "A", "d": "B"}


def _push(path: str, part: str) -> str:
    """Append a component to a slash-separated path the way a path buffer does."""
    if part.startswith("/"):
        return part
    if not path or path.endswith("/"):
        return path + part
    return f"{path}/{part}"


def _location_url(location: traktor.Location) -> str:
    path = _push("", location.volume)
    for part in location.dir.strip("/").split(":"):
        if part:
            path = _push(path, part)
    path = _push(path, location.file)
    normalised = path.replace("\\", "/")
    return f"file://localhost/{normalised}"


def _to_f32(value: float) -> float:
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _format_start(start: str) -> str:
    """Turn a start offset in milliseconds into seconds with three decimals."""
    if start != start.strip() or "_" in start:
        raise ValueError(f"invalid cue start {start!r}")
    value = _to_f32(float(start))
    if math.isfinite(value):
        value = float(math.ceil(value))
    return f"{_to_f32(value / 1000.0):.3f}"


def _position_mark(cue: traktor.CueV2) -> rekordbox.PositionMark:
    return rekordbox.PositionMark(
        name="1.1Bars" if cue.name == "AutoGrid" else "",
        type="0",
        start=_format_start(cue.start),
        num=cue.hotcue,
    )


def _track(entry: traktor.Entry) -> rekordbox.Track:
    marks = None
    if entry.cues is not None:
        marks = [_position_mark(cue) for cue in entry.cues]
    return rekordbox.Track(
        title=entry.title,
        artist=entry.artist,
        genre=entry.info.genre,
        key=convert_open_key_to_camelot(entry.info.key),
        location=_location_url(entry.location),
        bpm=entry.tempo.bpm,
        total_time=entry.info.playtime,
        position_marks=marks,
    )


def traktor_to_rekordbox(nml: traktor.Nml) -> rekordbox.DjPlaylists:
    """Build a Rekordbox library from a parsed Traktor collection."""
    entries = nml.collection.entries
    tracks = None if entries is None else [_track(entry) for entry in entries]
    return rekordbox.DjPlaylists(
        version="1.0.0",
        collection=rekordbox.Collection(tracks=tracks),
    )


def convert_open_key_to_camelot(open_key: str) -> str:
    """Convert an Open Key notation (e.g. ``7d``) to Camelot (e.g. ``2B``).

    Open Key uses 1-12 followed by 'm' (minor) or 'd' (major); Camelot uses
    1-12 followed by 'A' (minor) or 'B' (major). Anything else is returned
    unchanged.
    """
    if len(open_key.encode("utf-8")) < 2:
        return open_key
    number, letter = open_key[:-1], open_key[-1]
    if not _U8_PATTERN.fullmatch(number) or int(number) > 255:
        return open_key
    camelot_letter = _KEY_LETTERS.get(letter)
    if camelot_letter is None:
        return open_key
    # The sum is kept within a byte, as the key number is.
    camelot_number = ((int(number) + 7) & 0xFF) % 12
    return f"{camelot_number}{camelot_letter}"