# traktornrekords

Converts a Traktor collection (`collection.nml`) into a Rekordbox XML
collection that Rekordbox can import.

Each Traktor collection entry becomes a Rekordbox track, which carries:

- the title, artist, genre, BPM and play time, copied as they are;
- the file location, as a `file://localhost/...` URL built from the entry's
  volume, its `:`-separated directory and its file name;
- the key, converted from Open Key notation (`7d`, `9m`) to Camelot notation
  (`2B`, `4A`); a key that is not in Open Key notation is kept unchanged;
- the cue points, as position marks. A cue start in milliseconds is rounded
  up to a whole millisecond and written in seconds with three decimals
  (`1355.211304` becomes `1.356`). The hot cue number becomes the mark's
  number, and the Traktor `AutoGrid` cue is named `1.1Bars`; other marks get
  an empty name.

## Installation

```
pip install .
```

## Command line

```
traktornrekords <traktor_nml_file> <output_rekordbox_file>
```

For example:

```
traktornrekords collection.nml rekordbox.xml
```

On success it prints `Rekordbox XML file has been written to <output>` and
exits with status 0. If an argument is missing, it prints its usage to
standard error and exits with status 1. If the input cannot be read, is not a
valid Traktor collection, or the output cannot be written, it prints the
reason to standard error and exits with status 1.

## Library use

```python
from traktornrekords.traktor_collection import parse_traktor_collection
from traktornrekords.convert import traktor_to_rekordbox

with open("collection.nml", encoding="utf-8") as handle:
    nml = parse_traktor_collection(handle.read())

playlists = traktor_to_rekordbox(nml)
for track in playlists.collection.tracks or []:
    print(track.artist, "-", track.title, track.key)

with open("rekordbox.xml", "w", encoding="utf-8") as handle:
    handle.write(playlists.to_xml())
```

`parse_traktor_collection` returns an `Nml` object and raises `NmlParseError`
(a `ValueError`) when the text is not well-formed XML or an entry lacks one of
the elements or attributes the conversion needs (`LOCATION`, `INFO`, `TEMPO`,
title, artist, genre, key, play time, BPM, and for each `CUE_V2` its name,
start and hot cue). A collection with no entries has `entries` set to `None`;
an entry with no cues has `cues` set to `None`.

`traktor_to_rekordbox` returns a `DjPlaylists` object with version `1.0.0`.
It raises `ValueError` when a cue start is not a number. `DjPlaylists.to_xml()`
returns the document as a string, starting with an XML declaration.

`convert_open_key_to_camelot` can also be called on its own:

```python
from traktornrekords.convert import convert_open_key_to_camelot

convert_open_key_to_camelot("1m")   # "8A"
convert_open_key_to_camelot("4d")   # "11B"
convert_open_key_to_camelot("1x")   # "1x": input it cannot read comes back unchanged
```

## What it does not do

Only the track collection is converted. Traktor playlists, folders, sets and
other track details (album, comments, ratings, loudness, loop lengths) are
not carried over, and the Rekordbox output holds no playlists.

## Running the tests

```
pip install .[test]
pytest
```