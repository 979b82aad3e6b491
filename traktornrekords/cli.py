"""Command line entry point: convert a Traktor NML file to Rekordbox XML."""

from __future__ import annotations

import sys
from pathlib import Path

from .convert import traktor_to_rekordbox
from .traktor_collection import NmlParseError, parse_traktor_collection


def main(argv: list[str] | None = None) -> int:
    """Run the converter; returns the process exit status."""
    if argv is None:
        argv = sys.argv[1:]
    prog = Path(sys.argv[0]).name if sys.argv and sys.argv[0] else "traktornrekords"

    if len(argv) < 2:
        print(
            f"Usage: {prog} <traktor_nml_file> <output_rekordbox_file>",
            file=sys.stderr,
        )
        return 1

    source, target = argv[0], argv[1]
    try:
        traktor_nml = Path(source).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Unable to read file: {exc}", file=sys.stderr)
        return 1

    try:
        traktor_data = parse_traktor_collection(traktor_nml)
        rekordbox_data = traktor_to_rekordbox(traktor_data)
    except (NmlParseError, ValueError) as exc:
        print(f"Unable to convert collection: {exc}", file=sys.stderr)
        return 1

    try:
        Path(target).write_text(rekordbox_data.to_xml(), encoding="utf-8")
    except OSError as exc:
        print(f"Unable to write file: {exc}", file=sys.stderr)
        return 1

    print(f"Rekordbox XML file has been written to {target}")
    return 0


if __name__ == "__main__":
    sys.exit(main())