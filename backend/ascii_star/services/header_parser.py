"""Header extraction for UltraStar song documents.

A document starts with a block of ``#TAG:VALUE`` lines followed by the note
body::

    #TITLE:Bohemian Rhapsody
    #ARTIST:Queen
    #MP3:Queen - Bohemian Rhapsody.mp3
    #BPM:288,3
    : 0 4 59 Is
    ...

Only the header block is read; the body is never inspected.
"""

from typing import Iterator, Optional, Union

from ascii_star.models.song_model import SongHeader


class HeaderParseError(Exception):
    pass


REQUIRED_TAGS = ("TITLE", "ARTIST")

# Tag name -> SongHeader field
TEXT_TAGS = {
    "TITLE": "title",
    "ARTIST": "artist",
    "GENRE": "genre",
    "MP3": "audio_path",
    "COVER": "cover_path",
    "BACKGROUND": "background_path",
    "VIDEO": "video_path",
    "EDITION": "edition",
    "LANGUAGE": "language",
}
FLOAT_TAGS = {"BPM": "bpm", "GAP": "gap", "VIDEOGAP": "video_gap"}
INT_TAGS = {"YEAR": "year"}
BOOL_TAGS = {"RELATIVE": "relative"}

_BOM = "\ufeff"


def iter_header_lines(text: str) -> Iterator[str]:
    """Yield the stripped header lines, stopping at the first body line."""
    for raw in text.split("\n"):
        line = raw.strip()
        if not line:
            continue
        if not line.startswith("#"):
            break
        yield line


def split_tag_line(line: str) -> tuple[str, str]:
    tag, sep, value = line[1:].partition(":")
    tag = tag.strip().upper()
    if not sep or not tag:
        raise HeaderParseError(f"Malformed header line: {line!r}")
    return tag, value.strip()


def _parse_float(tag: str, value: str) -> Optional[float]:
    if not value:
        return None
    try:
        return float(value.replace(",", "."))
    except ValueError:
        raise HeaderParseError(f"Invalid number for #{tag}: {value!r}")


def _parse_int(tag: str, value: str) -> Optional[int]:
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        raise HeaderParseError(f"Invalid integer for #{tag}: {value!r}")


def _parse_bool(tag: str, value: str) -> Optional[bool]:
    if not value:
        return None
    flag = value.lower()
    if flag == "yes":
        return True
    if flag == "no":
        return False
    raise HeaderParseError(f"Invalid yes/no value for #{tag}: {value!r}")


def parse_header(content: Union[str, bytes]) -> SongHeader:
    """
    Extract the header of a song document.

    Raises HeaderParseError when the document cannot be read as a header:
    missing #TITLE or #ARTIST, a malformed or repeated tag line, a value that
    does not convert, or bytes that are not UTF-8. An empty value such as
    ``#TITLE:`` is not an error and yields an empty string.
    """
    if isinstance(content, bytes):
        try:
            content = content.decode("utf-8")
        except UnicodeDecodeError as e:
            raise HeaderParseError(f"Document is not valid UTF-8: {str(e)}")

    tags: dict[str, str] = {}
    for line in iter_header_lines(content.lstrip(_BOM)):
        tag, value = split_tag_line(line)
        if tag in tags:
            raise HeaderParseError(f"Duplicate tag #{tag}")
        tags[tag] = value

    missing = [tag for tag in REQUIRED_TAGS if tag not in tags]
    if missing:
        raise HeaderParseError(f"Missing required tags: {', '.join('#' + tag for tag in missing)}")

    fields: dict = {}
    unknown: dict[str, str] = {}
    for tag, value in tags.items():
        if tag in TEXT_TAGS:
            fields[TEXT_TAGS[tag]] = value
        elif tag in FLOAT_TAGS:
            fields[FLOAT_TAGS[tag]] = _parse_float(tag, value)
        elif tag in INT_TAGS:
            fields[INT_TAGS[tag]] = _parse_int(tag, value)
        elif tag in BOOL_TAGS:
            fields[BOOL_TAGS[tag]] = _parse_bool(tag, value)
        else:
            unknown[tag] = value

    return SongHeader(**fields, unknown=unknown)
