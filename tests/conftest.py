"""
Pytest configuration and shared fixtures
"""

import pytest
from fastapi.testclient import TestClient

from ascii_star.config import settings
from ascii_star.main import app


QUEEN_TXT = """#TITLE:Bohemian Rhapsody
#ARTIST:Queen
#MP3:Queen - Bohemian Rhapsody.mp3
#GENRE:Rock
#BPM:288,3
#GAP:1200
: 0 4 59 Is
: 5 3 59  this
- 10
E
"""

LENNON_TXT = """#TITLE:Imagine
#ARTIST:John Lennon
#MP3:John Lennon - Imagine.mp3
#BPM:150
: 0 2 60 I
E
"""


def write_song(directory, name, content):
    path = directory / name
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def songs_dir(tmp_path):
    """Songs directory holding a.txt (Queen) and b.txt (John Lennon)"""
    directory = tmp_path / "songs"
    directory.mkdir()
    write_song(directory, "a.txt", QUEEN_TXT)
    write_song(directory, "b.txt", LENNON_TXT)
    return directory


@pytest.fixture
def mp3_dir(tmp_path):
    directory = tmp_path / "mp3"
    directory.mkdir()
    (directory / "queen.mp3").write_bytes(b"ID3\x03\x00fake audio")
    return directory


@pytest.fixture
def client(songs_dir, mp3_dir, monkeypatch):
    """TestClient with the library roots pointed at the temporary directories"""
    monkeypatch.setattr(settings, "SONG_PATH", str(songs_dir))
    monkeypatch.setattr(settings, "MP3_PATH", str(mp3_dir))
    with TestClient(app) as test_client:
        yield test_client
