import os
import logging
from typing import Optional

from ascii_star.models.search_model import SearchResult
from ascii_star.models.song_model import SongHeader
from ascii_star.services.header_parser import HeaderParseError, parse_header
from ascii_star.utils.file_manager import list_library_files, song_reference

logger = logging.getLogger(__name__)


def tokenize_query(query: str) -> list[str]:
    return query.lower().split()


def normalize_header(header: SongHeader) -> SongHeader:
    """Lowercased copy of the searchable fields; the original is left untouched."""
    return header.model_copy(update={
        'title': header.title.lower(),
        'artist': header.artist.lower(),
        'genre': header.genre.lower() if header.genre is not None else None,
    })


def matches_header(header: SongHeader, word: str) -> bool:
    """True if word is a substring of the artist, title or genre of an already normalized header."""
    return (
        word in header.artist
        or word in header.title
        or (header.genre is not None and word in header.genre)
    )


def _is_printable_name(name: str) -> bool:
    # os.scandir smuggles undecodable bytes in as surrogates; those names cannot go into JSON
    try:
        name.encode('utf-8')
    except UnicodeEncodeError:
        return False
    return True


class SearchService:
    def __init__(self, songs_dir: str):
        self.songs_dir = songs_dir
        if not os.path.isdir(self.songs_dir):
            logger.warning(f"Songs directory not found: {self.songs_dir}")
        logger.info(f"SearchService initialized for {self.songs_dir}")

    def _read_header(self, file_path: str) -> SongHeader:
        with open(file_path, 'r', encoding='utf-8') as f:
            content = f.read()
        return parse_header(content)

    def _matching_header(self, file_path: str, words: list[str]) -> Optional[SongHeader]:
        """Header of the document at file_path if it matches all words, otherwise None."""
        try:
            original_header = self._read_header(file_path)
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"Failed to read {file_path}: {str(e)}")
            return None
        except HeaderParseError as e:
            logger.debug(f"Skipping {file_path}: {str(e)}")
            return None

        header = normalize_header(original_header)
        if all(matches_header(header, word) for word in words):
            return original_header
        return None

    def search(self, query: str) -> list[SearchResult]:
        words = tokenize_query(query)

        try:
            entries = list_library_files(self.songs_dir)
        except OSError as e:
            logger.warning(f"Cannot list songs directory {self.songs_dir}: {str(e)}")
            return []

        results = []
        for entry in entries:
            if not _is_printable_name(entry.name):
                logger.debug(f"Skipping file with undecodable name: {entry.name!r}")
                continue
            header = self._matching_header(entry.path, words)
            if header is None:
                continue
            results.append(SearchResult(
                path=song_reference(entry.name),
                title=header.title,
                artist=header.artist,
                genre=header.genre,
            ))

        logger.info(f"Search {query!r} found {len(results)} results")
        return results

    def get_library_info(self) -> dict:
        return {
            'songs_dir': self.songs_dir,
            'songs_dir_exists': os.path.isdir(self.songs_dir),
        }
