import os
import posixpath
import logging

logger = logging.getLogger(__name__)

# URL prefix under which song documents are served; see api.routes
SONG_ROUTE_PREFIX = "song"


def song_reference(filename: str) -> str:
    """Path of a song document as returned to clients, e.g. ``song/a.txt``."""
    return join_library_path(SONG_ROUTE_PREFIX, filename)


def join_library_path(*parts: str) -> str:
    # Always '/'-separated: these paths are URL paths, not OS paths
    return posixpath.join(*parts)


def resolve_library_path(root: str, relative_path: str) -> str:
    """
    Resolve a client supplied path under a library root.

    Raises FileNotFoundError if the target is not a regular file or lies
    outside the root (absolute paths, '..' segments, symlinks pointing out).
    """
    root_dir = os.path.realpath(root)
    file_path = os.path.realpath(os.path.join(root_dir, relative_path))

    if os.path.commonpath([root_dir, file_path]) != root_dir:
        logger.warning(f"Rejected path outside library root: {relative_path}")
        raise FileNotFoundError(relative_path)

    if not os.path.isfile(file_path):
        raise FileNotFoundError(relative_path)

    return file_path


def list_library_files(directory: str) -> list[os.DirEntry]:
    """
    One-level listing of the regular files in a directory, in listing order.

    Raises OSError if the directory cannot be opened.
    """
    with os.scandir(directory) as entries:
        files = []
        for entry in entries:
            try:
                if entry.is_file():
                    files.append(entry)
            except OSError as e:
                logger.debug(f"Skipping unreadable entry {entry.name}: {str(e)}")
        return files
