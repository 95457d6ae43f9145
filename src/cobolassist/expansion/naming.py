"""File identities and paths for expanded sources."""

from __future__ import annotations

import getpass
from pathlib import Path
from urllib.parse import unquote, urlparse


def source_path_from_uri(uri: str) -> str:
    """Turn a ``file://`` URI (or a plain path) into a filesystem path string.

    Drive-letter URIs such as ``file:///F%3A/src/PROG.CBL`` become ``F:/src/PROG.CBL``.
    """
    if not uri.startswith("file:"):
        return uri
    path = unquote(urlparse(uri).path)
    if len(path) >= 3 and path[0] == "/" and path[2] == ":":
        path = path[1:]
    return path


def file_name_from_uri(uri: str) -> str:
    path = source_path_from_uri(uri).replace("\\", "/")
    return path.rsplit("/", 1)[-1]


def build_cache_file_name(uri: str, cache_dir: str | Path, user: str | None = None) -> str:
    """Identity of a source file: where its expanded version lives.

    ``<cache_dir>/<user>/<file name>``, with the user name lowercased so one
    cache directory can be shared by several users.
    """
    owner = (user or getpass.getuser()).lower()
    return str(Path(cache_dir) / owner / file_name_from_uri(uri))
