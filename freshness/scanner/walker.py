"""File discovery and URL path derivation for a built site."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Iterator

_INDEX_RE = re.compile(r"/index\.html$")
_HTML_SUFFIX_RE = re.compile(r"\.html$")


def iter_html_files(root: str | Path) -> Iterator[Path]:
    """Yield every ``.html`` file under *root*, recursively, in sorted order."""
    for path in sorted(Path(root).rglob("*.html")):
        if path.is_file():
            yield path


def url_path_for(root: str | Path, file: str | Path) -> str:
    """Map *file* to the URL path it is served at.

    ``blog/post/index.html`` → ``/blog/post/``; ``blog/post.html`` → ``/blog/post``.
    """
    rel = "/" + Path(os.path.relpath(file, root)).as_posix()
    return _HTML_SUFFIX_RE.sub("", _INDEX_RE.sub("/", rel))


def is_content_path(url_path: str, content_paths: tuple[str, ...]) -> bool:
    """``True`` if *url_path* lives under a content prefix (section index excluded)."""
    return any(url_path.startswith(p) and url_path != p for p in content_paths)


def is_ignored_path(url_path: str, ignore_paths: tuple[str, ...]) -> bool:
    return any(url_path.startswith(p) for p in ignore_paths)
