"""Utility functions for locating, loading and writing schema files.

This module discovers local schema files, fetches remote ones over HTTP
and prepares the directories generated code is written to.
"""

import os
from pathlib import Path
from urllib.parse import urlparse

import requests

from .logging_config import get_logger

logger = get_logger(__name__)

OUTPUT_DIR_MODE = 0o755


class SchemaSourceError(Exception):
    """Custom exception for schema loading errors."""

    pass


def get_file_list(path: str) -> list[str]:
    """List the files to feed the parser for ``path``.

    A plain file yields ``[path]``. A directory is walked depth-first in
    lexical order; every visited entry is recorded (the directory itself
    first, then files and subdirectories), and ``path`` is appended once
    more at the end. Symlinked directories are listed but not entered; an
    unreadable directory is listed twice and its contents are skipped.

    Args:
        path: File or directory path.

    Returns:
        Visited paths in traversal order.

    Raises:
        OSError: If ``path`` cannot be stat'ed.
    """
    os.stat(path)

    files: list[str] = []
    if os.path.isdir(path):
        _walk(path, files)
        logger.debug(f"Collected {len(files)} entries under {path}")
    files.append(path)
    return files


def _walk(path: str, files: list[str]) -> None:
    files.append(path)

    if os.path.islink(path) or not os.path.isdir(path):
        return

    try:
        names = sorted(os.listdir(path))
    except OSError as e:
        # An unreadable directory is reported a second time in place of
        # its contents.
        logger.warning(f"Skipping unreadable directory {path}: {e}")
        files.append(path)
        return

    for name in names:
        _walk(os.path.join(path, name), files)


def prepare_output_dir(path: str) -> None:
    """Create the output directory ``path`` if it does not exist yet.

    An empty path means "current directory" and is left alone.

    Raises:
        OSError: If the directory cannot be created.
    """
    if not path:
        return

    if not os.path.exists(path):
        os.makedirs(path, mode=OUTPUT_DIR_MODE)
        logger.info(f"Created output directory {path}")


def is_valid_url(candidate: str) -> bool:
    """Check whether ``candidate`` is an absolute URL with scheme and host."""
    try:
        parsed_url = urlparse(candidate)
    except ValueError:
        return False
    return all([parsed_url.scheme, parsed_url.netloc])


def fetch_schema(url: str, timeout: float | None = None) -> bytes:
    """Fetch a remote schema with a single GET request.

    Only a 200 response yields a body. Any other status returns empty
    bytes without raising.

    Args:
        url: Schema URL.
        timeout: Request timeout in seconds; no timeout by default.

    Returns:
        Response body, or ``b""`` for a non-200 status.

    Raises:
        SchemaSourceError: If the request itself fails.
    """
    logger.debug(f"Fetching schema from URL: {url}")

    try:
        response = requests.get(url, timeout=timeout)
    except requests.exceptions.Timeout as e:
        logger.error(f"Request timeout for URL: {url}")
        raise SchemaSourceError(f"Request timeout for URL: {url}") from e
    except requests.exceptions.ConnectionError as e:
        logger.error(f"Connection error for URL {url}: {e}")
        raise SchemaSourceError(f"Connection error for URL: {url}") from e
    except requests.exceptions.RequestException as e:
        logger.error(f"Request error for URL {url}: {e}", exc_info=True)
        raise SchemaSourceError(f"Request error for URL {url}: {e}") from e

    with response:
        if response.status_code != requests.codes.ok:
            logger.warning(
                f"HTTP {response.status_code} for URL {url}, returning empty body"
            )
            return b""

        logger.info(f"Fetched {len(response.content)} bytes from {url}")
        return response.content


def load_schema(source: str | Path, timeout: float | None = None) -> bytes:
    """Load raw schema bytes from a URL or a local file.

    Raises:
        SchemaSourceError: If the URL request fails or the file can't be read.
    """
    source = str(source)

    if is_valid_url(source):
        return fetch_schema(source, timeout=timeout)

    try:
        return Path(source).read_bytes()
    except OSError as e:
        logger.error(f"Error reading file {source}: {e}")
        raise SchemaSourceError(f"Error reading file {source}: {e}") from e
