"""Download a file over HTTP(S) to a local path.

WHY: The default dictionary image is published on the project's
repository. The CLI downloads it once into ~/.serbzip/ when no local
dictionary can be found.

HOW: Streams a GET response with httpx into a temporary sibling file,
then renames it into place, so an interrupted download never leaves a
truncated dictionary behind.

RULES:
- Redirects are followed (GitHub "raw" URLs redirect)
- Parent directories are created as needed
- A non-200 status raises DownloadError; transport failures propagate
  as httpx.HTTPError
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Union

import httpx

from serbzip.errors import DownloadError

logger = logging.getLogger(__name__)

_TIMEOUT = httpx.Timeout(60.0, connect=15.0)
_CHUNK_SIZE = 64 * 1024


def download_to_file(
    url: str,
    path: Union[str, Path],
    client: Optional[httpx.Client] = None,
) -> int:
    """Download ``url`` to ``path``.

    Args:
        url: Source URL.
        path: Destination file; replaced if it exists.
        client: Optional pre-configured httpx.Client (used by tests).

    Returns:
        The number of bytes written.

    Raises:
        DownloadError: If the server answers with a non-200 status.
        httpx.HTTPError: On connection or protocol failures.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    partial = path.with_name(path.name + ".part")

    owns_client = client is None
    if client is None:
        client = httpx.Client(follow_redirects=True, timeout=_TIMEOUT)
    try:
        logger.info("Downloading %s to %s", url, path)
        written = 0
        with client.stream("GET", url) as resp:
            if resp.status_code != 200:
                raise DownloadError(resp.status_code, url)
            with open(partial, "wb") as f:
                for chunk in resp.iter_bytes(_CHUNK_SIZE):
                    f.write(chunk)
                    written += len(chunk)
        os.replace(partial, path)
        logger.info("Downloaded %d bytes", written)
        return written
    finally:
        if owns_client:
            client.close()
        if partial.exists():
            partial.unlink()
