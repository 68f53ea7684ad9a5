"""Network access: fetching the default dictionary image.

WHY: First-time users have no dictionary. Rather than fail, the CLI
fetches the published default image into the user's home directory.

HOW: A thin httpx wrapper in downloader.py.

RULES:
- All HTTP requests go through download_to_file
"""

from serbzip.api.downloader import download_to_file

__all__ = ["download_to_file"]
