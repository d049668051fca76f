"""Text sources feeding the analyzer.

Every reader returns an empty string when its source cannot be read, so a
failed read is analyzed like empty input. Failures are logged.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
import re
import sys
from typing import TYPE_CHECKING

import requests

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import TextIO

_logger = logging.getLogger(__name__)

REQUEST_TIMEOUT = 30  # seconds
DEFAULT_INPUT_FILE = "input.txt"

_GUTENBERG_START = re.compile(r"^\*\*\*\s*START OF.*?\*\*\*[^\n]*$", re.MULTILINE)
_GUTENBERG_END = re.compile(r"^\*\*\*\s*END OF.*?\*\*\*", re.MULTILINE)


def default_input_file() -> Path:
    """Get the file read when no path is given.

    Returns:
        Path from TEXT_ANALYTICS_INPUT_FILE, or input.txt.
    """
    return Path(os.environ.get("TEXT_ANALYTICS_INPUT_FILE", DEFAULT_INPUT_FILE))


def read_file(filepath: str | Path) -> str:
    """Read text content from a UTF-8 file.

    Args:
        filepath: Path to the file to read.

    Returns:
        The text content of the file, or an empty string if it can't be read.
    """
    path = Path(filepath)
    _logger.info("Reading text from %s", path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        _logger.warning("File not found: %s", path)
        return ""
    except UnicodeDecodeError:
        _logger.warning("Could not decode %s as UTF-8", path)
        return ""
    except OSError:
        _logger.exception("Failed to read %s", path)
        return ""
    _logger.info("Read %d characters from %s", len(text), path)
    return text


def read_files(
    filepaths: Sequence[str | Path], *, strip_gutenberg: bool = False
) -> str:
    """Read and concatenate text content from multiple files.

    Args:
        filepaths: Sequence of paths to files to read.
        strip_gutenberg: Remove Project Gutenberg boilerplate from each file.

    Returns:
        Combined text content of all files.
    """
    texts = []
    for filepath in filepaths:
        text = read_file(filepath)
        texts.append(strip_gutenberg_boilerplate(text) if strip_gutenberg else text)
    return "\n".join(texts)


def read_console(stream: TextIO | None = None) -> str:
    """Read text line by line until a blank line or end of input.

    Args:
        stream: Stream to read from (defaults to sys.stdin).

    Returns:
        The collected text, stripped.
    """
    stream = stream if stream is not None else sys.stdin
    lines = []
    for line in stream:
        if not line.strip():
            break
        lines.append(line.rstrip("\r\n"))

    text = "\n".join(lines).strip()
    if not text:
        _logger.info("No text entered, an empty string will be analyzed")
    return text


def fetch_url(url: str, *, timeout: float = REQUEST_TIMEOUT) -> str:
    """Download text from a URL.

    Args:
        url: Address of a plain-text document.
        timeout: Request timeout in seconds.

    Returns:
        The response body, or an empty string if the download failed.
    """
    _logger.info("Downloading %s", url)
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.exceptions.RequestException:
        _logger.exception("Failed to download %s", url)
        return ""

    # Plain-text servers often omit the charset
    if resp.encoding is None or resp.encoding.lower() == "iso-8859-1":
        resp.encoding = "utf-8"
    text = resp.text
    _logger.info("Downloaded %d characters from %s", len(text), url)
    return text


def fetch_urls(
    urls: Sequence[str],
    *,
    strip_gutenberg: bool = False,
    timeout: float = REQUEST_TIMEOUT,
) -> str:
    """Download several documents one after another and concatenate them.

    Args:
        urls: Addresses of plain-text documents.
        strip_gutenberg: Remove Project Gutenberg boilerplate from each book.
        timeout: Request timeout in seconds, per document.

    Returns:
        Combined text of all documents. Failed downloads contribute an
        empty string.
    """
    texts = []
    for url in urls:
        text = fetch_url(url, timeout=timeout)
        texts.append(strip_gutenberg_boilerplate(text) if strip_gutenberg else text)
    return "\n".join(texts)


def strip_gutenberg_boilerplate(text: str) -> str:
    """Remove the Project Gutenberg licence header and footer.

    Args:
        text: Full text of a Project Gutenberg ebook.

    Returns:
        The text between the START and END markers, or the unchanged text
        when the markers are missing.
    """
    start = _GUTENBERG_START.search(text)
    if start is None:
        return text
    body = text[start.end() :]
    end = _GUTENBERG_END.search(body)
    if end is not None:
        body = body[: end.start()]
    return body.strip()
