"""Loading the raw plant data text from a file or URL."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import requests

from nearplants.exceptions import SourceUnavailable

_DEFAULT_TIMEOUT = 10.0
_USER_AGENT = "nearplants/0.1 (plant proximity lookup)"


def is_remote(location: str) -> bool:
    """True if *location* is an HTTP(S) URL rather than a file path."""
    return location.lower().startswith(("http://", "https://"))


def load_text(
    location: str | Path,
    session: Optional[requests.Session] = None,
    timeout: float = _DEFAULT_TIMEOUT,
) -> str:
    """
    Return the full text found at *location*.

    URLs are fetched with *session* (or a one-off request); anything
    else is read as a UTF-8 file. Raises SourceUnavailable on any
    failure. No retry is attempted.
    """
    location = str(location)
    if is_remote(location):
        return _fetch(location, session, timeout)
    return _read(Path(location))


def _fetch(
    url: str, session: Optional[requests.Session], timeout: float
) -> str:
    getter = session.get if session is not None else requests.get
    try:
        r = getter(url, headers={"User-Agent": _USER_AGENT}, timeout=timeout)
        r.raise_for_status()
    except requests.RequestException as exc:
        raise SourceUnavailable(url, str(exc)) from exc
    # Servers often omit the charset for text/csv
    if r.encoding is None or r.encoding.lower() == "iso-8859-1":
        r.encoding = "utf-8-sig"
    return r.text


def _read(path: Path) -> str:
    if not path.is_file():
        raise SourceUnavailable(str(path), "file not found")
    try:
        return path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceUnavailable(str(path), str(exc)) from exc
