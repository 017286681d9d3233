"""Magnet link helpers."""

from __future__ import annotations

from urllib.parse import parse_qs, urlsplit

MAGNET_SCHEME = "magnet:"


def is_magnet(text: str | None) -> bool:
    return bool(text) and text.strip().startswith(MAGNET_SCHEME)


def display_name(magnet: str) -> str | None:
    """Return the decoded ``dn`` parameter of a magnet link, if any."""
    query = urlsplit(magnet.strip()).query
    names = parse_qs(query).get("dn")
    if not names or not names[0].strip():
        return None
    return names[0]
