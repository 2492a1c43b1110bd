"""
Pure view derivations for the dashboard.

Functions in this package take a collection plus a criteria object
and return a new filtered, sorted or grouped view.  They never mutate
their input and keep no state between calls.
"""

import unicodedata


def text_key(value: str) -> str:
    """Case and accent insensitive sort key for display strings."""
    normalized = unicodedata.normalize("NFKD", value or "")
    return "".join(ch for ch in normalized if not unicodedata.combining(ch)).casefold()
