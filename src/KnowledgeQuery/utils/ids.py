"""Content identifier helpers.

Content ids are URIs of the form:

- ``ekn://[domain]/<content hash>[/member name]``
- ``ekn+zim://[domain]/<url-escaped ZIM article path>``
"""

from __future__ import annotations

from urllib.parse import unquote

_EKN_SCHEME = "ekn://"
_ZIM_SCHEME = "ekn+zim://"


def extract_content_hash(content_id: str) -> str | None:
    """Return the content hash part of an id, or None if it is malformed.

    Args:
        content_id: Content id URI.

    Returns:
        The hash (or unescaped ZIM path) that indexes the content, or None.
    """
    if not isinstance(content_id, str):
        return None
    if content_id.startswith(_EKN_SCHEME):
        tokens = content_id[len(_EKN_SCHEME):].split("/")
        if len(tokens) < 2 or not tokens[1]:
            return None
        return tokens[1]
    if content_id.startswith(_ZIM_SCHEME):
        tokens = content_id[len(_ZIM_SCHEME):].split("/", 1)
        if len(tokens) < 2 or not tokens[1]:
            return None
        return unquote(tokens[1])
    return None


def is_valid_id(content_id: str) -> bool:
    return extract_content_hash(content_id) is not None
