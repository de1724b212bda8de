"""Tag shielding for content sent through the remote renderer.

Elements of the allowed tags are swapped for ``[tag]<base64>[endtag]`` tokens
before the Markdown API sees them, and swapped back afterwards. Matching is
single-level: the body of an open/close pair may not contain ``<``, so nested
elements of the same tag are not matched as a whole.
"""

import base64
import re
from typing import Sequence


def _element_pattern(tag: str) -> re.Pattern[str]:
    """Match a self-closing ``<tag .../>`` or a flat ``<tag ...>...</tag>``."""
    name = re.escape(tag)
    return re.compile(rf"<{name}[^>]*?(?:/>|>[^<]*?</{name}>)")


def _token_pattern(tag: str) -> re.Pattern[str]:
    name = re.escape(tag)
    return re.compile(rf"\[{name}\](.*?)\[end{name}\]")


def _encode(tag: str, fragment: str) -> str:
    payload = base64.b64encode(fragment.encode("utf-8")).decode("ascii")
    return f"[{tag}]{payload}[end{tag}]"


def shield(content: str, tags: Sequence[str]) -> str:
    """
    Replace allowed tag elements with reversible tokens.

    Every textual occurrence of a matched element is replaced, so identical
    fragments produce identical tokens.

    Args:
        content: Raw Markdown string
        tags: Tag names to shield, scanned in order

    Returns:
        Content with allowed tag elements encoded
    """
    if not tags:
        return content

    for tag in tags:
        for match in _element_pattern(tag).findall(content):
            content = content.replace(match, _encode(tag, match))

    return content


def unshield(content: str, tags: Sequence[str]) -> str:
    """
    Restore tokens produced by :func:`shield`.

    Tags must be given in the same order used for shielding. Malformed
    payloads raise the decoder's error unchanged.

    Args:
        content: Rendered HTML containing tokens
        tags: Tag names to restore, scanned in order

    Returns:
        Content with the original tag elements restored
    """
    if not tags:
        return content

    for tag in tags:
        for match in _token_pattern(tag).finditer(content):
            original = base64.b64decode(match.group(1)).decode("utf-8")
            content = content.replace(match.group(0), original)

    return content
