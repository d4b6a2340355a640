"""
# BBHTML: tokens.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Tokens and tag classification.
"""

import enum
import re
from typing import NamedTuple, Optional, Union


class TextToken(NamedTuple):
    """
    A non-empty run of literal text between tags.
    """
    text: str


class TagToken(NamedTuple):
    """
    A tag, with «name» normalised to lower case.

    «text» is the whole tag as it appears in the source (including square brackets).
    «value» is None unless the tag is of the form `[«name»=«value»]`.
    """
    text: str
    name: str
    is_closing: bool
    value: Optional[str]

    @staticmethod
    def from_match(tag_match: re.Match) -> 'TagToken':
        tag_name = tag_match.group('tag_name')
        if tag_name is not None:
            return TagToken(
                text=tag_match.group(),
                name=tag_name.lower(),
                is_closing=tag_match.group('closing_marker') == '/',
                value=None,
            )

        return TagToken(
            text=tag_match.group(),
            name=tag_match.group('attribute_name').lower(),
            is_closing=False,
            value=tag_match.group('attribute_value'),
        )


Token = Union[TextToken, TagToken]


class TagKind(enum.Enum):
    BOLD = enum.auto()
    ITALIC = enum.auto()
    CENTER = enum.auto()
    LINK_OPEN = enum.auto()
    LINK_CLOSE = enum.auto()
    IMAGE = enum.auto()
    UNKNOWN = enum.auto()


TAG_KIND_FROM_NAME = {
    'b': TagKind.BOLD,
    'i': TagKind.ITALIC,
    'center': TagKind.CENTER,
    'img': TagKind.IMAGE,
}


def classify_tag(tag_token: TagToken, center_enabled: bool) -> TagKind:
    """
    Classify a tag token by name (and, for links, by closing-ness).

    Note that a closing image tag is still IMAGE; its handler ignores it.
    """
    name = tag_token.name

    if name == 'url':
        if tag_token.is_closing:
            return TagKind.LINK_CLOSE
        return TagKind.LINK_OPEN

    tag_kind = TAG_KIND_FROM_NAME.get(name, TagKind.UNKNOWN)
    if tag_kind is TagKind.CENTER and not center_enabled:
        return TagKind.UNKNOWN

    return tag_kind
