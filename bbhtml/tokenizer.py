"""
# BBHTML: tokenizer.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Lazy tokenisation with checkpoints.
"""

import re
from typing import Iterator, Optional

from bbhtml.exceptions import CheckpointException
from bbhtml.patterns import compute_tag_matches
from bbhtml.tokens import TagToken, TextToken, Token


class Tokenizer:
    """
    Object producing tokens from BBCode, one per call, with checkpoints for lookahead.

    ## Cursor

    The tag matches are computed once up front.
    Tokens are then produced lazily from a cursor over a virtual sequence
    of `2 * len(matches) + 1` slots, alternating text and tag:
    ````
    text, tag, text, tag, ..., tag, text
    ````
    where the final text slot runs to the end of the BBCode.
    Empty text slots are skipped.

    ## Checkpoints

    - `begin()` saves the cursor.
    - `commit()` discards the last saved cursor (the tokens consumed stay consumed).
    - `rollback()` restores the last saved cursor (the tokens consumed will be produced again).

    Checkpoints nest strictly; every `begin()` must be matched by one `commit()` or `rollback()`.
    """
    _bbcode: str
    _tag_matches: tuple[re.Match, ...]
    _checkpoints: list[int]
    _index: int

    def __init__(self, bbcode: str, max_tag_count: Optional[int]):
        self._bbcode = bbcode
        self._tag_matches = compute_tag_matches(bbcode, max_tag_count)
        self._checkpoints = []
        self._index = 0

    @property
    def matches(self) -> tuple[re.Match, ...]:
        return self._tag_matches

    @property
    def checkpoint_depth(self) -> int:
        return len(self._checkpoints)

    def begin(self):
        self._checkpoints.append(self._index)

    def commit(self):
        if not self._checkpoints:
            raise CheckpointException('error: cannot call `commit()` without a prior `begin()`')

        self._checkpoints.pop()

    def rollback(self):
        if not self._checkpoints:
            raise CheckpointException('error: cannot call `rollback()` without a prior `begin()`')

        self._index = self._checkpoints.pop()

    def next_token(self) -> Optional[Token]:
        """
        Produce the next token, or None if the BBCode is exhausted.
        """
        tag_matches = self._tag_matches
        slot_count = 2 * len(tag_matches) + 1

        while self._index < slot_count:
            match_index, is_tag_slot = divmod(self._index, 2)
            self._index += 1

            if is_tag_slot:
                return TagToken.from_match(tag_matches[match_index])

            if match_index > 0:
                text_start = tag_matches[match_index - 1].end()
            else:
                text_start = 0

            if match_index < len(tag_matches):
                text_end = tag_matches[match_index].start()
            else:
                text_end = len(self._bbcode)

            text = self._bbcode[text_start:text_end]
            if text != '':
                return TextToken(text)

        return None

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        token = self.next_token()
        if token is None:
            raise StopIteration

        return token
