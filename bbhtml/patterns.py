"""
# BBHTML: patterns.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Tag pattern matching.

A tag is one of
````
[«tag_name»]
[/«tag_name»]
[«attribute_name»=«attribute_value»]
````
where «tag_name» is a run of letters, pipes, and asterisks,
«attribute_name» is a run of letters,
and «attribute_value» is a run of characters other than closing square brackets and whitespace.
Whitespace is permitted before the closing square bracket.
Here whitespace is tab, line feed, form feed, carriage return, or space (not vertical tab).
Names are matched case-insensitively.
"""

import itertools
import re
from typing import Optional


TAG_PATTERN_COMPILED = re.compile(
    pattern=r'''
        \[
        (?:
            (?P<closing_marker> [/]? ) (?P<tag_name> [a-z|*]+ )
                |
            (?P<attribute_name> [a-z]+ ) = (?P<attribute_value> [^\]\t\n\f\r ]+ )
        )
        [\t\n\f\r ]*
        \]
    ''',
    flags=re.ASCII | re.IGNORECASE | re.VERBOSE,
)


def compute_tag_matches(bbcode: str, max_tag_count: Optional[int]) -> tuple[re.Match, ...]:
    """
    Compute the first «max_tag_count» non-overlapping tag matches, in order.

    If «max_tag_count» is None or negative, all matches are computed.
    Tag-shaped text beyond the first «max_tag_count» matches is left as text.
    """
    tag_matches = TAG_PATTERN_COMPILED.finditer(bbcode)

    if max_tag_count is not None and max_tag_count >= 0:
        tag_matches = itertools.islice(tag_matches, max_tag_count)

    return tuple(tag_matches)
