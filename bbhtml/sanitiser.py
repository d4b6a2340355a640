"""
# BBHTML: sanitiser.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

HTML sanitisation by parse-and-serialise round trip.
"""

import html5lib
from html5lib.html5parser import ParseError

from bbhtml.exceptions import SanitisationException


FRAGMENT_CONTAINER_NAME = 'body'


def sanitise_html(markup: str, strict: bool = False) -> str:
    """
    Sanitise an HTML fragment by parsing it as body content and serialising it again.

    The translator concatenates fragments without regard for nesting
    (e.g. `<strong><em></strong></em>`, or a `<strong>` left open);
    the conformant HTML5 parser of `html5lib` repairs such markup the way a browser would.

    If «strict» is set, any HTML parse error is a failure.
    Raises `SanitisationException` on failure, with no partial output.
    """
    parser = html5lib.HTMLParser(tree=html5lib.getTreeBuilder('etree'), strict=strict)

    try:
        fragment = parser.parseFragment(markup, container=FRAGMENT_CONTAINER_NAME)
    except ParseError as parse_error:
        raise SanitisationException(str(parse_error)) from parse_error

    return html5lib.serialize(
        fragment,
        tree='etree',
        quote_attr_values='always',
        omit_optional_tags=False,
    )
