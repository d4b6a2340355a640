"""
# BBHTML: utilities.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Common utility functions.
"""

import re


def escape_html(string: str) -> str:
    """
    Escape a string for use as HTML text or as a double-quoted attribute value.

    Every ampersand is escaped, including one that begins an entity,
    so that the string displays verbatim.
    """
    string = re.sub(pattern='&', repl='&amp;', string=string)
    string = re.sub(pattern='<', repl='&lt;', string=string)
    string = re.sub(pattern='>', repl='&gt;', string=string)
    string = re.sub(pattern='"', repl='&#34;', string=string)
    string = re.sub(pattern="'", repl='&#39;', string=string)

    return string

