"""
# BBHTML: urls.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

URL validation.
"""

import re
import urllib.parse

from bbhtml.exceptions import InvalidUrlException


ALLOWED_SCHEMES = ('http', 'https')

_SUB_DELIMITERS = "!$&'()*+,;="
_PATH_SAFE_CHARACTERS = f'{_SUB_DELIMITERS}:@/%'
_QUERY_SAFE_CHARACTERS = f'{_SUB_DELIMITERS}:@/?%'


def is_control_character_free(candidate: str) -> bool:
    return re.search(pattern=r'[\x00-\x1F\x7F]', string=candidate) is None


def has_valid_percent_escapes(candidate: str) -> bool:
    return re.search(pattern=r'[%] (?! [0-9a-fA-F]{2} )', string=candidate, flags=re.VERBOSE) is None


def is_authority_well_formed(netloc: str) -> bool:
    """
    Check that the authority has only userinfo, host, and port characters.

    Characters such as backslash are excluded, since browsers read `http://x.com\\@y.com/` as host `x.com`.
    """
    return re.fullmatch(
        pattern=r"[A-Za-z0-9\-._~%!$&'()*+,;=:@\[\]\u0080-\U0010FFFF]*",
        string=netloc,
    ) is not None and re.search(pattern=r'\s', string=netloc) is None


def validate_url(candidate: str) -> str:
    """
    Validate a candidate URL, returning its canonical form.

    The candidate must be an absolute `http` or `https` URL with a non-empty host.
    In the canonical form, the scheme is lower case,
    and characters not allowed in the path, query, or fragment are percent-encoded
    (existing percent-escapes are kept as they are).
    For example, `http://www.google.com/<foo>` becomes `http://www.google.com/%3Cfoo%3E`.

    Raises `InvalidUrlException` (carrying the candidate) if validation fails.
    """
    if candidate != candidate.lstrip():
        raise InvalidUrlException(candidate)

    if not is_control_character_free(candidate) or not has_valid_percent_escapes(candidate):
        raise InvalidUrlException(candidate)

    try:
        split_result = urllib.parse.urlsplit(candidate)
        host_name = split_result.hostname
        split_result.port  # raises ValueError for a bad port
    except ValueError as value_error:
        raise InvalidUrlException(candidate) from value_error

    if split_result.scheme not in ALLOWED_SCHEMES:
        raise InvalidUrlException(candidate)

    if not host_name or not is_authority_well_formed(split_result.netloc):
        raise InvalidUrlException(candidate)

    # TODO: check that the host is a public internet domain
    return urllib.parse.urlunsplit((
        split_result.scheme,
        split_result.netloc,
        urllib.parse.quote(split_result.path, safe=_PATH_SAFE_CHARACTERS),
        urllib.parse.quote(split_result.query, safe=_QUERY_SAFE_CHARACTERS),
        urllib.parse.quote(split_result.fragment, safe=_QUERY_SAFE_CHARACTERS),
    ))
