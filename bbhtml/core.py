"""
# BBHTML: core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Core conversion logic.

BBCode is converted to HTML by
````
«bbcode»  -->  Tokenizer  -->  Translator  -->  «fragments»  -->  (sanitise_html)  -->  «html»
````
where sanitisation is optional.
Errors are advisory and are returned alongside the HTML; conversion never raises.
"""

from typing import NamedTuple, Optional

from bbhtml.constants import MAX_TAG_COUNT
from bbhtml.exceptions import BBCodeException, SanitisationException
from bbhtml.sanitiser import sanitise_html
from bbhtml.tokenizer import Tokenizer
from bbhtml.translator import Translator


class ConversionResult(NamedTuple):
    html: str
    errors: list[BBCodeException]


def bbcode_to_html(
    bbcode: str,
    max_tag_count: Optional[int] = MAX_TAG_COUNT,
    center_enabled: bool = True,
    sanitisation_enabled: bool = False,
    strict_sanitisation_enabled: bool = False,
    unknown_tag_reporting_enabled: bool = False,
    verbose_mode_enabled: bool = False,
) -> ConversionResult:
    """
    Convert BBCode to HTML.

    Only the first «max_tag_count» tags are recognised (all of them if None);
    the rest are left as text.
    If sanitisation fails, the HTML is empty and the failure is the last error.
    """
    tokenizer = Tokenizer(bbcode, max_tag_count)
    translator = Translator(
        tokenizer,
        center_enabled=center_enabled,
        unknown_tag_reporting_enabled=unknown_tag_reporting_enabled,
        verbose_mode_enabled=verbose_mode_enabled,
    )
    fragments, errors = translator.translate()
    html = ''.join(fragments)

    if sanitisation_enabled or strict_sanitisation_enabled:
        try:
            html = sanitise_html(html, strict=strict_sanitisation_enabled)
        except SanitisationException as sanitisation_exception:
            errors.append(sanitisation_exception)
            html = ''

    return ConversionResult(html, errors)
