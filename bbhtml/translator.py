"""
# BBHTML: translator.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Translation of tokens to HTML fragments.
"""

from typing import Callable, NamedTuple

from bbhtml.constants import VERBOSE_MODE_DIVIDER_SYMBOL_COUNT
from bbhtml.exceptions import BBCodeException, IncompleteTagException, InvalidUrlException, UnknownTagException
from bbhtml.tokenizer import Tokenizer
from bbhtml.tokens import TagKind, TagToken, TextToken, Token, classify_tag
from bbhtml.urls import validate_url
from bbhtml.utilities import escape_html


class TranslationResult(NamedTuple):
    fragments: list[str]
    errors: list[BBCodeException]


class Translator:
    """
    Object translating the tokens of a tokenizer to HTML fragments in a single pass.

    | Tag            | Opening                             | Closing                              |
    | -------------- | ----------------------------------- | ------------------------------------ |
    | `b`            | `<strong>`                          | `</strong>`                          |
    | `i`            | `<em>`                              | `</em>`                              |
    | `center`       | `<span style="text-align:center;">` | `</span>`                            |
    | `url=«href»`   | `<a href="«href»">`                 | `</a>` if a link is open, else error |
    | `url`          | `<a href="«text»">«text»`           | (as above)                           |
    | `img`          | `<img src="«text»">`                | (ignored)                            |
    | (other)        | (ignored)                           | (ignored)                            |

    Here «text» is the text token immediately following the opening tag.
    Bold and italic are independent toggles; nesting is not validated.

    Errors are collected rather than raised, and translation continues past them,
    except when an opening `img` is the last token, which halts translation.
    Unknown tags are silently dropped unless `unknown_tag_reporting_enabled` is set.

    A Translator owns its tokenizer and is good for a single call to `translate()`.
    """
    _tokenizer: Tokenizer
    _center_enabled: bool
    _unknown_tag_reporting_enabled: bool
    _verbose_mode_enabled: bool
    _fragments: list[str]
    _errors: list[BBCodeException]
    _link_is_open: bool
    _is_halted: bool
    _handler_from_tag_kind: dict[TagKind, Callable[[TagToken], None]]

    def __init__(self, tokenizer: Tokenizer, center_enabled: bool = True,
                 unknown_tag_reporting_enabled: bool = False, verbose_mode_enabled: bool = False):
        self._tokenizer = tokenizer
        self._center_enabled = center_enabled
        self._unknown_tag_reporting_enabled = unknown_tag_reporting_enabled
        self._verbose_mode_enabled = verbose_mode_enabled
        self._fragments = []
        self._errors = []
        self._link_is_open = False
        self._is_halted = False
        self._handler_from_tag_kind = {
            TagKind.BOLD: self._handle_bold,
            TagKind.ITALIC: self._handle_italic,
            TagKind.CENTER: self._handle_center,
            TagKind.LINK_OPEN: self._handle_link_open,
            TagKind.LINK_CLOSE: self._handle_link_close,
            TagKind.IMAGE: self._handle_image,
            TagKind.UNKNOWN: self._handle_unknown,
        }

    def translate(self) -> TranslationResult:
        for token in self._tokenizer:
            fragment_count_before = len(self._fragments)
            self._handle_token(token)

            if self._verbose_mode_enabled:
                self.print_token_translation(token, self._fragments[fragment_count_before:])

            if self._is_halted:
                break

        return TranslationResult(self._fragments, self._errors)

    @staticmethod
    def print_token_translation(token: Token, fragments: list[str]):
        if len(fragments) == 0:
            no_output_indicator = ' (no output)'
        else:
            no_output_indicator = ''

        print('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' TOKEN {type(token).__name__}')
        print(token.text)
        print('=' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + no_output_indicator)
        print(''.join(fragments))
        print('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + ' FRAGMENTS')
        print('\n\n')

    def _handle_token(self, token: Token):
        if isinstance(token, TextToken):
            self._fragments.append(escape_html(token.text))
            return

        tag_kind = classify_tag(token, self._center_enabled)
        self._handler_from_tag_kind[tag_kind](token)

    def _handle_bold(self, tag_token: TagToken):
        if tag_token.is_closing:
            self._fragments.append('</strong>')
        else:
            self._fragments.append('<strong>')

    def _handle_italic(self, tag_token: TagToken):
        if tag_token.is_closing:
            self._fragments.append('</em>')
        else:
            self._fragments.append('<em>')

    def _handle_center(self, tag_token: TagToken):
        if tag_token.is_closing:
            self._fragments.append('</span>')
        else:
            self._fragments.append('<span style="text-align:center;">')

    def _handle_link_open(self, tag_token: TagToken):
        """
        Open a link, either `[url=«href»]` or `[url]«href»` with «href» also used as the label.

        For the latter, the following token is consumed even if it is a tag.
        """
        label_is_implicit = tag_token.value is None

        if label_is_implicit:
            href_token = self._tokenizer.next_token()
            if not isinstance(href_token, TextToken):
                self._errors.append(IncompleteTagException(tag_token.name))
                return
            candidate_url = href_token.text
        else:
            candidate_url = tag_token.value

        try:
            url = validate_url(candidate_url)
        except InvalidUrlException as invalid_url_exception:
            self._errors.append(invalid_url_exception)
            return

        self._link_is_open = True

        escaped_url = escape_html(url)
        self._fragments.append(f'<a href="{escaped_url}">')
        if label_is_implicit:
            self._fragments.append(escaped_url)

    def _handle_link_close(self, tag_token: TagToken):
        if not self._link_is_open:
            self._errors.append(IncompleteTagException(tag_token.name))
            return

        self._link_is_open = False
        self._fragments.append('</a>')

    def _handle_image(self, tag_token: TagToken):
        """
        Emit an image for `[img]«src»`, looking ahead one token for «src».

        If the following token is a tag, it is rolled back so that it is handled normally.
        If there is no following token, translation halts.
        """
        if tag_token.is_closing:
            return

        tokenizer = self._tokenizer
        tokenizer.begin()

        src_token = tokenizer.next_token()
        if src_token is None:
            tokenizer.commit()
            self._errors.append(IncompleteTagException(tag_token.name))
            self._is_halted = True
            return

        if isinstance(src_token, TagToken):
            tokenizer.rollback()
            self._errors.append(InvalidUrlException(src_token.name))
            return

        tokenizer.commit()

        try:
            url = validate_url(src_token.text)
        except InvalidUrlException as invalid_url_exception:
            self._errors.append(invalid_url_exception)
            return

        self._fragments.append(f'<img src="{escape_html(url)}">')

    def _handle_unknown(self, tag_token: TagToken):
        if self._unknown_tag_reporting_enabled:
            self._errors.append(UnknownTagException(tag_token.name))
