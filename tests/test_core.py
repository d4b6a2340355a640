"""
# BBHTML: test_core.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `core.py`.
"""

import unittest

from bbhtml.core import ConversionResult, bbcode_to_html
from bbhtml.exceptions import IncompleteTagException, InvalidUrlException, SanitisationException


class TestCore(unittest.TestCase):
    def test_bbcode_to_html(self):
        self.assertEqual(bbcode_to_html(''), ConversionResult('', []))
        self.assertEqual(bbcode_to_html('no <tags> here'), ConversionResult('no &lt;tags&gt; here', []))
        self.assertEqual(
            bbcode_to_html(
                'prefix [b]bold[/b] suffix '
                '[url=http://www.google.com][img]http://example.com/some.jpg[/img][/url] abc'
            ),
            ConversionResult(
                'prefix <strong>bold</strong> suffix '
                '<a href="http://www.google.com"><img src="http://example.com/some.jpg"></a> abc',
                [],
            ),
        )

    def test_bbcode_to_html_errors(self):
        self.assertEqual(
            bbcode_to_html('[url=www.google.com]google[/url]'),
            ConversionResult('google', [InvalidUrlException('www.google.com'), IncompleteTagException('url')]),
        )
        self.assertEqual(
            bbcode_to_html('[img][b]x[/b][/img]'),
            ConversionResult('<strong>x</strong>', [InvalidUrlException('b')]),
        )
        self.assertEqual(
            bbcode_to_html('[/url]'),
            ConversionResult('', [IncompleteTagException('url')]),
        )

    def test_bbcode_to_html_case_insensitive(self):
        self.assertEqual(bbcode_to_html('[IMG]x[/IMG]'), bbcode_to_html('[img]x[/img]'))
        self.assertEqual(bbcode_to_html('[B]x[/B]'), bbcode_to_html('[b]x[/b]'))

    def test_bbcode_to_html_repeatable(self):
        bbcode = '[url]http://x.com/<y>[/url] [img][i]z[/i] [/url] [url=ftp://x.com]'
        self.assertEqual(bbcode_to_html(bbcode), bbcode_to_html(bbcode))

    def test_bbcode_to_html_max_tag_count(self):
        self.assertEqual(
            bbcode_to_html('[b]a[/b][i]<b>[/i]', max_tag_count=2),
            ConversionResult('<strong>a</strong>[i]&lt;b&gt;[/i]', []),
        )
        self.assertEqual(
            bbcode_to_html('[b]x[/b]', max_tag_count=0),
            ConversionResult('[b]x[/b]', []),
        )
        self.assertEqual(
            bbcode_to_html('[b]' * 201),
            ConversionResult('<strong>' * 200 + '[b]', []),
        )
        self.assertEqual(
            bbcode_to_html('[b]' * 201, max_tag_count=None),
            ConversionResult('<strong>' * 201, []),
        )

    def test_bbcode_to_html_center(self):
        self.assertEqual(
            bbcode_to_html('[center]x[/center]'),
            ConversionResult('<span style="text-align:center;">x</span>', []),
        )
        self.assertEqual(
            bbcode_to_html('[center]x[/center]', center_enabled=False),
            ConversionResult('x', []),
        )

    def test_bbcode_to_html_sanitised(self):
        self.assertEqual(
            bbcode_to_html('[b][i]x[/b][/i] & [center]y', sanitisation_enabled=True),
            ConversionResult(
                '<strong><em>x</em></strong> &amp; <span style="text-align:center;">y</span>',
                [],
            ),
        )
        self.assertEqual(
            bbcode_to_html('[url=http://a.com/?x=1&y=2]l[/url][img]http://a.com/i.png', sanitisation_enabled=True),
            ConversionResult('<a href="http://a.com/?x=1&amp;y=2">l</a><img src="http://a.com/i.png">', []),
        )
        self.assertEqual(
            bbcode_to_html('[/url]x', sanitisation_enabled=True),
            ConversionResult('x', [IncompleteTagException('url')]),
        )

    def test_bbcode_to_html_strictly_sanitised(self):
        self.assertEqual(
            bbcode_to_html('[b]x[/b]', strict_sanitisation_enabled=True),
            ConversionResult('<strong>x</strong>', []),
        )

        html, errors = bbcode_to_html('[i]x[/b]', strict_sanitisation_enabled=True)
        self.assertEqual(html, '')
        self.assertEqual(len(errors), 1)
        self.assertIsInstance(errors[0], SanitisationException)


if __name__ == '__main__':
    unittest.main()
