"""
# BBHTML: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.
"""

import argparse
import os
import re
import sys
from typing import Optional

from bbhtml._version import __version__
from bbhtml.constants import (
    BBCODE_FILE_EXTENSION,
    COMMAND_LINE_ERROR_EXIT_CODE,
    GENERIC_ERROR_EXIT_CODE,
    MAX_TAG_COUNT,
)
from bbhtml.core import bbcode_to_html
from bbhtml.exceptions import BBCodeException

DESCRIPTION = '''
    Convert BBCode to HTML.
'''
BBCODE_FILE_NAME_HELP = '''
    name of BBCode file to be converted
    (can be abbreviated as `file` or `file.` for increased productivity)
'''
ALL_MODE_HELP = '''
    convert all BBCode files under the working directory
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints every token translated)
'''
SANITISATION_HELP = '''
    sanitise the HTML by parsing and serialising it again
'''
STRICT_SANITISATION_HELP = '''
    sanitise the HTML, and fail on any HTML parse error (implies --sanitise)
'''
NO_CENTER_HELP = '''
    do not recognise the `center` tag
'''
UNKNOWN_TAG_REPORTING_HELP = '''
    report unknown tags as errors (otherwise they are silently dropped)
'''
MAX_TAG_COUNT_HELP = f'''
    maximum number of tags recognised; the rest are left as text
    (default {MAX_TAG_COUNT}; negative for no maximum)
'''


def is_bbcode_file(file_name: str) -> bool:
    return file_name.endswith(BBCODE_FILE_EXTENSION)


def extract_bbcode_name(bbcode_file_name_argument: str) -> str:
    """
    Extract name-without-extension from a BBCode file name argument.

    The argument may carry the full extension (`«name».bbcode`), just the dot (`«name».`), or neither.
    The path is normalised by resolving `./` and `../`.
    """
    extension_name = BBCODE_FILE_EXTENSION.lstrip('.')
    return re.sub(
        pattern=fr'[.] (?: {re.escape(extension_name)} )? \Z',
        repl='',
        string=os.path.normpath(bbcode_file_name_argument),
        flags=re.VERBOSE,
    )


def find_bbcode_file_names(root_directory: str) -> list[str]:
    return sorted(
        os.path.join(path, file_name)
        for path, _, file_names in os.walk(root_directory)
        for file_name in file_names
        if is_bbcode_file(file_name)
    )


def parse_command_line_arguments(arguments: Optional[list[str]] = None) -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(description=DESCRIPTION)
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-a', '--all',
        dest='all_mode_enabled',
        action='store_true',
        help=ALL_MODE_HELP,
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        '-s', '--sanitise',
        dest='sanitisation_enabled',
        action='store_true',
        help=SANITISATION_HELP,
    )
    argument_parser.add_argument(
        '--strict',
        dest='strict_sanitisation_enabled',
        action='store_true',
        help=STRICT_SANITISATION_HELP,
    )
    argument_parser.add_argument(
        '--no-center',
        dest='center_enabled',
        action='store_false',
        help=NO_CENTER_HELP,
    )
    argument_parser.add_argument(
        '-u', '--report-unknown-tags',
        dest='unknown_tag_reporting_enabled',
        action='store_true',
        help=UNKNOWN_TAG_REPORTING_HELP,
    )
    argument_parser.add_argument(
        '-m', '--max-tags',
        dest='max_tag_count',
        default=MAX_TAG_COUNT,
        type=int,
        help=MAX_TAG_COUNT_HELP,
        metavar='N',
    )
    argument_parser.add_argument(
        'bbcode_file_name_arguments',
        default=[],
        help=BBCODE_FILE_NAME_HELP,
        metavar=f'file{BBCODE_FILE_EXTENSION}',
        nargs='*',
    )

    return argument_parser.parse_args(arguments)


def compute_conversion_options(parsed_arguments: argparse.Namespace) -> dict:
    return {
        'max_tag_count': parsed_arguments.max_tag_count,
        'center_enabled': parsed_arguments.center_enabled,
        'sanitisation_enabled': parsed_arguments.sanitisation_enabled,
        'strict_sanitisation_enabled': parsed_arguments.strict_sanitisation_enabled,
        'unknown_tag_reporting_enabled': parsed_arguments.unknown_tag_reporting_enabled,
        'verbose_mode_enabled': parsed_arguments.verbose_mode_enabled,
    }


def print_conversion_errors(bbcode_file_name: str, errors: list[BBCodeException]):
    for error in errors:
        print(f'warning: `{bbcode_file_name}`: {error}', file=sys.stderr)


def convert_bbcode_file(bbcode_file_name: str, conversion_options: dict) -> str:
    """
    Convert a BBCode file, write the HTML beside it, and return the HTML file name.

    Conversion errors are printed as warnings; they do not stop the HTML from being written.
    Raises FileNotFoundError if the BBCode file does not exist, and OSError if the HTML cannot be written.
    """
    with open(bbcode_file_name, 'r', encoding='utf-8') as bbcode_file:
        bbcode = bbcode_file.read()

    html, errors = bbcode_to_html(bbcode, **conversion_options)
    print_conversion_errors(bbcode_file_name, errors)

    html_file_name = f'{extract_bbcode_name(bbcode_file_name)}.html'
    with open(html_file_name, 'w', encoding='utf-8') as html_file:
        html_file.write(html)

    return html_file_name


def main():
    parsed_arguments = parse_command_line_arguments()
    bbcode_file_name_arguments = parsed_arguments.bbcode_file_name_arguments
    conversion_options = compute_conversion_options(parsed_arguments)

    if parsed_arguments.all_mode_enabled:
        if len(bbcode_file_name_arguments) > 0:
            print('error: option -a (or --all) cannot be used with positional argument', file=sys.stderr)
            sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

        bbcode_file_names = find_bbcode_file_names(os.curdir)
    else:
        bbcode_file_names = [
            f'{extract_bbcode_name(argument)}{BBCODE_FILE_EXTENSION}'
            for argument in bbcode_file_name_arguments
        ]

    for bbcode_file_name in bbcode_file_names:
        try:
            html_file_name = convert_bbcode_file(bbcode_file_name, conversion_options)
        except FileNotFoundError:
            print(f'error: file `{bbcode_file_name}` not found', file=sys.stderr)
            sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)
        except OSError:
            print(f'error: cannot convert `{bbcode_file_name}`', file=sys.stderr)
            sys.exit(GENERIC_ERROR_EXIT_CODE)

        print(f'success: wrote to `{html_file_name}`')


if __name__ == '__main__':
    main()
