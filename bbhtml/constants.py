"""
# BBHTML: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

MAX_TAG_COUNT = 200

GENERIC_ERROR_EXIT_CODE = 1
COMMAND_LINE_ERROR_EXIT_CODE = 2
VERBOSE_MODE_DIVIDER_SYMBOL_COUNT = 48

BBCODE_FILE_EXTENSION = '.bbcode'
