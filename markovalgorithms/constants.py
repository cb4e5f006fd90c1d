"""
# Markov Algorithms: constants.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Constants.
"""

import string

GENERIC_ERROR_EXIT_CODE = 1
COMMAND_LINE_ERROR_EXIT_CODE = 2
VERBOSE_MODE_DIVIDER_SYMBOL_COUNT = 48

DEFAULT_DELIMITER = '→'
DEFAULT_FINAL_MARKER = '⋅'

STEPS_LIMIT_MAX = 2 ** 32 - 1

ALPHANUMERIC_PRESET_NAME = 'alphanumeric'
PUNCTUATED_PRESET_NAME = 'punctuated'
DEFAULT_ALPHABET_PRESET_NAME = ALPHANUMERIC_PRESET_NAME

ALPHABET_PRESETS = {
    ALPHANUMERIC_PRESET_NAME: string.ascii_lowercase + string.ascii_uppercase + string.digits,
    PUNCTUATED_PRESET_NAME: '., ' + string.ascii_lowercase + string.ascii_uppercase + string.digits + '|',
}

SCHEME_SYNTAX_HELP = f'''\
In a Markov algorithm scheme, each line is one substitution formula:
(1) a simple formula (`«left»{DEFAULT_DELIMITER}«right»`);
(2) a final formula (`«left»{DEFAULT_DELIMITER}{DEFAULT_FINAL_MARKER}«right»`).
- Formulas are tried in order; the first whose «left» occurs in the word
  replaces the leftmost occurrence of «left» with «right».
- Applying a final formula, or finding no applicable formula, halts the algorithm.
- Either side may be empty; an empty «left» matches at the start of the word.
- Each line must contain exactly one delimiter. Empty lines are not allowed.
- Extension characters may appear in formulas but not in the input word.
'''
