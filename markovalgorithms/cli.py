"""
# Markov Algorithms: cli.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Command-line interface.
"""

import argparse
import itertools
import sys
from typing import Optional

from markovalgorithms._version import __version__
from markovalgorithms.alphabet import Alphabet
from markovalgorithms.builder import AlgorithmSchemeBuilder
from markovalgorithms.constants import (
    ALPHABET_PRESETS,
    COMMAND_LINE_ERROR_EXIT_CODE,
    GENERIC_ERROR_EXIT_CODE,
    SCHEME_SYNTAX_HELP,
    STEPS_LIMIT_MAX,
    VERBOSE_MODE_DIVIDER_SYMBOL_COUNT,
)
from markovalgorithms.exceptions import (
    AlphabetDefinitionException,
    FullApplicationException,
    InputValidationException,
    SchemeDefinitionException,
    StepsLimitHitException,
    describe,
)
from markovalgorithms.pacing import ConsolePacer
from markovalgorithms.scheme import AlgorithmScheme, SingleApplicationResult

DESCRIPTION = '''
    Apply a Markov algorithm scheme to an input word.
'''
EPILOG = SCHEME_SYNTAX_HELP
SCHEME_FILE_NAME_HELP = '''
    name of the UTF-8 file containing the scheme, one substitution formula per line
'''
ALPHABET_HELP = '''
    characters of the alphabet (default: Latin letters and digits)
'''
ALPHABET_EXTENSION_HELP = '''
    characters of the alphabet extension, usable in formulas but not in the input
    (requires -a)
'''
PRESET_HELP = '''
    name of a predefined alphabet (cannot be used with -a)
'''
DELIMITER_HELP = '''
    character separating the sides of a formula (default: →)
'''
FINAL_MARKER_HELP = '''
    character marking a formula as final, placed right after the delimiter (default: ⋅)
'''
STEPS_LIMIT_HELP = '''
    maximum number of steps the algorithm is allowed to take
'''
INTERACTIVE_MODE_HELP = '''
    step through the algorithm interactively
'''
VERBOSE_MODE_HELP = '''
    run in verbose mode (prints every step taken)
'''
WORD_HELP = '''
    input word
'''


def parse_single_character(argument: str) -> str:
    if len(argument) != 1:
        raise argparse.ArgumentTypeError(f'expected a single character, got `{argument}`')

    return argument


def parse_steps_limit(argument: str) -> int:
    try:
        steps_limit = int(argument)
    except ValueError:
        raise argparse.ArgumentTypeError(f'expected a positive integer, got `{argument}`')

    if steps_limit < 1:
        raise argparse.ArgumentTypeError(f'expected a positive integer, got `{argument}`')
    if steps_limit > STEPS_LIMIT_MAX:
        raise argparse.ArgumentTypeError(f'expected an integer not greater than {STEPS_LIMIT_MAX}, got `{argument}`')

    return steps_limit


def parse_command_line_arguments(arguments: Optional[list[str]] = None) -> argparse.Namespace:
    argument_parser = argparse.ArgumentParser(
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    argument_parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'{argument_parser.prog} version {__version__}',
    )
    argument_parser.add_argument(
        '-s', '--scheme',
        dest='scheme_file_name',
        required=True,
        help=SCHEME_FILE_NAME_HELP,
        metavar='PATH-TO-FILE',
    )
    argument_parser.add_argument(
        '-a', '--alphabet',
        dest='alphabet_characters',
        help=ALPHABET_HELP,
        metavar='ALPHABET_CHARACTERS',
    )
    argument_parser.add_argument(
        '-e', '--alphabet-extension',
        dest='extension_characters',
        help=ALPHABET_EXTENSION_HELP,
        metavar='EXTENSION_CHARACTERS',
    )
    argument_parser.add_argument(
        '-p', '--preset',
        dest='preset_name',
        choices=sorted(ALPHABET_PRESETS),
        help=PRESET_HELP,
    )
    argument_parser.add_argument(
        '-d', '--delimiter',
        type=parse_single_character,
        help=DELIMITER_HELP,
        metavar='CHARACTER',
    )
    argument_parser.add_argument(
        '-f', '--final-marker',
        type=parse_single_character,
        help=FINAL_MARKER_HELP,
        metavar='CHARACTER',
    )
    application_mode_group = argument_parser.add_mutually_exclusive_group(required=True)
    application_mode_group.add_argument(
        '-l', '--limit',
        dest='steps_limit',
        type=parse_steps_limit,
        help=STEPS_LIMIT_HELP,
        metavar='NUMBER-OF-STEPS',
    )
    application_mode_group.add_argument(
        '-i', '--interactive',
        dest='interactive_mode_enabled',
        action='store_true',
        help=INTERACTIVE_MODE_HELP,
    )
    argument_parser.add_argument(
        '-x', '--verbose',
        dest='verbose_mode_enabled',
        action='store_true',
        help=VERBOSE_MODE_HELP,
    )
    argument_parser.add_argument(
        'word',
        help=WORD_HELP,
        metavar='INPUT',
    )

    return argument_parser.parse_args(arguments)


def create_alphabet(parsed_arguments: argparse.Namespace) -> Optional['Alphabet']:
    alphabet_characters = parsed_arguments.alphabet_characters
    extension_characters = parsed_arguments.extension_characters
    preset_name = parsed_arguments.preset_name

    if alphabet_characters is not None and preset_name is not None:
        print('error: option -a (or --alphabet) cannot be used with option -p (or --preset)', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

    if extension_characters is not None and alphabet_characters is None:
        print('error: option -e (or --alphabet-extension) requires option -a (or --alphabet)', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

    if preset_name is not None:
        return Alphabet.from_preset(preset_name)

    if alphabet_characters is None:
        return None

    try:
        alphabet = Alphabet.parse(alphabet_characters)
        if extension_characters is not None:
            alphabet = alphabet.extend_all(extension_characters)
    except AlphabetDefinitionException as alphabet_definition_exception:
        print(f'error: failed to parse the alphabet: {describe(alphabet_definition_exception)}', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)

    return alphabet


def create_builder(parsed_arguments: argparse.Namespace) -> 'AlgorithmSchemeBuilder':
    builder = AlgorithmSchemeBuilder()

    if parsed_arguments.delimiter is not None:
        builder = builder.with_delimiter(parsed_arguments.delimiter)

    if parsed_arguments.final_marker is not None:
        builder = builder.with_final_marker(parsed_arguments.final_marker)

    alphabet = create_alphabet(parsed_arguments)
    if alphabet is not None:
        builder = builder.with_alphabet(alphabet)

    return builder


def read_scheme(scheme_file_name: str) -> str:
    try:
        with open(scheme_file_name, 'r', encoding='utf-8') as scheme_file:
            return scheme_file.read()
    except FileNotFoundError:
        print(f'error: argument `{scheme_file_name}`: file not found', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)
    except (IOError, UnicodeDecodeError):
        print(f'error: cannot read the scheme from `{scheme_file_name}`', file=sys.stderr)
        sys.exit(COMMAND_LINE_ERROR_EXIT_CODE)


def print_finished(steps_done: int, word: str):
    print(f'The algorithm is finished after taking {steps_done} steps. The output string is "{word}".')


def print_verbose_step(step_number: int, word_before: str, result: 'SingleApplicationResult'):
    formula_definition = result.applied_formula_definition
    if formula_definition is None:
        formula_label = 'no formula'
    else:
        formula_label = f'formula "{formula_definition}"'

    if word_before == result.word:
        no_change_indicator = ' (no change)'
    else:
        no_change_indicator = ''

    if result.is_final:
        final_indicator = ' (final)'
    else:
        final_indicator = ''

    print('<' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' BEFORE step {step_number}')
    print(word_before)
    print('=' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + no_change_indicator)
    print(result.word)
    print('>' * VERBOSE_MODE_DIVIDER_SYMBOL_COUNT + f' AFTER step {step_number}, {formula_label}{final_indicator}')
    print()


def apply_scheme(scheme: 'AlgorithmScheme', word: str, steps_limit: int):
    try:
        result = scheme.apply(word, steps_limit)
    except FullApplicationException as full_application_exception:
        print(
            f'error: failed to apply the algorithm scheme to the input: {describe(full_application_exception)}',
            file=sys.stderr,
        )
        sys.exit(GENERIC_ERROR_EXIT_CODE)

    print_finished(result.steps_done, result.word)


def apply_scheme_verbosely(scheme: 'AlgorithmScheme', word: str, steps_limit: int):
    try:
        application_iterator = scheme.get_application_iterator(word)
    except InputValidationException as input_validation_exception:
        print(
            f'error: failed to apply the algorithm scheme to the input: {describe(input_validation_exception)}',
            file=sys.stderr,
        )
        sys.exit(GENERIC_ERROR_EXIT_CODE)

    steps_done = 0
    for result in itertools.islice(application_iterator, steps_limit):
        steps_done += 1
        print_verbose_step(steps_done, word, result)
        word = result.word

        if result.is_final:
            print_finished(steps_done, word)
            return

    steps_limit_hit_exception = StepsLimitHitException(steps_limit)
    print(
        f'error: failed to apply the algorithm scheme to the input: {describe(steps_limit_hit_exception)}',
        file=sys.stderr,
    )
    sys.exit(GENERIC_ERROR_EXIT_CODE)


def iterate_over_scheme_results(scheme: 'AlgorithmScheme', word: str, pacer: 'ConsolePacer',
                                verbose_mode_enabled: bool = False):
    try:
        application_iterator = scheme.get_application_iterator(word)
    except InputValidationException as input_validation_exception:
        print(
            f'error: failed to apply the algorithm scheme to the input: {describe(input_validation_exception)}',
            file=sys.stderr,
        )
        sys.exit(GENERIC_ERROR_EXIT_CODE)

    steps_done = 0
    for result in application_iterator:
        steps_done += 1
        if verbose_mode_enabled:
            print_verbose_step(steps_done, word, result)

        formula_definition = result.applied_formula_definition
        if formula_definition is None:
            print('No transformation was made, no rules were applied.')
            break

        print(
            f'Transformed the word "{word}" to the word "{result.word}" '
            f'by applying the substitution formula "{formula_definition}".'
        )
        word = result.word

        if not result.is_final and not pacer.should_continue():
            print('Stopping due to the received cancellation signal.')
            return

    print_finished(steps_done, word)


def main(arguments: Optional[list[str]] = None):
    parsed_arguments = parse_command_line_arguments(arguments)
    builder = create_builder(parsed_arguments)
    scheme_definition = read_scheme(parsed_arguments.scheme_file_name)

    try:
        scheme = builder.build_from_document(scheme_definition)
    except SchemeDefinitionException as scheme_definition_exception:
        print(
            f'error: `{parsed_arguments.scheme_file_name}`: '
            f'failed to create the algorithm scheme: {describe(scheme_definition_exception)}',
            file=sys.stderr,
        )
        sys.exit(GENERIC_ERROR_EXIT_CODE)

    word = parsed_arguments.word
    if parsed_arguments.interactive_mode_enabled:
        iterate_over_scheme_results(scheme, word, ConsolePacer(), parsed_arguments.verbose_mode_enabled)
    elif parsed_arguments.verbose_mode_enabled:
        apply_scheme_verbosely(scheme, word, parsed_arguments.steps_limit)
    else:
        apply_scheme(scheme, word, parsed_arguments.steps_limit)


if __name__ == '__main__':
    main()
