"""
# Markov Algorithms: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception classes.

Every exception carries the values that describe the failure as read-only properties,
and a message (beginning with `error: `) suitable for printing as is.
"""


class AlphabetDefinitionException(Exception):
    pass


class NoCharactersException(AlphabetDefinitionException):
    def __init__(self):
        super().__init__('error: an alphabet cannot be empty')


class DuplicatedCharactersException(AlphabetDefinitionException):
    _duplicates: str
    _alphabet_definition: str

    def __init__(self, duplicates: str, alphabet_definition: str):
        super().__init__(
            f'error: the same character cannot be included in the alphabet multiple times '
            f'(original definition: "{alphabet_definition}"), duplicate characters: "{duplicates}"'
        )
        self._duplicates = duplicates
        self._alphabet_definition = alphabet_definition

    @property
    def duplicates(self) -> str:
        return self._duplicates

    @property
    def alphabet_definition(self) -> str:
        return self._alphabet_definition


class ExtendedWithDuplicateException(AlphabetDefinitionException):
    _character: str

    def __init__(self, character: str):
        super().__init__(f'error: an alphabet cannot be extended with duplicate character `{character}`')
        self._character = character

    @property
    def character(self) -> str:
        return self._character


class SchemeDefinitionException(Exception):
    pass


class SchemePropertiesException(SchemeDefinitionException):
    _character: str

    def __init__(self, message: str, character: str):
        super().__init__(message)
        self._character = character

    @property
    def character(self) -> str:
        return self._character


class NotASingleCharacterException(SchemePropertiesException):
    _role: str

    def __init__(self, role: str, character: str):
        super().__init__(f'error: the {role} must be a single character, not `{character}`', character)
        self._role = role

    @property
    def role(self) -> str:
        return self._role


class DelimiterAndFinalMarkerIdenticalException(SchemePropertiesException):
    def __init__(self, character: str):
        super().__init__(
            f'error: the same character `{character}` cannot be used as a delimiter and as a final marker',
            character,
        )


class DelimiterInAlphabetException(SchemePropertiesException):
    def __init__(self, character: str):
        super().__init__(
            f'error: the character `{character}` cannot be used as a delimiter because it belongs to the alphabet',
            character,
        )


class FinalMarkerInAlphabetException(SchemePropertiesException):
    def __init__(self, character: str):
        super().__init__(
            f'error: the character `{character}` cannot be used as a final marker '
            f'because it belongs to the alphabet',
            character,
        )


class UnknownCharactersInDefinitionException(SchemeDefinitionException):
    _characters: str

    def __init__(self, characters: str):
        super().__init__(
            f'error: the definition of the scheme contains characters that neither belong to the alphabet, '
            f'nor are delimiter or final marker (unknown characters: "{characters}")'
        )
        self._characters = characters

    @property
    def characters(self) -> str:
        return self._characters


class EmptyLineException(SchemeDefinitionException):
    _line_number: int

    def __init__(self, line_number: int):
        super().__init__(f'error: line {line_number}: empty lines are not allowed in a scheme definition')
        self._line_number = line_number

    @property
    def line_number(self) -> int:
        return self._line_number


class FormulaDefinitionException(Exception):
    _formula_definition: str

    def __init__(self, message: str, formula_definition: str):
        super().__init__(message)
        self._formula_definition = formula_definition

    @property
    def formula_definition(self) -> str:
        return self._formula_definition


class UnknownCharacterInFormulaException(FormulaDefinitionException):
    _characters: str

    def __init__(self, formula_definition: str, characters: str):
        super().__init__(
            f'error: unsupported characters "{characters}" that neither belong to the alphabet, '
            f'nor are delimiter or final marker are encountered in the substitution formula "{formula_definition}"',
            formula_definition,
        )
        self._characters = characters

    @property
    def characters(self) -> str:
        return self._characters


class NoDelimiterFoundException(FormulaDefinitionException):
    def __init__(self, formula_definition: str):
        super().__init__(
            f'error: no delimiters are found in the substitution formula "{formula_definition}"',
            formula_definition,
        )


class MultipleDelimitersFoundException(FormulaDefinitionException):
    _count: int

    def __init__(self, formula_definition: str, count: int):
        super().__init__(
            f'error: multiple delimiters ({count}) are found in the substitution formula "{formula_definition}"',
            formula_definition,
        )
        self._count = count

    @property
    def count(self) -> int:
        return self._count


class FinalMarkerOnLeftException(FormulaDefinitionException):
    def __init__(self, formula_definition: str):
        super().__init__(
            f'error: final marker is on the left side of the substitution formula "{formula_definition}"',
            formula_definition,
        )


class FinalMarkerOnRightException(FormulaDefinitionException):
    def __init__(self, formula_definition: str):
        super().__init__(
            f'error: final marker is on the right side of the substitution formula "{formula_definition}"',
            formula_definition,
        )


class FormulaCreationException(SchemeDefinitionException):
    _source: 'FormulaDefinitionException'

    def __init__(self, source: 'FormulaDefinitionException'):
        super().__init__(
            f'error: encountered an issue during the creation of substitution formulas: {describe(source)}'
        )
        self._source = source

    @property
    def source(self) -> 'FormulaDefinitionException':
        return self._source


class InputValidationException(Exception):
    _characters: str

    def __init__(self, message: str, characters: str):
        super().__init__(message)
        self._characters = characters

    @property
    def characters(self) -> str:
        return self._characters


class UnknownCharactersException(InputValidationException):
    def __init__(self, characters: str):
        super().__init__(
            f'error: unsupported characters are found in the input word (unsupported characters: "{characters}")',
            characters,
        )


class ExtensionCharactersException(InputValidationException):
    def __init__(self, characters: str):
        super().__init__(
            f'error: extension characters are found in the input word (extension characters: "{characters}")',
            characters,
        )


class FullApplicationException(Exception):
    pass


class ZeroStepsLimitException(FullApplicationException):
    def __init__(self):
        super().__init__('error: the algorithm should be allowed to do at least one step')


class StepsLimitOutOfRangeException(FullApplicationException):
    _steps_limit: int

    def __init__(self, steps_limit: int, steps_limit_max: int):
        super().__init__(f'error: the steps limit {steps_limit} is not between 1 and {steps_limit_max}')
        self._steps_limit = steps_limit

    @property
    def steps_limit(self) -> int:
        return self._steps_limit


class StepsLimitHitException(FullApplicationException):
    _steps_limit: int

    def __init__(self, steps_limit: int):
        super().__init__(f'error: the application is not completed after reaching step {steps_limit}')
        self._steps_limit = steps_limit

    @property
    def steps_limit(self) -> int:
        return self._steps_limit


class InputValidationFailedException(FullApplicationException):
    _source: 'InputValidationException'

    def __init__(self, source: 'InputValidationException'):
        super().__init__(f'error: the input word is not valid: {describe(source)}')
        self._source = source

    @property
    def source(self) -> 'InputValidationException':
        return self._source


def describe(exception: Exception) -> str:
    """
    Describe an exception without its `error: ` prefix, for embedding in another message.
    """
    message = str(exception)
    if message.startswith('error: '):
        message = message[len('error: '):]

    return message
