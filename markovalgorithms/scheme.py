"""
# Markov Algorithms: scheme.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Algorithm schemes and their application to words.
"""

from typing import Iterator, NamedTuple, Optional

from markovalgorithms.constants import STEPS_LIMIT_MAX
from markovalgorithms.exceptions import (
    ExtensionCharactersException,
    InputValidationException,
    InputValidationFailedException,
    StepsLimitHitException,
    StepsLimitOutOfRangeException,
    UnknownCharactersException,
    ZeroStepsLimitException,
)
from markovalgorithms.formulas import SubstitutionFormula
from markovalgorithms.properties import SchemeProperties


class SingleApplicationData(NamedTuple):
    word: str
    applied_formula_definition: Optional[str]


class SingleApplicationResult(NamedTuple):
    """
    The outcome of a single step.

    A final result is produced either by applying a final formula,
    or by finding no applicable formula at all (in which case `applied_formula_definition` is `None`).
    """
    data: SingleApplicationData
    is_final: bool

    @property
    def word(self) -> str:
        return self.data.word

    @property
    def applied_formula_definition(self) -> Optional[str]:
        return self.data.applied_formula_definition


class FullApplicationResult(NamedTuple):
    word: str
    steps_done: int


class AlgorithmScheme:
    """
    An ordered list of substitution formulas, together with the properties they were parsed under.

    Formulas are tried in order of definition; the first applicable one wins.
    A scheme is immutable once built (see `AlgorithmSchemeBuilder`),
    and every application works on its own copy of the word,
    so a scheme may be shared freely.

    Three modes of application are provided:
    - `apply(word, steps_limit)`: run until the algorithm halts, within a number of steps;
    - `apply_once(word)`: run a single step;
    - `get_application_iterator(word)`: run lazily, one step per item.
    """
    _properties: 'SchemeProperties'
    _store: str
    _formulas: tuple['SubstitutionFormula', ...]

    def __init__(self, properties: 'SchemeProperties', store: str, formulas: tuple['SubstitutionFormula', ...]):
        self._properties = properties
        self._store = store
        self._formulas = formulas

    def __repr__(self) -> str:
        return f'AlgorithmScheme(properties={self._properties!r}, formula_definitions={self.formula_definitions!r})'

    @property
    def properties(self) -> 'SchemeProperties':
        return self._properties

    @property
    def store(self) -> str:
        return self._store

    @property
    def formulas(self) -> tuple['SubstitutionFormula', ...]:
        return self._formulas

    @property
    def formula_definitions(self) -> tuple[str, ...]:
        return tuple(formula.definition.resolve(self._store) for formula in self._formulas)

    def validate_word(self, word: str):
        """
        Ensure a word consists of characters from the main set of the alphabet.

        Characters are classified in full before anything is raised,
        so that each exception names every offending character (in order of occurrence).
        Unknown characters take precedence over extension characters.
        """
        alphabet = self._properties.alphabet
        unknown_characters = ''
        extension_characters = ''

        for character in word:
            if not alphabet.contains_extended(character):
                unknown_characters += character
            elif not alphabet.contains(character):
                extension_characters += character

        if len(unknown_characters) > 0:
            raise UnknownCharactersException(unknown_characters)
        if len(extension_characters) > 0:
            raise ExtensionCharactersException(extension_characters)

    def apply_once_unsafe(self, word: str) -> 'SingleApplicationResult':
        """
        Run a single step on a word assumed to be valid.
        """
        for formula in self._formulas:
            application = formula.apply(self._store, word)
            if application is None:
                continue

            data = SingleApplicationData(application.word, formula.definition.resolve(self._store))
            return SingleApplicationResult(data, application.is_final)

        return SingleApplicationResult(SingleApplicationData(word, None), is_final=True)

    def apply_once(self, word: str) -> 'SingleApplicationResult':
        self.validate_word(word)

        return self.apply_once_unsafe(word)

    def apply(self, word: str, steps_limit: int) -> 'FullApplicationResult':
        """
        Apply the scheme until the algorithm halts, taking at most `steps_limit` steps.
        """
        if steps_limit == 0:
            raise ZeroStepsLimitException
        if not 0 < steps_limit <= STEPS_LIMIT_MAX:
            raise StepsLimitOutOfRangeException(steps_limit, STEPS_LIMIT_MAX)

        try:
            self.validate_word(word)
        except InputValidationException as input_validation_exception:
            raise InputValidationFailedException(input_validation_exception) from input_validation_exception

        steps_done = 0
        while steps_done < steps_limit:
            result = self.apply_once_unsafe(word)
            steps_done += 1
            word = result.word

            if result.is_final:
                return FullApplicationResult(word, steps_done)

        raise StepsLimitHitException(steps_limit)

    def get_application_iterator(self, word: str) -> Iterator['SingleApplicationResult']:
        """
        Validate a word, then return an iterator yielding one step per item.

        The iterator ends after yielding the first final result.
        If the algorithm never halts, neither does the iterator;
        it is up to the caller to stop pulling items.
        """
        self.validate_word(word)

        return self._iterate_applications(word)

    def _iterate_applications(self, word: str) -> Iterator['SingleApplicationResult']:
        while True:
            result = self.apply_once_unsafe(word)
            yield result

            if result.is_final:
                return

            word = result.word
