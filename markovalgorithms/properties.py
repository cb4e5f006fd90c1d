"""
# Markov Algorithms: properties.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Scheme properties: the delimiter, the final marker, and the alphabet.
"""

import warnings

from markovalgorithms.alphabet import Alphabet
from markovalgorithms.exceptions import (
    DelimiterAndFinalMarkerIdenticalException,
    DelimiterInAlphabetException,
    FinalMarkerInAlphabetException,
    NotASingleCharacterException,
)


class SchemeProperties:
    """
    Validated configuration shared by all substitution formulas of a scheme.

    A simple formula is written `«left»«delimiter»«right»`,
    and a final formula `«left»«delimiter»«final_marker»«right»`.
    The pair `«delimiter»«final_marker»` is called the final delimiter.

    Neither the delimiter nor the final marker may belong to the main set of the alphabet.
    Coinciding with an extension character is tolerated with a warning.
    """
    _delimiter: str
    _final_marker: str
    _alphabet: 'Alphabet'

    def __init__(self, delimiter: str, final_marker: str, alphabet: 'Alphabet'):
        self._delimiter = delimiter
        self._final_marker = final_marker
        self._alphabet = alphabet

    def __repr__(self) -> str:
        return (
            f'SchemeProperties(delimiter={self._delimiter!r}, final_marker={self._final_marker!r}, '
            f'alphabet={self._alphabet!r})'
        )

    @property
    def delimiter(self) -> str:
        return self._delimiter

    @property
    def final_marker(self) -> str:
        return self._final_marker

    @property
    def final_delimiter(self) -> str:
        return self._delimiter + self._final_marker

    @property
    def alphabet(self) -> 'Alphabet':
        return self._alphabet

    @staticmethod
    def build(delimiter: str, final_marker: str, alphabet: 'Alphabet') -> 'SchemeProperties':
        """
        Build scheme properties, raising on the first conflict found.

        The checks are made in this order:
        1. delimiter and final marker differ;
        2. delimiter is not in the main set of the alphabet;
        3. final marker is not in the main set of the alphabet.
        """
        if len(delimiter) != 1:
            raise NotASingleCharacterException('delimiter', delimiter)
        if len(final_marker) != 1:
            raise NotASingleCharacterException('final marker', final_marker)

        if delimiter == final_marker:
            raise DelimiterAndFinalMarkerIdenticalException(delimiter)
        if alphabet.contains(delimiter):
            raise DelimiterInAlphabetException(delimiter)
        if alphabet.contains(final_marker):
            raise FinalMarkerInAlphabetException(final_marker)

        for role, character in (('delimiter', delimiter), ('final marker', final_marker)):
            if alphabet.contains_extended(character):
                warnings.warn(
                    f'warning: the {role} `{character}` is also an extension character of the alphabet; '
                    f'formulas using `{character}` as an extension character will be parsed as using it as a {role}'
                )

        return SchemeProperties(delimiter, final_marker, alphabet)

    def is_allowed_in_definition(self, character: str) -> bool:
        return (
            self._alphabet.contains_extended(character)
            or character == self._delimiter
            or character == self._final_marker
        )

    def collect_unknown_characters(self, formula_definition: str) -> str:
        """
        Collect, in order of occurrence, the characters of a formula definition
        that neither belong to the extended alphabet, nor are delimiter or final marker.
        """
        return ''.join(
            character
            for character in formula_definition
            if not self.is_allowed_in_definition(character)
        )
