"""
# Markov Algorithms: alphabet.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Alphabets over which algorithm schemes are defined.
"""

from typing import Iterable

from markovalgorithms.constants import ALPHABET_PRESETS
from markovalgorithms.exceptions import (
    DuplicatedCharactersException,
    ExtendedWithDuplicateException,
    NoCharactersException,
)


class Alphabet:
    """
    An alphabet consisting of a main set of characters and a disjoint extension.

    Characters of the main set are legal both in input words and in substitution formulas.
    Characters of the extension are reserved for the internal bookkeeping of an algorithm:
    they may appear in substitution formulas but never in an input word.

    Alphabets are immutable; `extend` returns a new alphabet.
    ````
    alphabet = Alphabet.parse('ab').extend('|').extend('+')
    alphabet.contains('a')            # True
    alphabet.contains('|')            # False
    alphabet.contains_extended('|')   # True
    ````
    """
    _main: frozenset[str]
    _extension: frozenset[str]

    def __init__(self, main: Iterable[str], extension: Iterable[str] = ()):
        main = frozenset(main)
        extension = frozenset(extension)

        for character in main | extension:
            Alphabet.validate_character(character)

        if len(main) == 0:
            raise NoCharactersException
        if not main.isdisjoint(extension):
            raise ExtendedWithDuplicateException(min(main & extension))

        self._main = main
        self._extension = extension

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Alphabet):
            return NotImplemented

        return self._main == other._main and self._extension == other._extension

    def __hash__(self) -> int:
        return hash((self._main, self._extension))

    def __repr__(self) -> str:
        main = ''.join(sorted(self._main))
        extension = ''.join(sorted(self._extension))
        return f'Alphabet(main={main!r}, extension={extension!r})'

    @property
    def main(self) -> frozenset[str]:
        return self._main

    @property
    def extension(self) -> frozenset[str]:
        return self._extension

    @staticmethod
    def validate_character(character: str):
        if not isinstance(character, str) or len(character) != 1:
            raise ValueError(f'error: alphabet members must be single characters, not {character!r}')

    @staticmethod
    def from_characters(characters: Iterable[str]) -> 'Alphabet':
        """
        Create an alphabet from a non-empty collection of characters.

        Repeated characters are collapsed, as in a set.
        """
        return Alphabet(characters)

    @staticmethod
    def parse(alphabet_definition: str) -> 'Alphabet':
        """
        Parse an alphabet from a string of distinct characters.

        All repeated occurrences are reported at once, in order of occurrence,
        so `parse('abcabd')` reports the duplicates `ab`.
        """
        seen_characters: set[str] = set()
        duplicates: list[str] = []

        for character in alphabet_definition:
            if character in seen_characters:
                duplicates.append(character)
            else:
                seen_characters.add(character)

        if len(duplicates) > 0:
            raise DuplicatedCharactersException(''.join(duplicates), alphabet_definition)

        return Alphabet(seen_characters)

    @staticmethod
    def from_preset(preset_name: str) -> 'Alphabet':
        try:
            alphabet_definition = ALPHABET_PRESETS[preset_name]
        except KeyError:
            raise ValueError(f'error: unrecognised alphabet preset `{preset_name}`')

        return Alphabet.parse(alphabet_definition)

    def contains(self, character: str) -> bool:
        return character in self._main

    def contains_extended(self, character: str) -> bool:
        return character in self._main or character in self._extension

    def extend(self, character: str) -> 'Alphabet':
        """
        Return a new alphabet whose extension also holds the given character.
        """
        Alphabet.validate_character(character)
        if self.contains_extended(character):
            raise ExtendedWithDuplicateException(character)

        return Alphabet(self._main, self._extension | {character})

    def extend_all(self, characters: Iterable[str]) -> 'Alphabet':
        alphabet = self
        for character in characters:
            alphabet = alphabet.extend(character)

        return alphabet
