"""
# Markov Algorithms: formulas.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Substitution formulas, and the text store their definitions live in.

Formulas do not own their text.
Every formula definition is appended to a single `TextStore`,
and a formula keeps only `TextView` offsets into it:
````
store:    a→b  b→c  c→⋅4
          ^^^  ^^^  ^^^^
          |    |    formula 3: left = [6, 7), right = [9, 10), final
          |    formula 2: left = [3, 4), right = [5, 6)
          formula 1: left = [0, 1), right = [2, 3)
````
"""

from typing import NamedTuple, Optional

from markovalgorithms.exceptions import (
    FinalMarkerOnLeftException,
    FinalMarkerOnRightException,
    MultipleDelimitersFoundException,
    NoDelimiterFoundException,
    UnknownCharacterInFormulaException,
)
from markovalgorithms.properties import SchemeProperties


class TextView(NamedTuple):
    start: int
    end: int

    def resolve(self, text: str) -> str:
        return text[self.start:self.end]


class TextStore:
    """
    Append-only store of formula definition text.

    Offsets handed out by `append` are never reused, and the store never shrinks.
    """
    _chunks: list[str]
    _length: int
    _text: Optional[str]

    def __init__(self):
        self._chunks = []
        self._length = 0
        self._text = None

    def __len__(self) -> int:
        return self._length

    @property
    def text(self) -> str:
        if self._text is None:
            self._text = ''.join(self._chunks)
            self._chunks = [self._text]

        return self._text

    def append(self, string: str) -> 'TextView':
        start = self._length
        self._chunks.append(string)
        self._length += len(string)
        self._text = None

        return TextView(start, self._length)

    def resolve(self, view: 'TextView') -> str:
        return view.resolve(self.text)


class FormulaApplication(NamedTuple):
    word: str
    is_final: bool


class SubstitutionFormula:
    """
    A substitution formula `«left»«delimiter»«right»` or `«left»«delimiter»«final_marker»«right»`.

    Applying the formula to a word replaces the leftmost occurrence of «left» with «right».
    """
    _definition: 'TextView'
    _left: 'TextView'
    _right: 'TextView'
    _is_final: bool

    def __init__(self, definition: 'TextView', left: 'TextView', right: 'TextView', is_final: bool):
        self._definition = definition
        self._left = left
        self._right = right
        self._is_final = is_final

    def __repr__(self) -> str:
        return (
            f'SubstitutionFormula(definition={tuple(self._definition)}, left={tuple(self._left)}, '
            f'right={tuple(self._right)}, is_final={self._is_final})'
        )

    @property
    def definition(self) -> 'TextView':
        return self._definition

    @property
    def left(self) -> 'TextView':
        return self._left

    @property
    def right(self) -> 'TextView':
        return self._right

    @property
    def is_final(self) -> bool:
        return self._is_final

    @staticmethod
    def parse(properties: 'SchemeProperties', store: str, definition: 'TextView') -> 'SubstitutionFormula':
        """
        Parse the formula whose definition occupies `definition` in `store`.

        The checks are made in this order, the first failure being raised:
        1. every character is in the extended alphabet, or is the delimiter or the final marker;
        2. the delimiter occurs exactly once;
        3. the final marker occurs nowhere but immediately after the delimiter.
        """
        formula_definition = definition.resolve(store)

        unknown_characters = properties.collect_unknown_characters(formula_definition)
        if len(unknown_characters) > 0:
            raise UnknownCharacterInFormulaException(formula_definition, unknown_characters)

        delimiter_count = formula_definition.count(properties.delimiter)
        if delimiter_count == 0:
            raise NoDelimiterFoundException(formula_definition)
        if delimiter_count > 1:
            raise MultipleDelimitersFoundException(formula_definition, delimiter_count)

        left_end = formula_definition.index(properties.delimiter)
        is_final = formula_definition.startswith(properties.final_delimiter, left_end)
        if is_final:
            right_start = left_end + len(properties.final_delimiter)
        else:
            right_start = left_end + len(properties.delimiter)

        if properties.final_marker in formula_definition[:left_end]:
            raise FinalMarkerOnLeftException(formula_definition)
        if properties.final_marker in formula_definition[right_start:]:
            raise FinalMarkerOnRightException(formula_definition)

        start = definition.start
        left = TextView(start, start + left_end)
        right = TextView(start + right_start, definition.end)

        return SubstitutionFormula(definition, left, right, is_final)

    def apply(self, store: str, word: str) -> Optional['FormulaApplication']:
        """
        Apply the formula to a word, or return `None` if «left» does not occur in it.
        """
        left = self._left.resolve(store)
        if left not in word:
            return None

        right = self._right.resolve(store)

        return FormulaApplication(word.replace(left, right, 1), self._is_final)
