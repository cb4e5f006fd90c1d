"""
# Markov Algorithms: builder.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Building algorithm schemes from formula definitions.
"""

import copy
from typing import Iterable, Optional

from markovalgorithms.alphabet import Alphabet
from markovalgorithms.constants import DEFAULT_ALPHABET_PRESET_NAME, DEFAULT_DELIMITER, DEFAULT_FINAL_MARKER
from markovalgorithms.exceptions import (
    EmptyLineException,
    FormulaCreationException,
    FormulaDefinitionException,
    UnknownCharactersInDefinitionException,
)
from markovalgorithms.formulas import SubstitutionFormula, TextStore
from markovalgorithms.properties import SchemeProperties
from markovalgorithms.scheme import AlgorithmScheme


class AlgorithmSchemeBuilder:
    """
    Builder of algorithm schemes.

    The `with_*` methods return a new builder, leaving the original untouched,
    and a later call overrides an earlier one. Unset values fall back to defaults:
    - delimiter: `→`;
    - final marker: `⋅`;
    - alphabet: the `alphanumeric` preset (Latin letters and digits).
    ````
    scheme = (
        AlgorithmSchemeBuilder()
            .with_alphabet(Alphabet.parse('abc').extend('d'))
            .build(['a→⋅d'])
    )
    scheme.apply('abc', 1)  # FullApplicationResult(word='dbc', steps_done=1)
    ````
    """
    _delimiter: Optional[str]
    _final_marker: Optional[str]
    _alphabet: Optional['Alphabet']

    def __init__(self):
        self._delimiter = None
        self._final_marker = None
        self._alphabet = None

    @property
    def delimiter(self) -> Optional[str]:
        return self._delimiter

    @property
    def final_marker(self) -> Optional[str]:
        return self._final_marker

    @property
    def alphabet(self) -> Optional['Alphabet']:
        return self._alphabet

    def with_delimiter(self, delimiter: str) -> 'AlgorithmSchemeBuilder':
        builder = copy.copy(self)
        builder._delimiter = delimiter
        return builder

    def with_final_marker(self, final_marker: str) -> 'AlgorithmSchemeBuilder':
        builder = copy.copy(self)
        builder._final_marker = final_marker
        return builder

    def with_alphabet(self, alphabet: 'Alphabet') -> 'AlgorithmSchemeBuilder':
        builder = copy.copy(self)
        builder._alphabet = alphabet
        return builder

    def finalise_properties(self) -> 'SchemeProperties':
        delimiter = DEFAULT_DELIMITER if self._delimiter is None else self._delimiter
        final_marker = DEFAULT_FINAL_MARKER if self._final_marker is None else self._final_marker
        if self._alphabet is None:
            alphabet = Alphabet.from_preset(DEFAULT_ALPHABET_PRESET_NAME)
        else:
            alphabet = self._alphabet

        return SchemeProperties.build(delimiter, final_marker, alphabet)

    def build(self, formula_definitions: Iterable[str]) -> 'AlgorithmScheme':
        """
        Build a scheme from formula definitions, given in order of priority.

        Properties are validated before any definition is looked at.
        Each definition is then checked for unknown characters, appended to the store, and parsed.
        The first failure aborts the build.
        """
        properties = self.finalise_properties()

        store = TextStore()
        formulas: list['SubstitutionFormula'] = []

        for formula_definition in formula_definitions:
            unknown_characters = properties.collect_unknown_characters(formula_definition)
            if len(unknown_characters) > 0:
                raise UnknownCharactersInDefinitionException(unknown_characters)

            definition = store.append(formula_definition)

            try:
                formula = SubstitutionFormula.parse(properties, store.text, definition)
            except FormulaDefinitionException as formula_definition_exception:
                raise FormulaCreationException(formula_definition_exception) from formula_definition_exception

            formulas.append(formula)

        return AlgorithmScheme(properties, store.text, tuple(formulas))

    def build_from_document(self, scheme_definition: str) -> 'AlgorithmScheme':
        """
        Build a scheme from a document holding one formula definition per line.

        Lines are separated by line feeds alone (with a trailing carriage return dropped from each line),
        so that other line-breaking characters remain usable as alphabet members.
        Empty lines are not allowed (though the document may end with a newline).
        """
        formula_definitions = [line.removesuffix('\r') for line in scheme_definition.split('\n')]
        if formula_definitions[-1] == '':
            formula_definitions.pop()

        for line_number, formula_definition in enumerate(formula_definitions, start=1):
            if formula_definition == '':
                raise EmptyLineException(line_number)

        return self.build(formula_definitions)
