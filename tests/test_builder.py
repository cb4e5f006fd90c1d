"""
# Markov Algorithms: test_builder.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Perform unit testing for `builder.py`.
"""

import unittest

from markovalgorithms.alphabet import Alphabet
from markovalgorithms.builder import AlgorithmSchemeBuilder
from markovalgorithms.exceptions import (
    DelimiterAndFinalMarkerIdenticalException,
    DelimiterInAlphabetException,
    EmptyLineException,
    FinalMarkerInAlphabetException,
    FormulaCreationException,
    MultipleDelimitersFoundException,
    NoDelimiterFoundException,
    SchemeDefinitionException,
    UnknownCharactersInDefinitionException,
)


class TestAlgorithmSchemeBuilder(unittest.TestCase):
    def test_defaults(self):
        builder = AlgorithmSchemeBuilder()
        self.assertIsNone(builder.delimiter)
        self.assertIsNone(builder.final_marker)
        self.assertIsNone(builder.alphabet)

        properties = builder.finalise_properties()
        self.assertEqual(properties.delimiter, '→')
        self.assertEqual(properties.final_marker, '⋅')
        self.assertEqual(properties.alphabet, Alphabet.from_preset('alphanumeric'))

    def test_with_methods_return_new_builders(self):
        builder = AlgorithmSchemeBuilder()
        alphabet = Alphabet.parse('xyz')

        other_builder = builder.with_delimiter('>').with_final_marker('!').with_alphabet(alphabet)
        self.assertIsNone(builder.delimiter)
        self.assertIsNone(builder.final_marker)
        self.assertIsNone(builder.alphabet)
        self.assertEqual(other_builder.delimiter, '>')
        self.assertEqual(other_builder.final_marker, '!')
        self.assertEqual(other_builder.alphabet, alphabet)

        self.assertEqual(other_builder.with_delimiter('=').delimiter, '=')
        self.assertEqual(other_builder.delimiter, '>')

    def test_build(self):
        scheme = AlgorithmSchemeBuilder().build(['a→b', 'b→⋅c'])
        self.assertEqual(scheme.store, 'a→bb→⋅c')
        self.assertEqual(scheme.formula_definitions, ('a→b', 'b→⋅c'))
        self.assertEqual([formula.is_final for formula in scheme.formulas], [False, True])

    def test_build_with_custom_properties(self):
        scheme = (
            AlgorithmSchemeBuilder()
                .with_delimiter('>')
                .with_final_marker('!')
                .with_alphabet(Alphabet.parse('ab'))
                .build(['a>!b', 'b>a'])
        )
        self.assertEqual(scheme.apply_once('ab').word, 'bb')
        self.assertTrue(scheme.apply_once('ab').is_final)

    def test_build_with_no_formulas(self):
        scheme = AlgorithmSchemeBuilder().build([])
        self.assertEqual(scheme.formulas, ())
        self.assertEqual(scheme.store, '')

    def test_build_validates_properties_first(self):
        with self.assertRaises(DelimiterAndFinalMarkerIdenticalException) as context:
            AlgorithmSchemeBuilder().with_delimiter('⋅').build(['a→→→b'])
        self.assertEqual(context.exception.character, '⋅')

        with self.assertRaises(DelimiterInAlphabetException) as context:
            AlgorithmSchemeBuilder().with_delimiter('a').build(['a→b'])
        self.assertEqual(context.exception.character, 'a')

        with self.assertRaises(FinalMarkerInAlphabetException) as context:
            AlgorithmSchemeBuilder().with_final_marker('b').build(['a→b'])
        self.assertEqual(context.exception.character, 'b')

        with self.assertRaises(SchemeDefinitionException):
            AlgorithmSchemeBuilder().with_final_marker('b').build([])

        with self.assertRaises(SchemeDefinitionException):
            AlgorithmSchemeBuilder().with_delimiter('=>').build(['a=>b'])

    def test_build_with_unknown_characters(self):
        with self.assertRaises(UnknownCharactersInDefinitionException) as context:
            AlgorithmSchemeBuilder().build(['a→b', 'ну→ぬ', 'a→→b'])
        self.assertEqual(context.exception.characters, 'нуぬ')
        self.assertEqual(
            str(context.exception),
            'error: the definition of the scheme contains characters that neither belong to the alphabet, '
            'nor are delimiter or final marker (unknown characters: "нуぬ")',
        )

    def test_build_with_ill_formed_formula(self):
        with self.assertRaises(FormulaCreationException) as context:
            AlgorithmSchemeBuilder().build(['a→b', 'a→→b'])
        self.assertIsInstance(context.exception.source, MultipleDelimitersFoundException)
        self.assertIs(context.exception.__cause__, context.exception.source)
        self.assertEqual(
            str(context.exception),
            'error: encountered an issue during the creation of substitution formulas: '
            'multiple delimiters (2) are found in the substitution formula "a→→b"',
        )

        with self.assertRaises(FormulaCreationException) as context:
            AlgorithmSchemeBuilder().build(['ab'])
        self.assertIsInstance(context.exception.source, NoDelimiterFoundException)

    def test_build_from_document(self):
        scheme = AlgorithmSchemeBuilder().build_from_document('a→b\nb→⋅c\n')
        self.assertEqual(scheme.formula_definitions, ('a→b', 'b→⋅c'))

        scheme = AlgorithmSchemeBuilder().build_from_document('')
        self.assertEqual(scheme.formulas, ())

        with self.assertRaises(EmptyLineException) as context:
            AlgorithmSchemeBuilder().build_from_document('a→b\n\nb→⋅c')
        self.assertEqual(context.exception.line_number, 2)

        with self.assertRaises(EmptyLineException) as context:
            AlgorithmSchemeBuilder().build_from_document('a→b\n\n')
        self.assertEqual(context.exception.line_number, 2)

    def test_build_from_document_splits_on_line_feeds_only(self):
        builder = AlgorithmSchemeBuilder().with_alphabet(Alphabet.parse('ab\u2028\x0c\x85'))

        scheme = builder.build_from_document('a\u2028→b\n\x0c\x85→a\nb→⋅a\n')
        self.assertEqual(scheme.formula_definitions, ('a\u2028→b', '\x0c\x85→a', 'b→⋅a'))
        self.assertEqual(scheme.apply('ba\u2028', 5), ('ab', 2))

        scheme = builder.build_from_document('a→b\r\nb→⋅a\r\n')
        self.assertEqual(scheme.formula_definitions, ('a→b', 'b→⋅a'))

        with self.assertRaises(EmptyLineException) as context:
            builder.build_from_document('a→b\r\n\r\nb→⋅a')
        self.assertEqual(context.exception.line_number, 2)


if __name__ == '__main__':
    unittest.main()
