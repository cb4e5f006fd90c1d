"""
# Markov Algorithms

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

An interpreter for Markov algorithms.
````
from markovalgorithms import Alphabet, AlgorithmSchemeBuilder

scheme = AlgorithmSchemeBuilder().with_alphabet(Alphabet.parse('abc').extend('d')).build(['a→⋅d'])
scheme.apply('abc', 1)  # FullApplicationResult(word='dbc', steps_done=1)
````
"""

from markovalgorithms._version import __version__
from markovalgorithms.alphabet import Alphabet
from markovalgorithms.builder import AlgorithmSchemeBuilder
from markovalgorithms.properties import SchemeProperties
from markovalgorithms.scheme import (
    AlgorithmScheme,
    FullApplicationResult,
    SingleApplicationData,
    SingleApplicationResult,
)

__all__ = [
    '__version__',
    'AlgorithmScheme',
    'AlgorithmSchemeBuilder',
    'Alphabet',
    'FullApplicationResult',
    'SchemeProperties',
    'SingleApplicationData',
    'SingleApplicationResult',
]
