"""
# Markov Algorithms: pacing.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Pacing of interactive step-through.
"""

from typing import Callable

PROMPT = 'Press ENTER to continue or hit Ctrl-C to exit.'


class ConsolePacer:
    """
    Object blocking between steps until the user either continues or cancels.

    A line of input (ENTER) means continue.
    Ctrl-C (`KeyboardInterrupt`) or end of input means cancel,
    and once cancelled, the pacer stays cancelled without prompting again.
    """
    _read_line: Callable[[], str]
    _should_continue: bool

    def __init__(self, read_line: Callable[[], str] = input):
        self._read_line = read_line
        self._should_continue = True

    @property
    def is_cancelled(self) -> bool:
        return not self._should_continue

    def should_continue(self) -> bool:
        if not self._should_continue:
            return False

        print(PROMPT)
        try:
            self._read_line()
        except (KeyboardInterrupt, EOFError):
            self._should_continue = False

        return self._should_continue
