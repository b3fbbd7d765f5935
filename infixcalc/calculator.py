"""Display state of the button calculator."""

from __future__ import annotations

from typing import Callable

from infixcalc.expression import evaluate, format_result, to_postfix

KEYS = "0123456789+-*/()"
_KEY_SET = frozenset(KEYS)


class Calculator:
    """Holds the text being typed and evaluates it on request.

    ``on_change``, when given, is called with the new text after each change.
    """

    def __init__(self, on_change: Callable[[str], None] | None = None) -> None:
        self._text = ""
        self._on_change = on_change

    def _set(self, text: str) -> None:
        self._text = text
        if self._on_change is not None:
            self._on_change(text)

    def press(self, key: str) -> None:
        """Append one digit, operator or parenthesis."""
        if len(key) != 1 or key not in _KEY_SET:
            raise ValueError(f"unsupported key: {key!r}")
        self._set(self._text + key)

    def equals(self) -> str:
        """Evaluate the text, append '=' and the result, and return the result."""
        result = format_result(evaluate(to_postfix(self._text)))
        self._set(f"{self._text}={result}")
        return result

    def clear(self) -> None:
        """Erase all text."""
        self._set("")

    def backspace(self) -> None:
        """Remove the last character, if any."""
        self._set(self._text[:-1])

    def text(self) -> str:
        """Return the current display text."""
        return self._text