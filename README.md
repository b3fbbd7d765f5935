# infixcalc

A small desktop calculator for the four basic operations. You build an
expression from digits, `+`, `-`, `*`, `/` and parentheses, press `=`, and
the result is appended to the display after an equals sign.

The expression is turned into postfix order with an operator stack and then
reduced to a single number.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

The window uses `tkinter` from the standard library, so the Python
installation needs Tk support to open it. Everything else works without it.

## Running the calculator

```
infixcalc
```

This opens the calculator window. Its title defaults to `计算器`; choose
another with `--title`:

```
infixcalc --title "My calculator"
```

The buttons are laid out as returned by `infixcalc.app.key_layout()`: the
digits `0`–`9`, the four operators, `(` and `)`, then `C` to empty the
display, `⌫` to remove the last character and `=` to evaluate.

## Using it from Python

The same behaviour is available without a window through
`infixcalc.calculator.Calculator`:

```python
from infixcalc.calculator import Calculator

calc = Calculator()
for key in "(1+2)*3":
    calc.press(key)
calc.equals()        # returns "9"
print(calc.text())   # (1+2)*3=9
```

- `press(key)` appends one of `0123456789+-*/()`; any other key raises
  `ValueError`.
- `equals()` evaluates the text, appends `=` and the result, and returns the
  result as a string.
- `clear()` empties the text and `backspace()` removes its last character.
- `text()` returns the current text.

`Calculator(on_change=...)` takes an optional callable that receives the new
text after every change.

The pieces behind it live in `infixcalc.expression`:

- `to_postfix(expression)` turns an infix string into a list of `Token`
  values in postfix order.
- `evaluate(postfix)` reduces such a list to a number.
- `format_result(value)` writes a number the way the display shows it: six
  decimal places with trailing zeros, and a trailing point, removed.
- `compare_operators(stacked, incoming)` returns the `Action` the
  conversion takes when an incoming symbol meets the operator on top of the
  stack.

```python
from infixcalc.expression import evaluate, format_result, to_postfix

value = evaluate(to_postfix("2.5*4-1"))
print(format_result(value))   # 9
```

Malformed input, such as an unmatched `)`, a decimal point with no digit
after it, an operator without two operands or an empty expression, raises
`ValueError`. Division by zero does not raise: it gives an infinity or NaN.

## What it does not do

Numbers are unsigned decimals such as `12` or `0.75`; there is no unary
minus, no operators beyond `+`, `-`, `*` and `/`, and no functions. The
window is driven by its buttons only, and nothing is stored between runs.