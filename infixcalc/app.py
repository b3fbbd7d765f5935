"""Desktop window for the button calculator."""

from __future__ import annotations

import argparse
from typing import Callable, Sequence

from infixcalc.calculator import Calculator

CLEAR = "C"
BACKSPACE = "\u232b"
EQUALS = "="
DEFAULT_TITLE = "计算器"

_LAYOUT: tuple[tuple[str, ...], ...] = (
    ("7", "8", "9", "/"),
    ("4", "5", "6", "*"),
    ("1", "2", "3", "-"),
    ("0", "(", ")", "+"),
    (CLEAR, BACKSPACE, EQUALS),
)


def key_layout() -> list[list[str]]:
    """Return the button labels, row by row, as they appear in the window."""
    return [list(row) for row in _LAYOUT]


class CalculatorWindow:
    """A window of calculator buttons above a single-line display."""

    def __init__(self, title: str = DEFAULT_TITLE) -> None:
        self.title = title
        self.display_text = ""
        self._sink: Callable[[str], None] | None = None
        self.calculator = Calculator(on_change=self._show)
        self._actions: dict[str, Callable[[], object]] = {
            CLEAR: self.calculator.clear,
            BACKSPACE: self.calculator.backspace,
            EQUALS: self.calculator.equals,
        }

    def _show(self, text: str) -> None:
        self.display_text = text
        if self._sink is not None:
            self._sink(text)

    def _press(self, label: str) -> None:
        """Act on a button label as if the button had been clicked."""
        action = self._actions.get(label)
        if action is not None:
            action()
        else:
            self.calculator.press(label)

    def run(self) -> None:
        """Open the window and process events until it is closed."""
        import tkinter as tk

        root = tk.Tk()
        root.title(self.title)
        layout = key_layout()
        width = max(len(row) for row in layout)

        display = tk.StringVar(master=root, value=self.display_text)
        entry = tk.Entry(
            root,
            textvariable=display,
            state="readonly",
            justify="right",
            font=("TkDefaultFont", 16),
        )
        entry.grid(row=0, column=0, columnspan=width, sticky="nsew", padx=4, pady=4)

        for row_index, row in enumerate(layout, start=1):
            for column, label in enumerate(row):
                button = tk.Button(
                    root,
                    text=label,
                    width=4,
                    command=lambda key=label: self._press(key),
                )
                button.grid(row=row_index, column=column, sticky="nsew", padx=2, pady=2)
            root.rowconfigure(row_index, weight=1)
        for column in range(width):
            root.columnconfigure(column, weight=1)

        self._sink = display.set
        try:
            root.mainloop()
        finally:
            self._sink = None


def main(argv: Sequence[str] | None = None) -> int:
    """Start the calculator window."""
    parser = argparse.ArgumentParser(
        prog="infixcalc", description="Button calculator for infix expressions."
    )
    parser.add_argument("--title", default=DEFAULT_TITLE, help="window title")
    options = parser.parse_args(argv)
    CalculatorWindow(title=options.title).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())