"""Split a raw argument string into arguments, honoring double-quoted spans."""

from __future__ import annotations

QUOTE = '"'


def tokenize(raw: str) -> list[str]:
    """Split ``raw`` on whitespace outside of double quotes.

    Quote characters toggle the quoted state and are not kept in the output,
    so ``'"a b" c'`` becomes ``["a b", "c"]``. An unterminated quote runs to
    the end of the input. Runs of whitespace never produce empty arguments.

    Examples:
        >>> tokenize('--name "John Doe" -v')
        ['--name', 'John Doe', '-v']

        >>> tokenize("   ")
        []
    """
    tokens: list[str] = []
    current: list[str] = []
    in_quotes = False

    for char in raw:
        if char == QUOTE:
            in_quotes = not in_quotes
        elif char.isspace() and not in_quotes:
            if current:
                tokens.append("".join(current))
                current = []
        else:
            current.append(char)

    if current:
        tokens.append("".join(current))

    return tokens
