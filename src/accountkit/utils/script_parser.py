"""Parser for account session scripts.

A script is plain text with one command per line::

    # comment
    open savings 4432 "Emre Bilir" 1000 interest_rate=2.5 minimum_balance=400
    withdraw #4432 500
    interest 4432
    display 4432
    compare 2334 4432
    total
    close 4432

Blank lines and lines starting with ``#`` are skipped. Arguments are split
with shell quoting rules, so holder names with spaces must be quoted.
"""

import shlex
from dataclasses import dataclass, field

from accountkit.domain.account import ACCOUNT_TERMS
from accountkit.domain.errors import ValidationError

# Command name -> positional argument names
COMMANDS: dict[str, tuple[str, ...]] = {
    "open": ("kind", "number", "holder", "balance"),
    "deposit": ("account", "amount"),
    "withdraw": ("account", "amount"),
    "interest": ("account",),
    "display": ("account",),
    "balance": ("account",),
    "compare": ("account", "other"),
    "close": ("account",),
    "list": (),
    "total": (),
}

# Account terms accepted as key=value tokens on "open"
TERM_NAMES = frozenset().union(*ACCOUNT_TERMS.values())


def _term_key(token: str) -> str | None:
    key, sep, _ = token.partition("=")
    key = key.strip().replace("-", "_")
    return key if sep and key in TERM_NAMES else None


@dataclass(frozen=True)
class ScriptCommand:
    """One parsed script line."""

    line_number: int
    name: str
    args: dict[str, str]
    terms: dict[str, str] = field(default_factory=dict)


def parse_script_line(line: str, line_number: int) -> ScriptCommand | None:
    """Parse one script line.

    Args:
        line: Raw line text
        line_number: 1-based line number, used in error messages

    Returns:
        ScriptCommand, or None for blank and comment lines

    Raises:
        ValidationError: If the line is not a valid command
    """
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None

    try:
        tokens = shlex.split(stripped)
    except ValueError as e:
        raise ValidationError(f"line {line_number}: {e}") from None

    name = tokens[0].lower()
    if name not in COMMANDS:
        raise ValidationError(f"line {line_number}: unknown command '{tokens[0]}'")

    # Other tokens with "=" are positional, e.g. a holder named "A=B Ltd"
    positional = [t for t in tokens[1:] if _term_key(t) is None]
    keyword = [t for t in tokens[1:] if _term_key(t) is not None]

    expected = COMMANDS[name]
    if len(positional) != len(expected):
        usage = " ".join([name] + [arg.upper() for arg in expected])
        raise ValidationError(f"line {line_number}: expected '{usage}'")

    if keyword and name != "open":
        raise ValidationError(f"line {line_number}: '{name}' takes no key=value terms")

    terms = {}
    for token in keyword:
        terms[_term_key(token)] = token.partition("=")[2].strip()

    return ScriptCommand(
        line_number=line_number,
        name=name,
        args=dict(zip(expected, positional)),
        terms=terms,
    )


def parse_script(lines) -> list[ScriptCommand]:
    """Parse every line of a script, skipping blanks and comments."""
    commands = []
    for number, line in enumerate(lines, start=1):
        command = parse_script_line(line, number)
        if command is not None:
            commands.append(command)
    return commands
