"""Define a parser for the textual form of motion commands.

Grammar (fields are whitespace-separated and appear in exactly this order):

    LIN X<num> Y<num> Z<num>
    CW  X<num> Y<num> Z<num> I<num> J<num> K<num>
    CCW X<num> Y<num> Z<num> I<num> J<num> K<num>

Each <num> is a signed decimal number such as `5`, `-2.5`, `+.75` or `3.`.
"""

from __future__ import annotations

import re

from walker_motion.commands.commands import Command, LinearCMMD, RotationalCMMD
from walker_motion.commands.errors import CommandParseError, InvalidCommandError

NUMBER_PATTERN = r"[-+]?(?:\d+(?:\.\d*)?|\.\d+)"
"""Signed decimal number without exponent, infinity, or NaN."""

FIELD_LETTERS = {
    "LIN": ("X", "Y", "Z"),
    "CW": ("X", "Y", "Z", "I", "J", "K"),
    "CCW": ("X", "Y", "Z", "I", "J", "K"),
}
"""Maps each command keyword to the field letters it expects, in order."""

_FIELD_RES = {
    letter: re.compile(rf"\A{letter}({NUMBER_PATTERN})\Z", flags=re.ASCII)
    for letter in ("X", "Y", "Z", "I", "J", "K")
}


def _parse_field(token: str, letter: str, text: str) -> float:
    """Parse a single `<letter><num>` token into its numeric value."""
    match = _FIELD_RES[letter].match(token)
    if not match:
        raise CommandParseError(f"Expected field {letter}<number> but found '{token}' in: '{text}'")
    return float(match.group(1))


def parse_command(text: str) -> Command:
    """Parse a single line of text into a motion command.

    :param text: Line such as 'LIN X5 Y0 Z0' or 'CW X7.5 Y7.5 Z5 I1.25 J1.25 K5'
    :return: Constructed linear or rotational command
    :raises CommandParseError: If the text is empty, uses an unknown keyword, has missing,
        extra, or malformed fields, or describes an arc whose Z differs from its K
    """
    tokens = text.split()
    if not tokens:
        raise CommandParseError("Cannot parse a command from empty or whitespace-only text.")

    keyword, fields = tokens[0], tokens[1:]
    if keyword not in FIELD_LETTERS:
        raise CommandParseError(f"Unrecognized command keyword '{keyword}' in: '{text}'")

    letters = FIELD_LETTERS[keyword]
    if len(fields) != len(letters):
        raise CommandParseError(
            f"Command {keyword} expects {len(letters)} fields, got {len(fields)} in: '{text}'",
        )

    values = [_parse_field(token, letter, text) for token, letter in zip(fields, letters)]

    try:
        if keyword == "LIN":
            return LinearCMMD.new(*values)
        return RotationalCMMD.new(keyword == "CCW", *values)
    except InvalidCommandError as error:
        raise CommandParseError(f"Invalid command '{text}': {error}") from error
