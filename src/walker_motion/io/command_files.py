"""Define functions to load programs of motion commands from text files."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from walker_motion.commands import Command, CommandParseError, parse_command
from walker_motion.io.logging import logger

if TYPE_CHECKING:
    from pathlib import Path

COMMENT_PREFIX = ";"
"""Lines beginning with this prefix (after whitespace) are ignored."""


@dataclass(frozen=True)
class ProgramLine:
    """A motion command parsed from one line of a program file."""

    line_number: int
    """One-based line number within the source file."""

    text: str
    command: Command


def load_commands(program_path: Path) -> list[ProgramLine]:
    """Load and parse every command in a program file.

    Blank lines and lines starting with ';' are skipped.

    :param program_path: Path to a text file with one command per line
    :return: Parsed commands in file order
    :raises FileNotFoundError: If the program file doesn't exist
    :raises CommandParseError: If any line fails to parse (the message names the line)
    """
    if not program_path.exists():
        raise FileNotFoundError(f"Cannot load commands from nonexistent file: {program_path}")

    program: list[ProgramLine] = []
    with program_path.open() as program_file:
        for line_number, line in enumerate(program_file, start=1):
            text = line.strip()
            if not text or text.startswith(COMMENT_PREFIX):
                continue

            try:
                command = parse_command(text)
            except CommandParseError as error:
                raise CommandParseError(f"{program_path}:{line_number}: {error}") from error

            program.append(ProgramLine(line_number, text, command))

    logger.debug("Loaded %d commands from %s.", len(program), program_path)
    return program
