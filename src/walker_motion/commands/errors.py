"""Define the exceptions raised while building, parsing, and interpolating commands."""


class InvalidCommandError(ValueError):
    """An error raised when a command is constructed from invalid numeric fields.

    This signals a caller contract violation (non-finite coordinates or an arc whose
    destination is off its plane); no command value is produced.
    """


class CommandParseError(ValueError):
    """An error raised when a line of text does not match the command grammar."""


class InterpolationError(Exception):
    """An error raised when a command cannot be interpolated from a given start point."""


class CenterCoincidentError(InterpolationError):
    """The start point projects onto the arc center, so the arc radius is undefined."""


class RadiusMismatchError(InterpolationError):
    """The start and destination do not lie on a common circle around the arc center."""


class ExtentOverflowError(InterpolationError):
    """The move spans a distance too large to represent as a finite float."""
