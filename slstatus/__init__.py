"""Status monitor that sets the X root window name or prints a status line."""

__version__ = "1.0"