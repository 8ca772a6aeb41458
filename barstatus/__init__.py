"""Status-line monitor that gathers system information for window manager bars."""

__version__ = "1.0.0"