"""Local HTTP log proxy that prints client log messages to the terminal."""

__version__ = "1.0.0"
