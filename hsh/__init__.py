"""hsh: a small command interpreter that runs one command per line."""

__version__ = "0.1.0"
