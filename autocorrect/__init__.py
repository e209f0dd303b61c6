"""Dictionary-based spelling correction by edit distance, with a WSGI web form."""

__version__ = "0.1.0"