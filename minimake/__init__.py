"""Small tools for preprocessing, checking, running and graphing Makefiles."""

__version__ = "0.1.0"