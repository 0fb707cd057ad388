"""Library exceptions."""


class PyNotesException(Exception):
    """Generic pynotes exception."""


class PyNotesConfigError(PyNotesException):
    """The client was started without a usable configuration."""
