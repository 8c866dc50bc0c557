# datacontainer/exceptions.py
"""
datacontainer.exceptions
------------------------

Custom exceptions for datacontainer.
"""


class DataContainerError(Exception):
    """
    Base class for every error raised by datacontainer.
    """


class ReadOnlyViolation(DataContainerError, RuntimeError):
    """
    Raised when a mutating operation is attempted on a read-only container.
    """

    def __init__(self, message="Changing values on this data container is not allowed."):
        super().__init__(message)


class InvalidArgument(DataContainerError, TypeError):
    """
    Raised when `merge` or `set_contents` receives something that is neither a
    mapping nor a container.
    """

    def __init__(self, argument):
        super().__init__(
            f"Expected a mapping or DataContainer instance, "
            f"got {type(argument).__name__}"
        )
        self.argument = argument


class KeyNotFound(DataContainerError, KeyError):
    """
    Raised by indexed read access (`container[key]`) on a missing key.
    """

    def __init__(self, key):
        super().__init__(f"Access to undefined index: {key}")
        self.key = key

    def __str__(self):
        # KeyError quotes its argument; keep the message readable
        return self.args[0]
