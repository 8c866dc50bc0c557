# datacontainer/__init__.py
"""
datacontainer – Generic dot-path addressable data container.

Import `DataContainer` from `datacontainer.container` and the errors from
`datacontainer.exceptions`. `datacontainer.utils` holds the key
classification helpers (`is_associative`, `is_sequential`).
"""

from .container import DataContainer, deep_merge
from .exceptions import DataContainerError, InvalidArgument, KeyNotFound, ReadOnlyViolation
from .utils import is_associative

__version__ = "0.1.0"

__all__ = [
    "DataContainer",
    "DataContainerError",
    "InvalidArgument",
    "KeyNotFound",
    "ReadOnlyViolation",
    "deep_merge",
    "is_associative",
]
