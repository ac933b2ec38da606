"""izn configuration file parser."""

import sys

from izn.document import Document
from izn.errors import CannotOpenError, ParseError, TypeMismatchError
from izn.logger import configure_logger
from izn.parser import IznParser, parse, parse_string
from izn.values import ScalarValue, ValueKind, infer_value
from izn.version import version

assert sys.version_info >= (3, 10), "Python 3.10 or greater is required."

__version__ = version()

__all__ = [
    "CannotOpenError",
    "Document",
    "IznParser",
    "ParseError",
    "ScalarValue",
    "TypeMismatchError",
    "ValueKind",
    "configure_logger",
    "infer_value",
    "parse",
    "parse_string",
]
