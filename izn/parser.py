import os
from typing import IO, Iterable, Union

from izn.config import default_encoding
from izn.document import Document
from izn.errors import CannotOpenError
from izn.logger import logger
from izn.values import ScalarValue, infer_value

BLANKS = " \t"
COMMENT = "#"
SECTION_MARKER = "@"
SEPARATOR = ":"

Source = Union[str, "os.PathLike[str]", IO[str]]


class IznParser:
    def __init__(self, encoding: str | None = None):
        self.encoding = encoding or default_encoding()

    def parse(self, source: Source) -> Document:
        if isinstance(source, (str, os.PathLike)):
            return self.parse_file(source)
        return self.parse_stream(source)

    def parse_file(self, file_path: Union[str, "os.PathLike[str]"]) -> Document:
        try:
            # newline="" keeps "\r" on the line, it is not trimmed
            with open(file_path, "r", encoding=self.encoding, newline="") as f:
                text = f.read()
        except (OSError, UnicodeDecodeError, LookupError) as e:
            logger.debug(f"Failed to open file: {file_path}: {e}")
            raise CannotOpenError(os.fspath(file_path), str(e)) from e

        logger.debug(f"Parsing {file_path}")
        return self.parse_string(text)

    def parse_stream(self, stream: IO[str]) -> Document:
        try:
            text = stream.read()
        except (OSError, UnicodeDecodeError) as e:
            name = getattr(stream, "name", repr(stream))
            raise CannotOpenError(str(name), str(e)) from e
        return self.parse_string(text)

    def parse_string(self, text: str) -> Document:
        return self.parse_lines(text.split("\n"))

    def parse_lines(self, lines: Iterable[str]) -> Document:
        data: dict[str, dict[str, ScalarValue]] = {}
        current_section = ""

        for lineno, raw in enumerate(lines, start=1):
            line = raw.strip(BLANKS)
            if not line or line.startswith(COMMENT):
                continue

            if line.startswith(SECTION_MARKER):
                current_section = self._section_name(line)
                if current_section:
                    data.setdefault(current_section, {})
                continue

            key, sep, value = line.partition(SEPARATOR)
            if not sep:
                logger.debug(f"Ignoring line {lineno} without '{SEPARATOR}': {line!r}")
                continue
            if not current_section:
                logger.debug(f"Ignoring line {lineno} outside of any section: {line!r}")
                continue

            key = key.lstrip(BLANKS).rstrip(BLANKS + "?")
            data[current_section][key] = infer_value(value.strip(BLANKS))

        return Document(data)

    @staticmethod
    def _section_name(line: str) -> str:
        return line[len(SECTION_MARKER) :].strip(BLANKS).rstrip(SEPARATOR)


def parse(source: Source, encoding: str | None = None) -> Document:
    """Parse an izn file path or open text stream.

    Raises CannotOpenError when the source cannot be read; every other
    malformed line is skipped.

    A path is read with newline="", so a "\\r" before each "\\n" stays part
    of the line. A stream is read as given: one opened with the default
    newline=None has already turned "\\r\\n" into "\\n".
    """
    return IznParser(encoding).parse(source)


def parse_string(text: str) -> Document:
    return IznParser().parse_string(text)
