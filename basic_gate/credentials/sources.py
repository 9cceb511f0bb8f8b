"""
Concrete credential sources.

    ListSource  explicit records given in code
    FileSource  UTF-8 text file, one `username:password` per line
    EnvSource   environment variable, entries joined by ";"

Malformed entries (no colon, empty username or empty password) are skipped
silently and counted in `skipped`.
"""

import os
from typing import Iterable, Iterator, List, Mapping, Tuple, Union

from ..errors import SourceUnreadable, UnknownCredentialSource
from .base import BaseCredentialSource, Credential, parse_entry

DEFAULT_CREDENTIALS_ENV = "BASIC_AUTH_CREDENTIALS"
ENV_SEPARATOR = ";"

RecordLike = Union[Credential, Mapping[str, str], Tuple[str, str]]


def _coerce_record(record: RecordLike) -> Credential:
    if isinstance(record, Credential):
        return record
    if isinstance(record, Mapping):
        try:
            return Credential(username=record["username"], password=record["password"])
        except KeyError as e:
            raise UnknownCredentialSource(f"Credential record missing key: {e.args[0]!r}") from e
    if isinstance(record, tuple) and len(record) == 2:
        return Credential(username=record[0], password=record[1])
    raise UnknownCredentialSource(f"Unsupported credential record: {type(record).__name__}")


class ListSource(BaseCredentialSource):
    """Credentials supplied inline, in order."""

    def __init__(self, records: Iterable[RecordLike]):
        # Coerce eagerly so a bad record fails at setup, not at load time
        self.records: List[Credential] = [_coerce_record(r) for r in records]

    def load(self) -> Iterator[Credential]:
        self.skipped = 0
        return iter(self.records)

    def describe(self) -> str:
        return f"list[{len(self.records)}]"


class FileSource(BaseCredentialSource):
    def __init__(self, path: Union[str, "os.PathLike[str]"]):
        self.path = os.fspath(path)

    def load(self) -> Iterator[Credential]:
        """
        Read the whole file up front and yield parsed lines.

        Raises:
            SourceUnreadable: Missing file, permission error, or invalid UTF-8.
        """
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                lines = f.read().splitlines()
        except (OSError, UnicodeDecodeError) as e:
            raise SourceUnreadable(self.path, str(e)) from e

        return self._parse(lines)

    def _parse(self, lines: List[str]) -> Iterator[Credential]:
        self.skipped = 0
        for line in lines:
            if not line.strip():
                continue
            cred = parse_entry(line)
            if cred is None:
                self.skipped += 1
                continue
            yield cred

    def describe(self) -> str:
        return f"file:{self.path}"


class EnvSource(BaseCredentialSource):
    """
    Credentials from an environment variable such as
    BASIC_AUTH_CREDENTIALS="alice:secret;bob:1234".

    An unset variable is not an error; it yields no credentials.
    """

    def __init__(self, name: str = DEFAULT_CREDENTIALS_ENV):
        self.name = name

    def load(self) -> Iterator[Credential]:
        # Read env now, not at import time, so tests can monkeypatch it
        raw = os.getenv(self.name, "")
        self.skipped = 0
        for entry in raw.split(ENV_SEPARATOR):
            if not entry.strip():
                continue
            cred = parse_entry(entry)
            if cred is None:
                self.skipped += 1
                continue
            yield cred

    def describe(self) -> str:
        return f"env:{self.name}"
