"""Fixed-size binary records kept in flat files, addressed by position."""

from __future__ import annotations

import dataclasses
import os
import struct
from pathlib import Path
from typing import Callable, ClassVar, Generic, Iterator, Optional, TypeVar

ENCODING = "utf-8"


def encode_text(value: str, capacity: int) -> bytes:
    """Encode text into a NUL-padded field of ``capacity`` bytes.

    One byte is always kept for the terminating NUL, so the encoded text
    must be shorter than ``capacity``.
    """
    raw = value.encode(ENCODING)
    if b"\0" in raw:
        raise ValueError("text fields cannot contain NUL characters")
    if len(raw) >= capacity:
        raise ValueError(
            f"text of {len(raw)} bytes does not fit in a field of {capacity} bytes"
        )
    return raw.ljust(capacity, b"\0")


def decode_text(raw: bytes) -> str:
    """Decode a NUL-terminated text field."""
    return raw.split(b"\0", 1)[0].decode(ENCODING, errors="replace")


class Record:
    """Base for dataclass records stored with a fixed binary layout.

    Subclasses are dataclasses whose fields appear in the same order as the
    values of ``_FORMAT``; text fields are listed in ``_TEXT`` with their
    capacity in bytes.
    """

    _FORMAT: ClassVar[str]
    _TEXT: ClassVar[dict[str, int]] = {}

    @classmethod
    def size(cls) -> int:
        """Number of bytes one record takes on disk."""
        return struct.calcsize(cls._FORMAT)

    def pack(self) -> bytes:
        """Serialise the record to its binary form."""
        values = []
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            if field.name in self._TEXT:
                value = encode_text(value, self._TEXT[field.name])
            values.append(value)
        try:
            return struct.pack(self._FORMAT, *values)
        except (struct.error, OverflowError) as exc:
            raise ValueError(f"cannot store {self!r}: {exc}") from exc

    @classmethod
    def unpack(cls, data: bytes):
        """Build a record from its binary form."""
        if len(data) != cls.size():
            raise ValueError(
                f"expected {cls.size()} bytes for {cls.__name__}, got {len(data)}"
            )
        values = struct.unpack(cls._FORMAT, data)
        kwargs = {
            field.name: decode_text(value) if field.name in cls._TEXT else value
            for field, value in zip(dataclasses.fields(cls), values)
        }
        return cls(**kwargs)


R = TypeVar("R", bound=Record)


class RecordFile(Generic[R]):
    """A file of fixed-size records; a record with id 0 is a free slot."""

    def __init__(self, path, record_type: type[R]) -> None:
        self.path = Path(path)
        self.record_type = record_type
        self._size = record_type.size()
        mode = "r+b" if self.path.exists() else "w+b"
        self._file = open(self.path, mode)

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> "RecordFile[R]":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def _scan(self, start: int = 0) -> Iterator[tuple[int, R]]:
        position = start
        while True:
            self._file.seek(position * self._size)
            chunk = self._file.read(self._size)
            if len(chunk) < self._size:
                return
            yield position, self.record_type.unpack(chunk)
            position += 1

    def __iter__(self) -> Iterator[R]:
        for _, record in self._scan():
            yield record

    def __len__(self) -> int:
        self._file.seek(0, os.SEEK_END)
        return self._file.tell() // self._size

    def read(self, position: int) -> R:
        """Return the record stored at ``position``."""
        if not 0 <= position < len(self):
            raise IndexError(f"no record at position {position}")
        self._file.seek(position * self._size)
        return self.record_type.unpack(self._file.read(self._size))

    def write(self, record: R, position: int) -> None:
        """Store ``record`` at ``position``, growing the file if needed."""
        if position < 0:
            raise ValueError("position must not be negative")
        data = record.pack()
        self._file.seek(position * self._size)
        self._file.write(data)
        self._file.flush()

    def next_id(self) -> int:
        """Id for a new record: one past the position of the first free slot."""
        for new_id, record in enumerate(self, start=1):
            if record.id == 0:
                return new_id
        return len(self) + 1

    def find(self, predicate: Callable[[R], bool], start: int = 0) -> Optional[int]:
        """Position of the first record from ``start`` on that matches, or None."""
        if start < 0:
            raise ValueError("start must not be negative")
        for position, record in self._scan(start):
            if predicate(record):
                return position
        return None

    def position_of_id(self, record_id: int) -> Optional[int]:
        return self.find(lambda record: record.id == record_id)

    def delete(self, position: int) -> None:
        """Mark the record at ``position`` as free by clearing its id."""
        record = self.read(position)
        self.write(dataclasses.replace(record, id=0), position)

    def count_valid(self) -> int:
        """Number of records that are not free slots."""
        return sum(1 for record in self if record.id)