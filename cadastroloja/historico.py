"""Price history entries for products."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from cadastroloja.store import Record


@dataclass
class HistoricoPreco(Record):
    """A product's price as of a change date (dd/mm/yyyy)."""

    _FORMAT: ClassVar[str] = "<Q11sxf"
    _TEXT: ClassVar[dict[str, int]] = {"data_alteracao": 11}

    id_produto: int = 0
    data_alteracao: str = ""
    valor: float = 0.0

    def pack(self) -> bytes:
        return super().pack()

    @classmethod
    def unpack(cls, data: bytes) -> "HistoricoPreco":
        return super().unpack(data)