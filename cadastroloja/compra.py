"""Purchase invoices received from suppliers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from cadastroloja.store import Record, RecordFile


@dataclass
class NotaCompra(Record):
    """A purchase invoice: supplier, date (dd/mm/yyyy) and total value."""

    _FORMAT: ClassVar[str] = "<QQ11sxf"
    _TEXT: ClassVar[dict[str, int]] = {"data_compra": 11}

    id: int = 0
    id_fornecedor: int = 0
    data_compra: str = ""
    valor_total: float = 0.0

    def pack(self) -> bytes:
        return super().pack()

    @classmethod
    def unpack(cls, data: bytes) -> "NotaCompra":
        return super().unpack(data)


class NotaCompraFile(RecordFile[NotaCompra]):
    """File of purchase invoices."""

    def __init__(self, path) -> None:
        super().__init__(path, NotaCompra)