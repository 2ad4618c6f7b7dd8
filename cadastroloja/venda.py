"""Sales invoices issued to customers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from cadastroloja.store import Record, RecordFile


@dataclass
class NotaFiscal(Record):
    """A sales invoice: customer, salesperson, date (dd/mm/yyyy) and total."""

    _FORMAT: ClassVar[str] = "<QQQ11sxf"
    _TEXT: ClassVar[dict[str, int]] = {"data_compra": 11}

    id: int = 0
    id_cliente: int = 0
    id_vendedor: int = 0
    data_compra: str = ""
    valor_total: float = 0.0

    def pack(self) -> bytes:
        return super().pack()

    @classmethod
    def unpack(cls, data: bytes) -> "NotaFiscal":
        return super().unpack(data)


class NotaFiscalFile(RecordFile[NotaFiscal]):
    """File of sales invoices."""

    def __init__(self, path) -> None:
        super().__init__(path, NotaFiscal)