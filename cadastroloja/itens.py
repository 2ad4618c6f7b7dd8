"""Line items of purchase and sales invoices."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from cadastroloja.store import Record, RecordFile


@dataclass
class ItemNotaCompra(Record):
    """One product line of a purchase invoice."""

    _FORMAT: ClassVar[str] = "<QQQIf"

    id: int = 0
    id_produto: int = 0
    id_nota_compra: int = 0
    quantidade: int = 0
    valor_unitario: float = 0.0

    def pack(self) -> bytes:
        return super().pack()

    @classmethod
    def unpack(cls, data: bytes) -> "ItemNotaCompra":
        return super().unpack(data)


class ItemNotaCompraFile(RecordFile[ItemNotaCompra]):
    """File of purchase invoice items."""

    def __init__(self, path) -> None:
        super().__init__(path, ItemNotaCompra)


@dataclass
class ItemNotaFiscal(Record):
    """One product line of a sales invoice."""

    _FORMAT: ClassVar[str] = "<QQQfI"

    id: int = 0
    id_nota_fiscal: int = 0
    id_produto: int = 0
    valor_venda: float = 0.0
    quantidade: int = 0

    def pack(self) -> bytes:
        return super().pack()

    @classmethod
    def unpack(cls, data: bytes) -> "ItemNotaFiscal":
        return super().unpack(data)


class ItemNotaFiscalFile(RecordFile[ItemNotaFiscal]):
    """File of sales invoice items."""

    def __init__(self, path) -> None:
        super().__init__(path, ItemNotaFiscal)