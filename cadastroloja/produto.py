"""Product records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

from cadastroloja.store import Record, RecordFile


@dataclass
class Produto(Record):
    """A product with its stock and unit price; id 0 marks a deleted record."""

    _FORMAT: ClassVar[str] = "<Q100sIf4x"
    _TEXT: ClassVar[dict[str, int]] = {"nome": 100}

    id: int = 0
    nome: str = ""
    quantidade_estoque: int = 0
    preco_unitario: float = 0.0

    def pack(self) -> bytes:
        return super().pack()

    @classmethod
    def unpack(cls, data: bytes) -> "Produto":
        return super().unpack(data)


class ProdutoFile(RecordFile[Produto]):
    """File of product records."""

    def __init__(self, path) -> None:
        super().__init__(path, Produto)

    def position_of_name_prefix(self, prefix: str, start: int = 0) -> Optional[int]:
        return self.find(lambda p: p.nome.startswith(prefix) and p.id > 0, start)