"""Supplier records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

from cadastroloja.store import Record, RecordFile


@dataclass
class Fornecedor(Record):
    """A supplier; id 0 marks a deleted record."""

    _FORMAT: ClassVar[str] = "<Q15s100s50s15s4x"
    _TEXT: ClassVar[dict[str, int]] = {
        "cnpj": 15,
        "nome": 100,
        "email": 50,
        "telefone": 15,
    }

    id: int = 0
    cnpj: str = ""
    nome: str = ""
    email: str = ""
    telefone: str = ""

    def pack(self) -> bytes:
        return super().pack()

    @classmethod
    def unpack(cls, data: bytes) -> "Fornecedor":
        return super().unpack(data)


class FornecedorFile(RecordFile[Fornecedor]):
    """File of supplier records."""

    def __init__(self, path) -> None:
        super().__init__(path, Fornecedor)

    def position_of_cnpj(self, cnpj: str) -> Optional[int]:
        return self.find(lambda f: f.cnpj == cnpj and f.id > 0)

    def position_of_name(self, nome: str) -> Optional[int]:
        return self.find(lambda f: f.nome == nome and f.id > 0)

    def position_of_name_prefix(self, prefix: str, start: int = 0) -> Optional[int]:
        return self.find(lambda f: f.nome.startswith(prefix) and f.id > 0, start)