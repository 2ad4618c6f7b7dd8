"""Customer records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

from cadastroloja.store import Record, RecordFile


@dataclass
class Cliente(Record):
    """A customer; id 0 marks a deleted record."""

    _FORMAT: ClassVar[str] = "<Q100s12s50s15s7x"
    _TEXT: ClassVar[dict[str, int]] = {
        "nome": 100,
        "cpf": 12,
        "email": 50,
        "telefone": 15,
    }

    id: int = 0
    nome: str = ""
    cpf: str = ""
    email: str = ""
    telefone: str = ""

    def pack(self) -> bytes:
        return super().pack()

    @classmethod
    def unpack(cls, data: bytes) -> "Cliente":
        return super().unpack(data)


class ClienteFile(RecordFile[Cliente]):
    """File of customer records."""

    def __init__(self, path) -> None:
        super().__init__(path, Cliente)

    def position_of_cpf(self, cpf: str) -> Optional[int]:
        return self.find(lambda c: c.cpf == cpf and c.id > 0)

    def position_of_name_prefix(self, prefix: str, start: int = 0) -> Optional[int]:
        return self.find(lambda c: c.nome.startswith(prefix) and c.id > 0, start)