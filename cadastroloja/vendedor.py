"""Salesperson records, with the password used to authorise sales."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Optional

from cadastroloja.store import Record, RecordFile


@dataclass
class Vendedor(Record):
    """A salesperson; id 0 marks a deleted record."""

    _FORMAT: ClassVar[str] = "<Q100s12s50s15s20s3x"
    _TEXT: ClassVar[dict[str, int]] = {
        "nome": 100,
        "cpf": 12,
        "email": 50,
        "telefone": 15,
        "password": 20,
    }

    id: int = 0
    nome: str = ""
    cpf: str = ""
    email: str = ""
    telefone: str = ""
    password: str = ""

    def pack(self) -> bytes:
        return super().pack()

    @classmethod
    def unpack(cls, data: bytes) -> "Vendedor":
        return super().unpack(data)


class VendedorFile(RecordFile[Vendedor]):
    """File of salesperson records."""

    def __init__(self, path) -> None:
        super().__init__(path, Vendedor)

    def position_of_cpf(self, cpf: str) -> Optional[int]:
        return self.find(lambda v: v.cpf == cpf and v.id > 0)

    def position_of_email(self, email: str) -> Optional[int]:
        return self.find(lambda v: v.email == email and v.id > 0)

    def position_of_name_prefix(self, prefix: str, start: int = 0) -> Optional[int]:
        return self.find(lambda v: v.nome.startswith(prefix) and v.id > 0, start)

    def check_password(self, position: int, password: str) -> bool:
        """True if ``password`` matches the one stored at ``position``."""
        return self.read(position).password == password