import pytest

from cadastroloja.compra import NotaCompra, NotaCompraFile


def test_round_trip():
    nota = NotaCompra(id=3, id_fornecedor=9, data_compra="01/02/2023", valor_total=12.5)
    assert NotaCompra.unpack(nota.pack()) == nota


def test_size_and_id_bytes():
    nota = NotaCompra(id=1, id_fornecedor=2, data_compra="01/02/2023")
    data = nota.pack()
    assert NotaCompra.size() == 32
    assert data[:8] == (1).to_bytes(8, "little")
    assert data[8:16] == (2).to_bytes(8, "little")
    assert data[16:26] == b"01/02/2023"


def test_date_too_long_rejected():
    with pytest.raises(ValueError):
        NotaCompra(id=1, data_compra="01/02/20230").pack()


def test_unpack_wrong_length():
    with pytest.raises(ValueError):
        NotaCompra.unpack(b"\0" * 5)


def test_file_ids_and_lookup(tmp_path):
    with NotaCompraFile(tmp_path / "compras.bin") as f:
        assert f.next_id() == 1
        first = NotaCompra(id=f.next_id(), id_fornecedor=4, data_compra="10/05/2023", valor_total=2.5)
        f.write(first, 0)
        second = NotaCompra(id=f.next_id(), id_fornecedor=5, data_compra="11/05/2023", valor_total=4.0)
        f.write(second, 1)
        assert second.id == first.id + 1
        assert f.position_of_id(second.id) == 1
        assert f.read(1) == second
        assert f.position_of_id(99) is None
        assert list(f) == [first, second]