import pytest

from cadastroloja.venda import NotaFiscal, NotaFiscalFile


def test_round_trip():
    nota = NotaFiscal(id=2, id_cliente=5, id_vendedor=6, data_compra="15/08/2022", valor_total=99.75)
    assert NotaFiscal.unpack(nota.pack()) == nota


def test_size_and_layout():
    data = NotaFiscal(id=1, id_cliente=2, id_vendedor=3, data_compra="15/08/2022").pack()
    assert NotaFiscal.size() == 40
    assert len(data) == NotaFiscal.size()
    assert data[16:24] == (3).to_bytes(8, "little")
    assert data[24:34] == b"15/08/2022"


def test_negative_id_rejected():
    with pytest.raises(ValueError):
        NotaFiscal(id=-1).pack()


def test_file_reuses_first_free_slot(tmp_path):
    with NotaFiscalFile(tmp_path / "vendas.bin") as f:
        for position in range(3):
            f.write(NotaFiscal(id=f.next_id(), data_compra="01/01/2024"), position)
        assert f.count_valid() == 3
        f.delete(1)
        assert f.next_id() == 2
        assert f.position_of_id(3) == 2
        assert f.read(1).id == 0


def test_read_missing_position(tmp_path):
    with NotaFiscalFile(tmp_path / "vendas.bin") as f:
        with pytest.raises(IndexError):
            f.read(0)