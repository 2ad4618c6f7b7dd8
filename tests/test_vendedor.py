import pytest

from cadastroloja.vendedor import Vendedor, VendedorFile

PASSWORD = "password"


def _vendedor(id_, nome, cpf, email, password=PASSWORD):
    return Vendedor(
        id=id_, nome=nome, cpf=cpf, email=email, telefone="tel-1", password=password
    )


@pytest.fixture
def vendedores(tmp_path):
    with VendedorFile(tmp_path / "vendedores.bin") as f:
        f.write(_vendedor(1, "Ana Lima", "cpf-a", "ana@example.com"), 0)
        f.write(_vendedor(2, "Bruno Dias", "cpf-b", "bruno@example.com"), 1)
        f.write(_vendedor(3, "Ana Souza", "cpf-c", "souza@example.com"), 2)
        yield f


def test_round_trip():
    v = _vendedor(7, "Carla", "cpf-x", "carla@example.com")
    assert Vendedor.unpack(v.pack()) == v


def test_password_too_long_rejected():
    v = _vendedor(1, "Ana", "cpf-a", "ana@example.com", password=PASSWORD * 3)
    with pytest.raises(ValueError):
        v.pack()


def test_position_of_cpf(vendedores):
    assert vendedores.position_of_cpf("cpf-b") == 1
    assert vendedores.position_of_cpf("missing") is None


def test_position_of_email(vendedores):
    assert vendedores.position_of_email("souza@example.com") == 2
    assert vendedores.position_of_email("nobody@example.com") is None


def test_name_prefix_search_from_start(vendedores):
    first = vendedores.position_of_name_prefix("Ana")
    assert first == 0
    assert vendedores.position_of_name_prefix("Ana", first + 1) == 2
    assert vendedores.position_of_name_prefix("Ana", 3) is None


def test_deleted_records_not_found(vendedores):
    vendedores.delete(1)
    assert vendedores.position_of_cpf("cpf-b") is None
    assert vendedores.position_of_email("bruno@example.com") is None
    assert vendedores.count_valid() == 2
    assert vendedores.next_id() == 2


def test_check_password(vendedores):
    password = PASSWORD
    wrong = "secret"
    assert vendedores.check_password(0, password) is True
    assert vendedores.check_password(0, wrong) is False


def test_check_password_out_of_range(vendedores):
    with pytest.raises(IndexError):
        vendedores.check_password(10, PASSWORD)


def test_persistence(tmp_path):
    path = tmp_path / "v.bin"
    v = _vendedor(1, "Ana", "cpf-a", "ana@example.com")
    with VendedorFile(path) as f:
        f.write(v, 0)
    with VendedorFile(path) as f:
        assert f.read(0) == v
        assert len(f) == 1