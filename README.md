# cadastroloja

Storage layer for a small store. Each kind of record is kept in its own binary file of fixed-size slots, and a record is addressed by its slot position. Deleting a record leaves it in place with its id set to 0. Such a slot counts as free.

## Record types

| Module | Record | File class |
| --- | --- | --- |
| `cadastroloja.cliente` | `Cliente` | `ClienteFile` |
| `cadastroloja.fornecedor` | `Fornecedor` | `FornecedorFile` |
| `cadastroloja.produto` | `Produto` | `ProdutoFile` |
| `cadastroloja.vendedor` | `Vendedor` | `VendedorFile` |
| `cadastroloja.compra` | `NotaCompra` | `NotaCompraFile` |
| `cadastroloja.venda` | `NotaFiscal` | `NotaFiscalFile` |
| `cadastroloja.itens` | `ItemNotaCompra`, `ItemNotaFiscal` | `ItemNotaCompraFile`, `ItemNotaFiscalFile` |
| `cadastroloja.historico` | `HistoricoPreco` | — |

Records are dataclasses built on `cadastroloja.store.Record`. Each one has:

- `size()`: the fixed number of bytes the record takes on disk.
- `pack()`: returns the record as bytes.
- `unpack(data)`: builds a record from bytes. It raises `ValueError` if `data` is not exactly `size()` bytes long.

Numbers are stored little-endian. Text fields are UTF-8 and padded with NUL bytes to the width of their field. Each text field keeps one byte for the terminating NUL, so the encoded text must be shorter than the field. `pack()` raises `ValueError` when:

- a text value is too long for its field,
- a text value contains a NUL character,
- a number does not fit its field.

The helpers `encode_text(value, capacity)` and `decode_text(raw)` in `cadastroloja.store` do the text encoding and decoding.

## Usage

```python
from cadastroloja.produto import Produto, ProdutoFile

with ProdutoFile("produtos.dat") as produtos:
    new_id = produtos.next_id()
    produtos.write(Produto(new_id, "Caderno", 10, 12.5), new_id - 1)

    pos = produtos.position_of_name_prefix("Cad", 0)
    if pos is not None:
        item = produtos.read(pos)
        produtos.delete(pos)

    print(produtos.count_valid())
```

Opening a file class opens the file at the given path for reading and writing, and creates the file if it does not exist. Use the object as a context manager, or call `close()` when you are done with it.

### `RecordFile`

`cadastroloja.store.RecordFile` is the base of every file class. It provides:

- `next_id()`: one past the position of the first free slot. If there is no free slot, it returns the number of slots plus one.
- `read(position)`: the record at `position`. Raises `IndexError` if there is no slot there.
- `write(record, position)`: stores `record` at `position` and grows the file if needed. Raises `ValueError` for a negative position.
- `find(predicate, start=0)`: the position of the first record from `start` onward for which `predicate` is true, or `None`.
- `position_of_id(record_id)`: the position of the record with that id, or `None`.
- `delete(position)`: sets the id of the record at `position` to 0.
- `count_valid()`: the number of records whose id is not 0.
- Iterating over the file yields every record, free slots included.
- `len()`: the number of slots in the file.

### Searches by field

The file classes add searches by field. Each search skips free slots and returns a position or `None`:

- `ClienteFile.position_of_cpf`
- `ClienteFile.position_of_name_prefix`
- `FornecedorFile.position_of_cnpj`
- `FornecedorFile.position_of_name`
- `FornecedorFile.position_of_name_prefix`
- `ProdutoFile.position_of_name_prefix`
- `VendedorFile.position_of_cpf`
- `VendedorFile.position_of_email`
- `VendedorFile.position_of_name_prefix`

`VendedorFile.check_password(position, password)` tells whether `password` equals the one stored for the salesperson at `position`. Passwords are stored as plain text.

## What this package does not do

This package only reads and writes record files. It has:

- no command or interactive menus,
- no sales or purchase workflow: nothing updates stock or writes invoice items for you,
- no reports,
- no price-change operations,
- no file class for `HistoricoPreco` records.

## Tests

```
pip install -e .[test]
pytest
```