"""Fixed-size binary record files for a small store's customers, suppliers, products, salespeople, invoices and price history."""

__version__ = "0.1.0"