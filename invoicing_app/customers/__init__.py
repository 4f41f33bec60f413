from invoicing_app.customers.observers import InvoiceCreatedObserver

__all__ = ["InvoiceCreatedObserver"]
