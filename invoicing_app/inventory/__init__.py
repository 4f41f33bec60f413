from invoicing_app.inventory.observers import InvoiceCreatedObserver

__all__ = ["InvoiceCreatedObserver"]
