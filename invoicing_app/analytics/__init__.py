from invoicing_app.analytics.observers import InvoiceCreatedObserver

__all__ = ["InvoiceCreatedObserver"]
