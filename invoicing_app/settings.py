import os

from sea.settings.base import Settings


class InvoicingSettings(Settings):
    """Settings for the invoicing demo on top of sea's defaults."""

    def __init__(self) -> None:
        super().__init__()
        self.environment = os.environ.get("SEA_ENV", "invoicing")
        self.database_url = os.environ.get(
            "INVOICING_DATABASE_URL", "sqlite:///invoicing.db"
        )

        self.INSTALLED_SIGNALS = [
            "invoicing_app.sales.signals.InvoiceCreatedSignal",
        ] + self.INSTALLED_SIGNALS

    def validate(self) -> dict:
        errors = super().validate()
        if not self.database_url:
            errors["database"] = "Missing database configuration (INVOICING_DATABASE_URL)"
        return errors


settings = InvoicingSettings()
