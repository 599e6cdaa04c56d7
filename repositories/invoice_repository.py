"""
Invoice Repository - Data access layer for invoices
"""

from repositories.base import BaseRepository


class InvoiceRepository(BaseRepository):
    id_field = "invoice_id"
