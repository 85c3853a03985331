"""Ledger services: categories, transactions and summaries."""
