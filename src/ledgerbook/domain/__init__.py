"""Domain layer for ledgerbook application."""
