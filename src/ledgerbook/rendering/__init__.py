"""Statement rendering: formatting helpers and the ledger template model."""
