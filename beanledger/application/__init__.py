"""Application layer: ports, use cases and the ledger service."""
