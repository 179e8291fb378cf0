"""Application layer: vision store, DTOs and use cases."""
