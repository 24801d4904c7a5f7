"""Application layer — use cases and user-facing messages."""
