"""Ports — abstract contracts implemented by infrastructure adapters."""
