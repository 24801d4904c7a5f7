"""Presentation layer — user-facing interfaces."""
