"""Observability – logging for the hook SDK."""
