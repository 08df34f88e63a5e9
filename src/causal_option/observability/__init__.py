"""Observability – logging for the option kernel and codec."""
