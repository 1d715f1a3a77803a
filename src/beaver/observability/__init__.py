"""Observability – internal diagnostics for beaver components."""
