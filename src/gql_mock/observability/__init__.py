"""Observability – logging ports used by the mock link."""
