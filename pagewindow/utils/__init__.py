"""Shared helpers for error messages and response formatting."""
