"""Shared helpers for forge-levels."""
