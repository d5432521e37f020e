"""Sólon portal backend."""
