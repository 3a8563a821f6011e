"""Proxy pattern examples."""
