"""Singleton pattern examples."""
