"""Memento pattern examples."""
