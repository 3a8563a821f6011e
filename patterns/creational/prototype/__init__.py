"""Prototype pattern examples."""
