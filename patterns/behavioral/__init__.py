"""Behavioral patterns: how objects share responsibility."""
