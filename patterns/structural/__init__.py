"""Structural patterns: how objects are composed."""
