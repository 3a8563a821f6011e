"""Flyweight pattern examples."""
