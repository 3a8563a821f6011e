"""Abstract Factory pattern examples."""
