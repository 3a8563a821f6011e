"""Bridge pattern examples."""
