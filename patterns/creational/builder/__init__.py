"""Builder pattern examples."""
