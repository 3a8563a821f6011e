"""Strategy pattern examples."""
