"""Observer pattern examples."""
