"""State pattern examples."""
