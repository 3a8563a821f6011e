"""Iterator pattern examples."""
