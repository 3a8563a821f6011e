"""Chain of Responsibility pattern examples."""
