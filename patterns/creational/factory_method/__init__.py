"""Factory Method pattern examples."""
