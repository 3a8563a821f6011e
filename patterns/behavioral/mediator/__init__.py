"""Mediator pattern examples."""
