"""Screens and UI helpers for the deck viewer."""
