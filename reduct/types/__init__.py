"""Immutable value model: Symbol, String, Placeholder and Table."""
