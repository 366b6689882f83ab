"""CLI layer for bankapp application."""
