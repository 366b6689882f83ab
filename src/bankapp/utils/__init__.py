"""Utility functions for bankapp."""
