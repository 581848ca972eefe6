"""Unit tests for japm."""
