"""Unit tests for japm utils."""
