"""Unit tests for japm core."""
