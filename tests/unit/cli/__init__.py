"""Unit tests for japm cli."""
