"""Tests for japm."""
