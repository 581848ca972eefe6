"""Unit tests for japm models."""
