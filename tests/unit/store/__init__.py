"""Unit tests for japm store."""
