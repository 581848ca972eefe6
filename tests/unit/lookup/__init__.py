"""Unit tests for japm lookup."""
