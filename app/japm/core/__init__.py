"""Core transaction engine for japm: resolution, build and commit."""
