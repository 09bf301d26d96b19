"""Read-only HTTP API serving college listings from a CSV dataset."""
