"""Configuration, logging, data loading and HTTP plumbing."""
