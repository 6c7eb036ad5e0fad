"""Shared infrastructure: configuration, logging and the exception root."""
