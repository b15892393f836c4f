"""Shared infrastructure: environment parsing, settings and logging setup."""
