"""Errors and settings."""
