"""Packaged default configuration for intent-locale."""
