"""Presentation layer - CLI and HTTP service."""
