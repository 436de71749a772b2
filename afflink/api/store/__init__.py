"""Persistence gateway for assigned links."""
