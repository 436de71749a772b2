"""Affiliate link scanning, slug assignment and content rewriting."""

__version__ = "0.1.0"
