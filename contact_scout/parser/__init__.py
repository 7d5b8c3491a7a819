"""Extraction of contact signals from HTML."""
