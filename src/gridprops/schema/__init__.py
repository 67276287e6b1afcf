"""Structured data containers shared across gridprops."""
