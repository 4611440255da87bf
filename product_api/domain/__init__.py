"""Domain types and pure helpers for product records."""
