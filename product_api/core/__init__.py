"""
Core utilities shared across the product API.

- configuration helpers (fixed listen address, data file, toggles)
- logging setup (logging_config)
- the error taxonomy and its JSON rendering
"""
