"""
Use cases for the product API.

Routers call these services instead of touching the persistence adapter
directly; the adapter is handed to the service when the app is built.
"""
