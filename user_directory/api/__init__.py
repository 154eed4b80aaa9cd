"""
API layer for the User Directory service.

Exposes HTTP endpoints for registration, login and user lookup, plus the
exception handlers that wrap every failure in the response envelope.
"""
