"""
User Directory Service root package.

FastAPI application (main.py) offering user registration, login and lookup
over an in-memory user directory, organised into core, domain,
infrastructure, application, dependency-injection and API layers.
"""
