"""Infrastructure Layer — database sessions, logging, HTTP client, notifications.

Invariants:
    - Implements the Protocols declared in core/repository_protocols.py
    - Only layer that talks to SQLAlchemy engines or network transports
"""
