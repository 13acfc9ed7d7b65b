"""Application-level exception types for dbrowser."""

from __future__ import annotations


class DBrowserError(Exception):
    """Base exception for dbrowser."""


class ConfigurationError(DBrowserError):
    """Raised when plugins or settings cannot produce a usable environment."""


class SessionInitError(DBrowserError):
    """Raised when a debot cannot be discovered, fetched or started."""


class RoutingError(DBrowserError):
    """Raised when a message cannot be routed to a session or interface."""


class EngineError(DBrowserError):
    """Raised when a debot engine fails to handle a message or an action."""


class ExecutionError(DBrowserError):
    """Raised when a local interface fails to execute a call."""


class CredentialError(DBrowserError):
    """Raised when no signing credential can be produced."""
