"""
Core exceptions for the error loader.

This module defines a hierarchy of custom exceptions so callers can tell
their own mistakes apart from configuration, network and upstream data
failures.
"""


class ErrorLoaderError(Exception):
    """Base exception for all component-specific errors."""
    pass


class InvalidArgumentError(ErrorLoaderError, ValueError):
    """Raised when a caller passes a missing or unusable fault identifier."""
    pass


# --- Configuration Errors ---

class ConfigurationError(ErrorLoaderError):
    """Raised for errors related to application configuration."""
    pass


# --- Infrastructure Errors ---

class InfrastructureError(ErrorLoaderError):
    """Base class for errors related to external systems (network, API, etc.)."""
    pass


class NetworkError(InfrastructureError):
    """Raised when an HTTP call to Honeybadger cannot complete."""
    pass


# --- Domain Errors ---

class DomainError(ErrorLoaderError):
    """Base class for errors in the data returned by Honeybadger."""
    pass


class MalformedResponseError(DomainError):
    """Raised when a fault payload does not have the expected shape."""
    pass


class MalformedRedirectError(MalformedResponseError):
    """Raised when a redirect location has too few path segments."""
    pass
