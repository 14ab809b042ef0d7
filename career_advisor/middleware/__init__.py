# Middleware Package
# Request hooks for cross-cutting concerns, registered by the app factory.

from .request_logging import register_request_logging

__all__ = ['register_request_logging']
