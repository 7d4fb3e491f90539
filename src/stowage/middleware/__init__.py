"""Middleware: any ``async (request, next) -> Response`` callable."""

from stowage.middleware.protocol import Middleware, Next

__all__ = ["Middleware", "Next"]
