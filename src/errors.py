"""Typed domain failures raised by services and translated by routers."""

from enum import Enum
from typing import Any, Dict, Optional

class ErrorKind(str, Enum):
    """Closed set of domain failure kinds"""
    NOT_FOUND = "not_found"
    BUSINESS_RULE = "business_rule"

class ApplicationError(Exception):
    """Base class for failures a router maps to a status code."""

    kind: ErrorKind

    def __init__(self, message: str, **context: Any):
        super().__init__(message)
        self.message = message
        self.context: Dict[str, Any] = context

class NotFoundError(ApplicationError):
    """A referenced entity does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str = "No result for this search!", **context: Any):
        super().__init__(message, **context)

class BusinessRuleError(ApplicationError):
    """The request violates an eligibility rule."""

    kind = ErrorKind.BUSINESS_RULE

    def __init__(self, message: str = "Something out of the Business Rule", rule: Optional[str] = None, **context: Any):
        super().__init__(message, rule=rule, **context)
        self.rule = rule
