"""Errors raised while compiling specs into a template context.

Every error is a structural defect in the input specs, so none of them
are retried. Each carries the endpoint prefix and operation name (when
known) so the offending spec entry can be located.
"""

from __future__ import annotations


class CodegenError(Exception):
    """Base class for spec compilation failures."""

    def __init__(
        self,
        message: str,
        endpoint_prefix: str | None = None,
        operation: str | None = None,
    ) -> None:
        self.endpoint_prefix = endpoint_prefix
        self.operation = operation
        location = []
        if endpoint_prefix:
            location.append(f"service={endpoint_prefix}")
        if operation:
            location.append(f"operation={operation}")
        if location:
            message = f"{message} ({', '.join(location)})"
        super().__init__(message)


class MissingEndpointPrefix(CodegenError):
    """API spec has no metadata.endpointPrefix."""


class UnknownEndpoint(CodegenError):
    """Endpoint prefix is not in the endpoint catalog."""


class InconsistentGlobalEndpoint(CodegenError):
    """Endpoint is global but has no aws-global credential scope region."""


class MalformedUriTemplate(CodegenError):
    """A request URI placeholder cannot be parsed or bound to a parameter."""


class DuplicateFunctionName(CodegenError):
    """Two operations normalize to the same function name."""
