"""Compile AWS API specs into template contexts for client code generation."""

from .codegen import generate, render
from .context_builder import build_context, compile_actions
from .models import Action, Parameter, ProtocolKind, Service, protocol_kind_for

__all__ = [
    "Action",
    "Parameter",
    "ProtocolKind",
    "Service",
    "build_context",
    "compile_actions",
    "generate",
    "protocol_kind_for",
    "render",
]
