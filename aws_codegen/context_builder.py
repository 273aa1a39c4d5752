"""Build the template context from AWS API, doc and endpoint specs.

Resolves service-wide metadata (signing name, global endpoints), compiles
one Action per operation with the compiler for the service's protocol
kind, and assembles the Service record handed to the renderer.
"""

from __future__ import annotations

import logging
from typing import Any, Callable

from .docstring import format_docstring
from .errors import (
    DuplicateFunctionName,
    InconsistentGlobalEndpoint,
    MalformedUriTemplate,
    MissingEndpointPrefix,
    UnknownEndpoint,
)
from .loader import get_metadata, get_operations
from .models import ELIXIR, Action, ProtocolKind, Service
from .naming import to_snake_case
from .schema_parser import parse_parameters
from .uri import compile_path

logger = logging.getLogger(__name__)

# Endpoint catalog key holding the credential scope of global services
_GLOBAL_ENDPOINT = "aws-global"

# Client handle, input map, call options
_POST_ARITY = 3

# Verbs whose request carries no body; headers become call arguments
_BODYLESS_METHODS = {"GET"}


def _operation_doc(doc_spec: dict[str, Any], name: str) -> str | None:
    return doc_spec.get("operations", {}).get(name)


def compile_post_action(
    name: str,
    operation: dict[str, Any],
    api_spec: dict[str, Any],
    doc_spec: dict[str, Any],
    language: str,
) -> Action:
    """Compile an RPC-style operation: fixed arity, no transport binding."""
    return Action(
        arity=_POST_ARITY,
        docstring=format_docstring(language, _operation_doc(doc_spec, name)),
        function_name=to_snake_case(name),
        name=name,
        language=language,
    )


def compile_rest_action(
    name: str,
    operation: dict[str, Any],
    api_spec: dict[str, Any],
    doc_spec: dict[str, Any],
    language: str,
) -> Action:
    """Compile a REST operation with its path, header and status binding."""
    http = operation.get("http", {})
    method = http.get("method")
    request_uri = http.get("requestUri")

    url_parameters = parse_parameters(api_spec, operation, "input", "path", language)
    request_headers = parse_parameters(api_spec, operation, "input", "header", language)
    response_headers = parse_parameters(api_spec, operation, "output", "header", language)

    if request_uri is None:
        raise MalformedUriTemplate(
            "operation has no http.requestUri",
            get_metadata(api_spec).get("endpointPrefix"),
            name,
        )
    try:
        path = compile_path(request_uri, url_parameters)
    except MalformedUriTemplate as exc:
        raise MalformedUriTemplate(
            str(exc), get_metadata(api_spec).get("endpointPrefix"), name,
        ) from exc

    if method in _BODYLESS_METHODS:
        arity = len(url_parameters) + 2 + len(request_headers)
    else:
        arity = len(url_parameters) + 3

    return Action(
        arity=arity,
        docstring=format_docstring(language, _operation_doc(doc_spec, name)),
        function_name=to_snake_case(name),
        name=name,
        method=method,
        request_uri=request_uri,
        success_status_code=http.get("responseCode"),
        url_parameters=url_parameters,
        request_header_parameters=request_headers,
        response_header_parameters=response_headers,
        path=path,
        language=language,
    )


_ACTION_COMPILERS: dict[ProtocolKind, Callable[..., Action]] = {
    ProtocolKind.POST: compile_post_action,
    ProtocolKind.REST: compile_rest_action,
}


def compile_actions(
    protocol_kind: ProtocolKind,
    api_spec: dict[str, Any],
    doc_spec: dict[str, Any],
    language: str = ELIXIR,
) -> tuple[Action, ...]:
    """Compile every operation, sorted by function name."""
    compile_action = _ACTION_COMPILERS[protocol_kind]
    actions = []
    for name, operation in get_operations(api_spec).items():
        action = compile_action(name, operation, api_spec, doc_spec, language)
        logger.debug("compiled %s -> %s/%d", name, action.function_name, action.arity)
        actions.append(action)

    actions.sort(key=lambda a: a.function_name)
    for prev, action in zip(actions, actions[1:]):
        if prev.function_name == action.function_name:
            raise DuplicateFunctionName(
                f"{prev.name} and {action.name} both map to {action.function_name}",
                get_metadata(api_spec).get("endpointPrefix"),
                action.name,
            )
    return tuple(actions)


def resolve_signing_name(metadata: dict[str, Any], endpoint_prefix: str) -> str:
    """Use metadata.signingName when set, else the endpoint prefix."""
    return metadata.get("signingName") or endpoint_prefix


def resolve_credential_scope(
    endpoint_info: dict[str, Any], endpoint_prefix: str,
) -> tuple[bool, str | None]:
    """Return (is_global, credential_scope) for an endpoint catalog entry."""
    is_global = not endpoint_info.get("isRegionalized", True)
    if not is_global:
        return False, None

    region = (
        endpoint_info.get("endpoints", {})
        .get(_GLOBAL_ENDPOINT, {})
        .get("credentialScope", {})
        .get("region")
    )
    if not region:
        raise InconsistentGlobalEndpoint(
            f"global endpoint has no {_GLOBAL_ENDPOINT} credentialScope region",
            endpoint_prefix,
        )
    return True, region


def build_context(
    protocol_kind: ProtocolKind,
    module_name: str,
    endpoints_spec: dict[str, Any],
    api_spec: dict[str, Any],
    doc_spec: dict[str, Any],
    options: dict[str, Any] | None = None,
    language: str = ELIXIR,
) -> Service:
    """Build the full template context for one service."""
    metadata = get_metadata(api_spec)
    endpoint_prefix = metadata.get("endpointPrefix")
    if not endpoint_prefix:
        raise MissingEndpointPrefix("API spec has no metadata.endpointPrefix")

    endpoint_info = endpoints_spec.get("services", {}).get(endpoint_prefix)
    if endpoint_info is None:
        raise UnknownEndpoint("endpoint prefix not in endpoint catalog", endpoint_prefix)

    is_global, credential_scope = resolve_credential_scope(endpoint_info, endpoint_prefix)
    signing_name = resolve_signing_name(metadata, endpoint_prefix)
    actions = compile_actions(protocol_kind, api_spec, doc_spec, language)

    logger.info(
        "built %s context for %s (%d actions, global=%s)",
        protocol_kind.value, endpoint_prefix, len(actions), is_global,
    )

    return Service(
        module_name=module_name,
        endpoint_prefix=endpoint_prefix,
        signing_name=signing_name,
        protocol=metadata.get("protocol"),
        actions=actions,
        abbreviation=metadata.get("serviceAbbreviation"),
        api_version=metadata.get("apiVersion"),
        credential_scope=credential_scope,
        docstring=format_docstring(language, doc_spec.get("service")),
        is_global=is_global,
        json_version=metadata.get("jsonVersion"),
        target_prefix=metadata.get("targetPrefix"),
        language=language,
        options=options or {},
    )
