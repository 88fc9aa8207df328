"""
Dynamic call resolution for gapi.request.

Turns ("storage", "v1", "buckets.list") into a call on a discovery client:

    service.buckets().list(**parameters).execute()

Discovery resources are lazily-resolved nodes: every intermediate segment
is a collection method returning the child resource, the final segment is
an API method returning an HttpRequest. The walk checks each step
explicitly so a bad path fails at the exact segment that's missing.
"""

from fnmatch import fnmatchcase
from typing import Any, Callable, Sequence

from logging_config import logger
from models import InvalidMethodPathError, MethodNotAllowedError, NotCallableError


def method_allowed(api: str, version: str, method: str, patterns: Sequence[str]) -> bool:
    """Whether "{api}.{version}.{method}" matches any allow-list pattern."""
    target = f"{api}.{version}.{method}"
    return any(fnmatchcase(target, pattern) for pattern in patterns)


def check_allowed(api: str, version: str, method: str, patterns: Sequence[str]) -> None:
    """
    Enforce the allow-list. An empty list denies everything.

    Raises:
        MethodNotAllowedError: If no pattern matches.
    """
    if method_allowed(api, version, method, patterns):
        return
    raise MethodNotAllowedError(
        f"{api}.{version}.{method} is not allowed. "
        "Add a matching pattern to MCP_GCP_GAPI_ALLOW (e.g. 'storage.v1.*').",
        details={"api": api, "version": version, "method": method},
    )


def _split_path(method_path: str) -> list[str]:
    segments = method_path.split(".")
    if any(not s for s in segments):
        raise InvalidMethodPathError(
            f"Invalid method path '{method_path}': empty segment",
            details={"prefix": method_path},
        )
    return segments


# Helpers discovery adds next to the API surface; not API calls
_CLIENT_HELPERS = frozenset({"new_batch_http_request"})


def _member(node: Any, name: str) -> Any:
    """
    Look up an API method or resource collection on a discovery node.

    Private attributes never resolve. On a discovery Resource only the
    members generated from the discovery document do (recorded in
    _dynamic_attrs), so class methods like close() stay unreachable.
    """
    if name.startswith("_") or name in _CLIENT_HELPERS:
        return None
    generated = getattr(node, "_dynamic_attrs", None)
    if isinstance(generated, (list, tuple, set)) and name not in generated:
        return None
    return getattr(node, name, None)


def resolve_method(service: Any, method_path: str) -> Callable[..., Any]:
    """
    Walk a dotted method path on a discovery service.

    Args:
        service: Root resource from googleapiclient.discovery.build
        method_path: e.g. "projects.secrets.versions.access"

    Returns:
        The callable API method named by the final segment.

    Raises:
        InvalidMethodPathError: An intermediate segment doesn't resolve.
            details["prefix"] is the path through the failing segment.
        NotCallableError: The final segment isn't a callable method.
    """
    segments = _split_path(method_path)

    node = service
    for i, segment in enumerate(segments[:-1]):
        prefix = ".".join(segments[: i + 1])
        member = _member(node, segment)
        if member is None:
            raise InvalidMethodPathError(
                f"Invalid method path at {prefix}",
                details={"prefix": prefix, "segment": segment},
            )
        # Discovery collections are methods returning the child resource
        try:
            node = member() if callable(member) else member
        except TypeError as e:
            # An API method (needs arguments) used as an intermediate segment
            raise InvalidMethodPathError(
                f"Invalid method path at {prefix}: not a resource collection",
                details={"prefix": prefix, "segment": segment},
            ) from e
        if node is None:
            raise InvalidMethodPathError(
                f"Invalid method path at {prefix}",
                details={"prefix": prefix, "segment": segment},
            )

    fn = _member(node, segments[-1])
    if not callable(fn):
        raise NotCallableError(
            f"Final method is not callable: {method_path}",
            details={"method": method_path, "segment": segments[-1]},
        )
    return fn


def call_method(fn: Callable[..., Any], parameters: dict[str, Any]) -> Any:
    """
    Invoke a resolved method with parameters verbatim and run the request.

    Discovery methods return an HttpRequest; anything else is returned as is.
    """
    request = fn(**parameters)
    execute = getattr(request, "execute", None)
    if callable(execute):
        return execute()
    logger.debug(f"Resolved method returned {type(request).__name__}, not a request")
    return request
