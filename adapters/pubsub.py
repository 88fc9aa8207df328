"""
Pub/Sub adapter — Pub/Sub API v1 wrapper.

The REST API carries message data base64-encoded; callers hand us UTF-8
text and we encode it here.
"""

import base64
from typing import Any

from adapters.services import build_service
from logging_config import log_api_call, log_api_result


def encode_message(data: str | None, attributes: dict[str, str] | None) -> dict[str, Any]:
    """Build a PubsubMessage body, leaving out fields that weren't given."""
    message: dict[str, Any] = {}
    if data:
        message["data"] = base64.b64encode(data.encode("utf-8")).decode("ascii")
    if attributes is not None:
        message["attributes"] = attributes
    return message


def list_topics(
    credentials: Any,
    project: str,
    page_size: int | None = None,
    page_token: str | None = None,
) -> dict[str, Any]:
    """List topics in a project. Returns the raw projects.topics.list response."""
    service = build_service("pubsub", "v1", credentials)

    kwargs: dict[str, Any] = {"project": f"projects/{project}"}
    if page_size is not None:
        kwargs["pageSize"] = page_size
    if page_token:
        kwargs["pageToken"] = page_token

    log_api_call("pubsub", "projects.topics.list", **kwargs)
    response = service.projects().topics().list(**kwargs).execute()
    log_api_result("pubsub", "projects.topics.list", response)
    return response


def publish_messages(
    credentials: Any,
    project: str,
    topic_id: str,
    messages: list[dict[str, Any]],
) -> dict[str, Any]:
    """
    Publish already-encoded messages to a topic.

    Returns:
        Raw publish response (messageIds, in message order).
    """
    service = build_service("pubsub", "v1", credentials)
    topic = f"projects/{project}/topics/{topic_id}"

    log_api_call("pubsub", "projects.topics.publish", topic=topic, count=len(messages))
    response = service.projects().topics().publish(
        topic=topic,
        body={"messages": messages},
    ).execute()
    log_api_result("pubsub", "projects.topics.publish", response)
    return response
