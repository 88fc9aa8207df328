"""
Pub/Sub tools — list topics, publish messages.
"""

import asyncio

from pydantic import Field

from adapters.pubsub import encode_message, list_topics, publish_messages
from auth import resolve_identity
from gcp_config import PUBSUB, PUBSUB_READ_ONLY
from models import ToolResult
from tools.common import ToolInput, text_result


class TopicsListInput(ToolInput):
    project_id: str | None = Field(default=None, description="Project id (defaults to the ambient project)")
    page_size: int | None = Field(default=None, ge=1, le=1000, description="Topics per page (1-1000)")
    page_token: str | None = Field(default=None, description="Token from a previous page")


class PublishMessage(ToolInput):
    data: str | None = Field(default=None, description="UTF-8 message body")
    attributes: dict[str, str] | None = Field(default=None, description="Message attributes")


class TopicsPublishInput(ToolInput):
    project_id: str | None = Field(default=None, description="Project id (defaults to the ambient project)")
    topic_id: str = Field(description="Topic id")
    messages: list[PublishMessage] = Field(min_length=1, description="Messages to publish, in order")


async def topics_list(params: TopicsListInput) -> ToolResult:
    identity = await asyncio.to_thread(resolve_identity, [PUBSUB_READ_ONLY], params.project_id)
    response = await asyncio.to_thread(
        list_topics, identity.credentials, identity.project_id,
        params.page_size, params.page_token,
    )
    return text_result(response)


async def topics_publish(params: TopicsPublishInput) -> ToolResult:
    identity = await asyncio.to_thread(resolve_identity, [PUBSUB], params.project_id)
    messages = [encode_message(m.data, m.attributes) for m in params.messages]
    response = await asyncio.to_thread(
        publish_messages, identity.credentials, identity.project_id, params.topic_id, messages,
    )
    return text_result(response)


TOOLS = [
    ("pubsub.topics.list", "List Pub/Sub topics in a project.", TopicsListInput, topics_list),
    (
        "pubsub.topics.publish",
        "Publish messages to a Pub/Sub topic. Data is base64-encoded from UTF-8.",
        TopicsPublishInput,
        topics_publish,
    ),
]
