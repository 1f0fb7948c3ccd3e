"""Publish, subscribe and unsubscribe related MQTT v5 messages."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .properties import UserProperties


@dataclass
class PublishProperties:
    """Properties that can be set on a Publish packet."""

    correlation_data: Optional[bytes] = None
    content_type: str = ""
    response_topic: str = ""
    payload_format: Optional[int] = None
    message_expiry: Optional[int] = None
    subscription_identifier: Optional[int] = None
    topic_alias: Optional[int] = None
    user: UserProperties = field(default_factory=UserProperties)


def _format_bytes(data: bytes) -> str:
    return "[" + " ".join(str(b) for b in data) + "]"


@dataclass
class Publish:
    """An MQTT Publish packet."""

    packet_id: int = 0
    qos: int = 0
    retain: bool = False
    topic: str = ""
    properties: Optional[PublishProperties] = None
    payload: bytes = b""

    def __str__(self) -> str:
        lines = [
            f"topic: {self.topic}  qos: {self.qos}  "
            f"retain: {'true' if self.retain else 'false'}\n"
        ]
        props = self.properties
        if props is not None:
            if props.payload_format is not None:
                lines.append(f"PayloadFormat: {props.payload_format}\n")
            if props.message_expiry is not None:
                lines.append(f"MessageExpiry: {props.message_expiry}\n")
            if props.content_type:
                lines.append(f"ContentType: {props.content_type}\n")
            if props.response_topic:
                lines.append(f"ResponseTopic: {props.response_topic}\n")
            if props.correlation_data is not None:
                lines.append(
                    f"CorrelationData: {_format_bytes(props.correlation_data)}\n"
                )
            if props.topic_alias is not None:
                lines.append(f"TopicAlias: {props.topic_alias}\n")
            if props.subscription_identifier is not None:
                lines.append(
                    f"SubscriptionIdentifier: {props.subscription_identifier}\n"
                )
            lines.extend(f"User: {u.key} : {u.value}\n" for u in props.user)
        lines.append(bytes(self.payload).decode("utf-8", errors="replace"))
        return "".join(lines)


@dataclass
class PublishResponseProperties:
    """Properties of a response to a QoS 1 or QoS 2 Publish."""

    reason_string: str = ""
    user: UserProperties = field(default_factory=UserProperties)


@dataclass
class PublishResponse:
    """A generic response to a QoS 1 or QoS 2 Publish."""

    properties: Optional[PublishResponseProperties] = None
    reason_code: int = 0


@dataclass
class SubackProperties:
    """Properties that can be set on a Suback packet."""

    reason_string: str = ""
    user: UserProperties = field(default_factory=UserProperties)


@dataclass
class Suback:
    """An MQTT Suback packet."""

    properties: Optional[SubackProperties] = None
    reasons: list[int] = field(default_factory=list)


@dataclass
class SubscribeOptions:
    """The options for a single subscription."""

    topic: str = ""
    qos: int = 0
    retain_handling: int = 0
    no_local: bool = False
    retain_as_published: bool = False


@dataclass
class SubscribeProperties:
    """Properties that can be set on a Subscribe packet."""

    subscription_identifier: Optional[int] = None
    user: UserProperties = field(default_factory=UserProperties)


@dataclass
class Subscribe:
    """An MQTT Subscribe packet."""

    properties: Optional[SubscribeProperties] = None
    subscriptions: list[SubscribeOptions] = field(default_factory=list)


@dataclass
class UnsubackProperties:
    """Properties that can be set on an Unsuback packet."""

    reason_string: str = ""
    user: UserProperties = field(default_factory=UserProperties)


@dataclass
class Unsuback:
    """An MQTT Unsuback packet."""

    reasons: list[int] = field(default_factory=list)
    properties: Optional[UnsubackProperties] = None


@dataclass
class UnsubscribeProperties:
    """Properties that can be set on an Unsubscribe packet."""

    user: UserProperties = field(default_factory=UserProperties)


@dataclass
class Unsubscribe:
    """An MQTT Unsubscribe packet."""

    topics: list[str] = field(default_factory=list)
    properties: Optional[UnsubscribeProperties] = None