"""Connection related MQTT v5 messages: Connect, Connack, Auth and Disconnect."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from .properties import UserProperties


class Auther(ABC):
    """Handles the extended authentication flows of MQTT v5."""

    @abstractmethod
    def authenticate(self, auth: "Auth") -> "Auth":
        """Answer an Auth sent by the server with the next Auth to send."""

    @abstractmethod
    def authenticated(self) -> None:
        """Called once authentication has completed successfully."""


@dataclass
class AuthProperties:
    """Properties that can be set on an Auth packet."""

    auth_data: Optional[bytes] = None
    auth_method: str = ""
    reason_string: str = ""
    user: UserProperties = field(default_factory=UserProperties)


@dataclass
class Auth:
    """An MQTT Auth packet."""

    properties: Optional[AuthProperties] = None
    reason_code: int = 0


@dataclass
class AuthResponse:
    """The outcome of a reauthentication exchange."""

    properties: Optional[AuthProperties] = None
    reason_code: int = 0
    success: bool = False


@dataclass
class ConnackProperties:
    """Properties that can be set on a Connack packet.

    The availability flags default to True, as the protocol assumes the
    feature is available unless the server says otherwise.
    """

    session_expiry_interval: Optional[int] = None
    auth_data: Optional[bytes] = None
    auth_method: str = ""
    response_info: str = ""
    server_reference: str = ""
    reason_string: str = ""
    assigned_client_id: str = ""
    maximum_packet_size: Optional[int] = None
    receive_maximum: Optional[int] = None
    topic_alias_maximum: Optional[int] = None
    server_keep_alive: Optional[int] = None
    maximum_qos: Optional[int] = None
    user: UserProperties = field(default_factory=UserProperties)
    wildcard_sub_available: bool = True
    sub_id_available: bool = True
    shared_sub_available: bool = True
    retain_available: bool = True


@dataclass
class Connack:
    """An MQTT Connack packet."""

    properties: Optional[ConnackProperties] = None
    reason_code: int = 0
    session_present: bool = False


@dataclass
class ConnectProperties:
    """Properties that can be set on a Connect packet."""

    auth_data: Optional[bytes] = None
    auth_method: str = ""
    session_expiry_interval: Optional[int] = None
    will_delay_interval: Optional[int] = None
    receive_maximum: Optional[int] = None
    topic_alias_maximum: Optional[int] = None
    maximum_qos: Optional[int] = None
    maximum_packet_size: Optional[int] = None
    user: UserProperties = field(default_factory=UserProperties)
    request_problem_info: bool = True
    request_response_info: bool = False


@dataclass
class WillMessage:
    """The last-will message that may be sent with a Connect packet."""

    retain: bool = False
    qos: int = 0
    topic: str = ""
    payload: bytes = b""


@dataclass
class WillProperties:
    """Properties that can be set on the will of a Connect packet."""

    will_delay_interval: Optional[int] = None
    payload_format: Optional[int] = None
    message_expiry: Optional[int] = None
    content_type: str = ""
    response_topic: str = ""
    correlation_data: Optional[bytes] = None
    user: UserProperties = field(default_factory=UserProperties)


@dataclass
class Connect:
    """An MQTT Connect packet."""

    password: bytes = b""
    username: str = ""
    client_id: str = ""
    properties: Optional[ConnectProperties] = None
    will_message: Optional[WillMessage] = None
    will_properties: Optional[WillProperties] = None
    keep_alive: int = 0
    clean_start: bool = False
    username_flag: bool = False
    password_flag: bool = False


@dataclass
class DisconnectProperties:
    """Properties that can be set on a Disconnect packet."""

    server_reference: str = ""
    reason_string: str = ""
    session_expiry_interval: Optional[int] = None
    user: UserProperties = field(default_factory=UserProperties)


@dataclass
class Disconnect:
    """An MQTT Disconnect packet."""

    properties: Optional[DisconnectProperties] = None
    reason_code: int = 0