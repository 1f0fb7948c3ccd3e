import pytest

from mqttkit.connect_messages import (
    Auth,
    AuthProperties,
    AuthResponse,
    Auther,
    Connack,
    ConnackProperties,
    Connect,
    ConnectProperties,
    Disconnect,
    DisconnectProperties,
    WillMessage,
    WillProperties,
)
from mqttkit.properties import UserProperties


class _RecordingAuther(Auther):
    def __init__(self):
        self.seen = []
        self.done = False

    def authenticate(self, auth):
        self.seen.append(auth)
        return Auth(
            reason_code=auth.reason_code,
            properties=AuthProperties(auth_method="testauth", auth_data=b"client-final-data"),
        )

    def authenticated(self):
        self.done = True


def test_auther_cannot_be_instantiated_without_methods():
    with pytest.raises(TypeError):
        Auther()  # type: ignore[abstract]


def test_auther_exchange():
    auther = _RecordingAuther()
    incoming = Auth(
        reason_code=0x18,
        properties=AuthProperties(auth_method="testauth", auth_data=b"server first data"),
    )
    reply = auther.authenticate(incoming)
    auther.authenticated()
    assert auther.seen == [incoming]
    assert reply.properties.auth_data == b"client-final-data"
    assert reply.reason_code == 0x18
    assert auther.done is True


def test_connack_properties_availability_defaults_true():
    props = ConnackProperties()
    assert props.wildcard_sub_available is True
    assert props.sub_id_available is True
    assert props.shared_sub_available is True
    assert props.retain_available is True
    assert props.receive_maximum is None


def test_connect_properties_request_flag_defaults():
    props = ConnectProperties()
    assert props.request_problem_info is True
    assert props.request_response_info is False


def test_user_properties_not_shared_between_instances():
    first = AuthProperties()
    second = AuthProperties()
    first.user.add("k", "v")
    assert second.user.get_all("k") == []
    assert isinstance(first.user, UserProperties)


def test_connect_holds_will():
    connect = Connect(
        keep_alive=30,
        client_id="testClient",
        clean_start=True,
        properties=ConnectProperties(receive_maximum=200),
        will_message=WillMessage(topic="will/topic", payload=b"am gone"),
        will_properties=WillProperties(will_delay_interval=200),
    )
    assert connect.will_message.topic == "will/topic"
    assert connect.will_message.payload == b"am gone"
    assert connect.will_properties.will_delay_interval == 200
    assert connect.properties.receive_maximum == 200
    assert connect.username_flag is False


def test_connack_equality():
    a = Connack(reason_code=0, properties=ConnackProperties(maximum_qos=1, topic_alias_maximum=200))
    b = Connack(reason_code=0, properties=ConnackProperties(maximum_qos=1, topic_alias_maximum=200))
    assert a == b
    b.properties.retain_available = False
    assert a != b
    assert a.properties.retain_available is True


def test_disconnect_properties_roundtrip():
    disconnect = Disconnect(
        reason_code=0x8B,
        properties=DisconnectProperties(reason_string="GONE!"),
    )
    assert disconnect.reason_code == 0x8B
    assert disconnect.properties.reason_string == "GONE!"
    assert disconnect.properties.user.get("anything") == ""


def test_auth_response_carries_success():
    resp = AuthResponse(success=True, reason_code=0, properties=AuthProperties(reason_string="ok"))
    assert resp.success is True
    assert resp.properties.reason_string == "ok"
    assert AuthResponse().success is False