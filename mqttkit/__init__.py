"""MQTT v5 client building blocks: packet models, message ids, ordered acks, routing and topic aliases."""

__version__ = "0.1.0"

__all__ = [
    "acks",
    "connect_messages",
    "message_ids",
    "properties",
    "publish_messages",
    "router",
    "topic_aliases",
]