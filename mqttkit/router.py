"""Routing of received Publish messages to handlers by topic."""

from __future__ import annotations

import dataclasses
import logging
import threading
from typing import Callable, Optional

from .publish_messages import Publish

MessageHandler = Callable[[Publish], None]

logger = logging.getLogger(__name__)


def route_split(route: str) -> list[str]:
    """Split a subscription into levels, dropping a ``$share/<group>`` prefix."""
    if not route:
        return []
    levels = route.split("/")
    return levels[2:] if route.startswith("$share") else levels


def topic_split(topic: str) -> list[str]:
    """Split a topic name into levels."""
    return topic.split("/") if topic else []


def _match_levels(route: list[str], topic: list[str]) -> bool:
    for position, level in enumerate(route):
        if level == "#":
            return True
        if position >= len(topic):
            return False
        if level != "+" and level != topic[position]:
            return False
    return len(route) == len(topic)


def route_includes_topic(route: str, topic: str) -> bool:
    """Return whether the subscription ``route`` covers ``topic`` with wildcards."""
    return _match_levels(route_split(route), topic_split(topic))


def match(route: str, topic: str) -> bool:
    """Return whether a message on ``topic`` belongs to subscription ``route``."""
    return route == topic or route_includes_topic(route, topic)


def _alias_of(publish: Publish) -> Optional[int]:
    props = publish.properties
    return None if props is None else props.topic_alias


class StandardRouter:
    """Routes messages to every handler whose subscription matches the topic."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._subscriptions: dict[str, list[MessageHandler]] = {}
        self._aliases: dict[int, str] = {}

    def register_handler(self, topic: str, handler: MessageHandler) -> None:
        """Add ``handler`` for messages matching ``topic``."""
        logger.debug("registering handler for: %s", topic)
        with self._lock:
            self._subscriptions.setdefault(topic, []).append(handler)

    def unregister_handler(self, topic: str) -> None:
        """Remove every handler registered for ``topic``."""
        logger.debug("unregistering handler for: %s", topic)
        with self._lock:
            self._subscriptions.pop(topic, None)

    def route(self, publish: Publish) -> None:
        """Call each handler whose subscription matches the message's topic."""
        message = dataclasses.replace(publish)
        alias = _alias_of(publish)
        with self._lock:
            if alias is not None:
                if publish.topic:
                    logger.debug("registering topic alias %d for %s", alias, publish.topic)
                    self._aliases[alias] = publish.topic
                topic = self._aliases.get(alias, "")
            else:
                topic = publish.topic
            matched = [
                handler
                for route, handlers in self._subscriptions.items()
                if match(route, topic)
                for handler in handlers
            ]
        for handler in matched:
            handler(message)


class SingleHandlerRouter:
    """Routes every message to a single handler."""

    def __init__(self, handler: Optional[MessageHandler] = None) -> None:
        self._lock = threading.Lock()
        self._aliases: dict[int, str] = {}
        self._handler = handler

    def register_handler(self, topic: str, handler: MessageHandler) -> None:
        """Replace the handler; ``topic`` is ignored."""
        logger.debug("registering handler for: %s", topic)
        self._handler = handler

    def unregister_handler(self, topic: str) -> None:
        """Leave the single handler in place; the request is only recorded in the log."""
        logger.debug("ignoring unregister for %s: the single handler is kept", topic)

    def route(self, publish: Publish) -> None:
        """Call the handler, with any topic alias resolved to its topic."""
        message = dataclasses.replace(publish)
        alias = _alias_of(publish)
        if alias is not None:
            with self._lock:
                if publish.topic:
                    self._aliases[alias] = publish.topic
                if alias in self._aliases:
                    message.topic = self._aliases[alias]
        if self._handler is None:
            raise RuntimeError("no message handler registered")
        self._handler(message)