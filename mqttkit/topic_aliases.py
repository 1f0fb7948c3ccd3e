"""Automatic assignment of topic aliases to outgoing publishes."""

from __future__ import annotations

import threading
from typing import Optional, Sequence

from .publish_messages import Publish, PublishProperties


class TAHandler:
    """Hands out topic alias numbers and swaps topics for them on publish.

    Alias numbers run from 1 to ``maximum``; 0 means "no alias".
    """

    def __init__(self, maximum: int, aliases: Optional[Sequence[str]] = None) -> None:
        self._lock = threading.Lock()
        if aliases is None:
            self._aliases = [""] * (maximum + 1)
        else:
            self._aliases = list(aliases)

    @property
    def aliases(self) -> list[str]:
        """A copy of the alias table, indexed by alias number (slot 0 unused)."""
        with self._lock:
            return list(self._aliases)

    def get_topic(self, alias: int) -> str:
        """Return the topic for ``alias``, or an empty string if there is none."""
        with self._lock:
            if not 0 <= alias < len(self._aliases):
                return ""
            return self._aliases[alias]

    def get_alias(self, topic: str) -> int:
        """Return the alias already assigned to ``topic``, or 0."""
        with self._lock:
            return next(
                (number for number, name in enumerate(self._aliases) if name == topic),
                0,
            )

    def set_alias(self, topic: str) -> int:
        """Assign the lowest free alias to ``topic`` and return it, or 0 if none is free."""
        with self._lock:
            for number in range(1, len(self._aliases)):
                if not self._aliases[number]:
                    self._aliases[number] = topic
                    return number
            return 0

    def reset_alias(self, topic: str, alias: int) -> None:
        """Point ``alias`` at ``topic``, replacing whatever it meant before."""
        with self._lock:
            if not 0 <= alias < len(self._aliases):
                raise IndexError(f"topic alias {alias} out of range")
            self._aliases[alias] = topic

    def publish_hook(self, publish: Publish) -> None:
        """Replace the topic of ``publish`` with an alias where one can be used.

        Intended to run just before a publish is sent. A publish that already
        carries an alias rebinds that alias to its topic instead.
        """
        props = publish.properties
        if props is not None and props.topic_alias is not None:
            self.reset_alias(publish.topic, props.topic_alias)
            return

        alias = self.get_alias(publish.topic) or self.set_alias(publish.topic)
        if alias == 0:
            return
        if publish.properties is None:
            publish.properties = PublishProperties()
        publish.properties.topic_alias = alias
        publish.topic = ""