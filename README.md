# mqttkit

Building blocks for an MQTT v5 client, written in plain Python with no
dependencies outside the standard library.

## What is inside

- `mqttkit.properties`: `UserProperty` and `UserProperties`. These are the
  ordered key/value pairs that MQTT v5 carries in packet properties, and keys
  may repeat. `add` appends an entry and returns the list, so calls can be
  chained. `get` returns the first value for a key, or `""`. `get_all`
  returns every value for a key.
- `mqttkit.connect_messages`: dataclasses for the session packets.
  - `Connect`, with `ConnectProperties`, `WillMessage` and `WillProperties`.
  - `Connack` with `ConnackProperties`. Its feature-availability flags
    default to `True`.
  - `Auth` with `AuthProperties`, `AuthResponse`, and `Disconnect` with
    `DisconnectProperties`.
  - The abstract `Auther` interface (`authenticate`, `authenticated`) for
    the extended authentication exchange.
- `mqttkit.publish_messages`: dataclasses for the remaining packets.
  - `Publish` with `PublishProperties`. `str()` of a `Publish` gives a
    readable dump of its topic, QoS, retain flag, set properties and
    payload.
  - `PublishResponse`.
  - `Subscribe` with `SubscribeOptions` and `SubscribeProperties`, and
    `Suback`.
  - `Unsubscribe` and `Unsuback`.
- `mqttkit.acks`: `AcksTracker` for manual acknowledgements.
  - `add` starts tracking a publish. A packet id that is already tracked is
    ignored.
  - `mark_as_acked` marks a tracked publish as acknowledged. It raises
    `PacketNotFoundError` for an unknown packet id.
  - `flush(do)` passes only the leading run of acknowledged publishes to
    `do`, so acknowledgements go out in arrival order.
  - `reset` forgets everything.
- `mqttkit.message_ids`: `MIDs` and `CPContext`.
  - `MIDs.request` hands out packet identifiers 1–65535. Allocation carries
    on after the last identifier issued and wraps around.
  - `get` returns the `CPContext` held for an identifier, and `free`
    releases it. Identifier 0 is never valid: `get(0)` returns `None` and
    `free(0)` does nothing.
  - `clear` releases every identifier.
  - `MidsExhaustedError` is raised when all identifiers are in use.
  - A `CPContext` holds a caller-supplied `context` and a one-slot
    `response` queue.
- `mqttkit.router`: routing of incoming publishes.
  - `StandardRouter` calls every handler whose subscription filter matches
    the topic. Filters may use `+`, `#` and a `$share/<group>/` prefix.
  - `SingleHandlerRouter` sends every message to one handler. It raises
    `RuntimeError` if no handler is set.
  - Both routers resolve topic aliases.
  - `match`, `route_includes_topic`, `route_split` and `topic_split` can
    also be used on their own.
  - Debug messages go to the standard `logging` logger `mqttkit.router`.
- `mqttkit.topic_aliases`: `TAHandler`, which hands out alias numbers
  1..maximum.
  - Its `publish_hook` replaces an outgoing publish's topic with an alias
    when it can. A publish that already carries an alias rebinds that
    alias to its topic.
  - It also has `get_topic`, `get_alias`, `set_alias`, `reset_alias` and a
    read-only `aliases` table.

## Examples

Topic matching:

```python
from mqttkit.router import match

match("a/+/c", "a/b/c")             # True
match("$share/group1/a/b", "a/b")   # True
match("b/#", "a/b")                 # False
```

Routing messages:

```python
from mqttkit.publish_messages import Publish
from mqttkit.router import StandardRouter

router = StandardRouter()
router.register_handler("sensors/+/temp", lambda msg: print(msg.topic, msg.payload))
router.route(Publish(topic="sensors/kitchen/temp", payload=b"21.5"))
```

Acknowledging in order:

```python
from mqttkit.acks import AcksTracker
from mqttkit.publish_messages import Publish

tracker = AcksTracker()
first, second = Publish(packet_id=1, qos=1), Publish(packet_id=2, qos=1)
tracker.add(first)
tracker.add(second)
tracker.mark_as_acked(second)
tracker.flush(print)        # nothing yet: message 1 is still open
tracker.mark_as_acked(first)
tracker.flush(print)        # both, in arrival order
```

Packet identifiers:

```python
from mqttkit.message_ids import CPContext, MIDs

mids = MIDs()
ctx = CPContext()
mid = mids.request(ctx)     # 1
mids.get(mid) is ctx        # True
mids.free(mid)
```

Topic aliases:

```python
from mqttkit.publish_messages import Publish
from mqttkit.topic_aliases import TAHandler

aliases = TAHandler(4)
msg = Publish(topic="long/topic/name")
aliases.publish_hook(msg)
# msg.topic is now "" and msg.properties.topic_alias is 1
```

## What this package does not do

These are parts for building a client. The package has:

- no network client: nothing connects to a broker, sends or receives
  packets, or keeps a session alive with pings;
- no encoding or decoding of MQTT packets to and from bytes;
- no store for in-flight packets.

## Running the tests

```
pip install -e ".[test]"
pytest
```