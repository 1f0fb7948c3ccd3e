import random

import pytest

from mqttkit.message_ids import MID_MAX, CPContext, MIDs, MidsExhaustedError


def _filled() -> MIDs:
    m = MIDs()
    for _ in range(MID_MAX):
        m.request(CPContext())
    return m


def test_using_full_band_of_mid():
    m = MIDs()
    cp = CPContext()

    for i in range(MID_MAX):
        v = m.request(cp)
        assert v == i + 1
        m.free(v)

    for i in range(MID_MAX):
        v = m.request(cp)
        assert v == i + 1

    m.free(MID_MAX)
    assert m.request(cp) == MID_MAX

    rng = random.Random(1234)
    holes = set()
    for _ in range(60000):
        r = rng.randint(0, MID_MAX)
        if r == 0:
            r = 1
        m.free(r)
        holes.add(r)
    granted = {m.request(cp) for _ in range(len(holes))}
    assert granted == holes


def test_exhaustion_raises():
    m = _filled()
    with pytest.raises(MidsExhaustedError):
        m.request(CPContext())


def test_get_all_ids():
    m = MIDs()
    contexts = [CPContext() for _ in range(MID_MAX)]
    for cp in contexts:
        m.request(cp)
    for mid in range(1, MID_MAX + 1):
        assert m.get(mid) is contexts[mid - 1]


def test_get_zero_id_returns_none():
    m = _filled()
    assert m.get(0) is None


def test_free_all_ids():
    m = _filled()
    for mid in range(1, MID_MAX + 1):
        m.free(mid)
    assert all(m.get(mid) is None for mid in range(1, MID_MAX + 1))


def test_free_zero_id_is_ignored():
    m = MIDs()
    cp = CPContext()
    mid = m.request(cp)
    m.free(0)
    assert m.get(mid) is cp


def test_request_continues_after_last_issued():
    m = MIDs()
    cp = CPContext()
    first = m.request(cp)
    m.free(first)
    assert m.request(cp) == first + 1


def test_clear_releases_everything():
    m = _filled()
    m.clear()
    assert m.get(1) is None
    assert m.get(MID_MAX) is None
    assert m.request(CPContext()) >= 1


def test_context_response_queue_delivers():
    cp = CPContext(context="ctx")
    cp.response.put("packet")
    assert cp.response.get_nowait() == "packet"
    assert cp.context == "ctx"