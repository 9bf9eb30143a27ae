import os
import random

import pytest

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "hide")

from engine.sched.timers import TimerQueue
from engine.storage.kv_store import MemoryStore

from catch_rush.machine import RoundMachine
from catch_rush.progress import ProgressStore


@pytest.fixture
def timers():
    return TimerQueue()


@pytest.fixture
def backend():
    return MemoryStore()


@pytest.fixture
def store(backend):
    s = ProgressStore(backend)
    yield s
    s.close()


@pytest.fixture
def machine(store, timers):
    m = RoundMachine(store, timers, rng=random.Random(1234))
    m.set_play_area(400, 300)
    m.resume()
    return m


@pytest.fixture
def start_round(machine, timers):
    """Start a round and let the first target appear (one frame later)."""
    def _start():
        machine.start()
        timers.advance(0)
    return _start
