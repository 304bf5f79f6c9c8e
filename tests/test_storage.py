from dataclasses import dataclass

import pytest

from quadkit import storage
from quadkit.storage import Storage


@dataclass
class WorldBoundaries:
    value: int


@dataclass
class Score:
    points: int


def test_store_and_get():
    s = Storage()
    s.store(WorldBoundaries(23))
    assert s.get(WorldBoundaries).value == 23


def test_overwrite():
    s = Storage()
    s.store(Score(1))
    s.store(Score(2))
    assert s.get(Score) == Score(2)


def test_try_get_missing_is_none():
    assert Storage().try_get(Score) is None


def test_get_missing_raises():
    with pytest.raises(KeyError):
        Storage().get(Score)


def test_mutation_is_shared():
    s = Storage()
    s.store(Score(0))
    s.get(Score).points += 5
    assert s.try_get(Score) == Score(5)


def test_keyed_by_exact_type():
    s = Storage()
    s.store(Score(3))
    s.store(WorldBoundaries(7))
    assert s.get(Score) == Score(3)
    assert s.get(WorldBoundaries) == WorldBoundaries(7)


def test_instances_independent():
    a = Storage()
    b = Storage()
    a.store(Score(9))
    assert b.try_get(Score) is None


def test_module_level_functions():
    class Marker:
        def __init__(self, tag):
            self.tag = tag

    assert storage.try_get(Marker) is None
    with pytest.raises(KeyError):
        storage.get(Marker)
    item = Marker("tag")
    storage.store(item)
    assert storage.get(Marker) is item
    assert storage.try_get(Marker) is item