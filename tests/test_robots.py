import random
import re
from string import ascii_uppercase

import pytest

from drillbook.robots import NamespaceExhaustedError, Robot

NAME_PATTERN = re.compile(r"^[A-Z]{2}\d{3}$")


def _every_name():
    return {
        f"{a}{b}{n:03d}" for a in ascii_uppercase for b in ascii_uppercase for n in range(1000)
    }


def test_name_has_the_expected_shape():
    taken = set()
    robot = Robot(rng=random.Random(1), taken=taken)
    name = robot.name()
    assert NAME_PATTERN.fullmatch(name) is not None
    assert len(name) == 5
    assert taken == {name}


def test_name_is_stable():
    taken = set()
    robot = Robot(rng=random.Random(2), taken=taken)
    first = robot.name()
    assert robot.name() == first
    assert taken == {first}


def test_reset_gives_a_different_name():
    taken = set()
    robot = Robot(rng=random.Random(3), taken=taken)
    first = robot.name()
    robot.reset()
    second = robot.name()
    assert NAME_PATTERN.match(second)
    assert second != first
    assert {first, second} <= taken


def test_names_are_unique_among_many_robots():
    taken = set()
    rng = random.Random(4)
    names = [Robot(rng=rng, taken=taken).name() for _ in range(2000)]
    assert len(set(names)) == len(names)
    assert set(names) == taken


def test_default_robots_get_distinct_names():
    robots = [Robot() for _ in range(50)]
    names = {robot.name() for robot in robots}
    assert len(names) == 50


def test_last_free_name_is_found():
    taken = _every_name()
    taken.discard("QZ042")
    robot = Robot(rng=random.Random(5), taken=taken)
    assert robot.name() == "QZ042"
    assert "QZ042" in taken


def test_exhausted_namespace_raises():
    taken = _every_name()
    robot = Robot(rng=random.Random(6), taken=taken)
    with pytest.raises(NamespaceExhaustedError, match="Namespace is exhausted"):
        robot.name()