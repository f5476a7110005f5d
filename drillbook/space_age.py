"""Ages expressed in the orbital years of the planets of the solar system."""

from __future__ import annotations

from enum import Enum

EARTH_YEAR = 31557600.0


class Planet(str, Enum):
    """The planets whose years can be measured."""

    EARTH = "Earth"
    MERCURY = "Mercury"
    VENUS = "Venus"
    MARS = "Mars"
    JUPITER = "Jupiter"
    SATURN = "Saturn"
    URANUS = "Uranus"
    NEPTUNE = "Neptune"


_ORBITAL_PERIODS = {
    Planet.EARTH: EARTH_YEAR,
    Planet.MERCURY: EARTH_YEAR * 0.2408467,
    Planet.VENUS: EARTH_YEAR * 0.61519726,
    Planet.MARS: EARTH_YEAR * 1.8808158,
    Planet.JUPITER: EARTH_YEAR * 11.862615,
    Planet.SATURN: EARTH_YEAR * 29.447498,
    Planet.URANUS: EARTH_YEAR * 84.016846,
    Planet.NEPTUNE: EARTH_YEAR * 164.79132,
}


def age(seconds: float, planet: Planet | str) -> float:
    """Return how many years of ``planet`` last ``seconds``; 0 for unknown planets."""
    try:
        period = _ORBITAL_PERIODS[Planet(planet)]
    except ValueError:
        return 0.0
    return seconds / period