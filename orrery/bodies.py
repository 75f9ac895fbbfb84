#!/usr/bin/env python3
"""
Body registry: the sun and the eight planets.

Radii and distances are compressed relative to true scale so that every body
stays on screen; angular speeds are radians per animation frame.
"""
from typing import List, Tuple

from .data_models import CelestialBody


class UnknownBodyError(KeyError):
    """Raised when a body id or name is not in the registry."""


SUN = CelestialBody(
    id="sun",
    name="Sun",
    radius=3.0,
    distance=0.0,
    angular_speed=0.0,
    color=(255, 221, 0),
    fact="The Sun is a massive ball of hot plasma that contains 99.86% of the Solar System's mass.",
    emissive=(255, 170, 0),
)

PLANETS: Tuple[CelestialBody, ...] = (
    CelestialBody(
        "mercury", "Mercury", 0.4, 8.0, 0.04, (140, 120, 83),
        "Mercury is the smallest planet and closest to the Sun, with extreme temperature variations.",
    ),
    CelestialBody(
        "venus", "Venus", 0.9, 12.0, 0.03, (255, 198, 73),
        "Venus is the hottest planet in our solar system with surface temperatures of 900°F (475°C).",
    ),
    CelestialBody(
        "earth", "Earth", 1.0, 16.0, 0.02, (107, 147, 214),
        "Earth is the only known planet with life and has liquid water covering 71% of its surface.",
    ),
    CelestialBody(
        "mars", "Mars", 0.5, 20.0, 0.018, (193, 68, 14),
        "Mars is known as the Red Planet due to iron oxide (rust) on its surface.",
    ),
    CelestialBody(
        "jupiter", "Jupiter", 3.0, 28.0, 0.013, (216, 202, 157),
        "Jupiter is the largest planet and has over 80 moons, including the four largest discovered by Galileo.",
    ),
    CelestialBody(
        "saturn", "Saturn", 2.5, 36.0, 0.01, (250, 213, 165),
        "Saturn is famous for its beautiful ring system made of ice and rock particles.",
    ),
    CelestialBody(
        "uranus", "Uranus", 1.8, 44.0, 0.007, (79, 208, 231),
        "Uranus rotates on its side and has a unique blue-green color due to methane in its atmosphere.",
    ),
    CelestialBody(
        "neptune", "Neptune", 1.7, 52.0, 0.006, (75, 112, 221),
        "Neptune is the windiest planet with storms reaching speeds of up to 1,200 mph (2,000 km/h).",
    ),
)


def all_bodies() -> List[CelestialBody]:
    """Sun first, then the planets from the inside out."""
    return [SUN, *PLANETS]


_BY_ID = {b.id: b for b in all_bodies()}


def planet_ids() -> List[str]:
    return [p.id for p in PLANETS]


def get_body(body_id: str) -> CelestialBody:
    try:
        return _BY_ID[body_id]
    except KeyError:
        raise UnknownBodyError(body_id) from None


def find_by_name(name: str) -> CelestialBody:
    """Look a body up by its display name (case-insensitive)."""
    wanted = name.strip().lower()
    for body in all_bodies():
        if body.name.lower() == wanted:
            return body
    raise UnknownBodyError(name)
