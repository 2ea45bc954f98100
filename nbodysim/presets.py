import numpy as np
from typing import List
from .body import Body
from .constants import G_NEWTON, UNIVERSE_RADIUS
from .physics_utils import remove_center_of_mass_velocity, arrays_to_bodies

"""
This module provides built-in initial conditions for the simulation. inner_solar_system returns the classic five-body data set (sun plus the four inner planets, all starting on the +x axis with velocities along +y) together with the radius of the square viewport it is meant to be drawn in; sun_earth builds the two-body reference system with both bodies at rest; equal_mass_polygon places n equal masses on a regular polygon with tangential velocities and removes the center-of-mass drift. Positions, velocities and masses are SI units.

"""


INNER_SOLAR_SYSTEM_RADIUS = UNIVERSE_RADIUS

_INNER_SOLAR_SYSTEM = (
	# x, y, vx, vy, mass, image
	(1.4960e+11, 0.0, 0.0, 2.9800e+04, 5.9740e+24, "earth.gif"),
	(2.2790e+11, 0.0, 0.0, 2.4100e+04, 6.4190e+23, "mars.gif"),
	(5.7900e+10, 0.0, 0.0, 4.7900e+04, 3.3020e+23, "mercury.gif"),
	(0.0,        0.0, 0.0, 0.0,        1.9890e+30, "sun.gif"),
	(1.0820e+11, 0.0, 0.0, 3.5000e+04, 4.8690e+24, "venus.gif"),
)


def inner_solar_system() -> List[Body]:
	return [Body(*row) for row in _INNER_SOLAR_SYSTEM]


def sun_earth() -> List[Body]:
	return [
		Body(0.0, 0.0, 0.0, 0.0, 5.974e24, "earth.gif"),
		Body(0.0, 1.496e11, 0.0, 0.0, 1.989e30, "sun.gif"),
	]


def equal_mass_polygon(
	n_bodies: int,
	radius: float = 1.0e11,
	mass: float = 1.0e29,
	rotation_fraction: float = 0.5,
	G: float = G_NEWTON,
	image_id: str = "blue.gif",
) -> List[Body]:

	masses = np.full(n_bodies, float(mass))

	angles = np.linspace(0.0, 2.0 * np.pi, n_bodies, endpoint=False)
	positions = np.column_stack([
		radius * np.cos(angles),
		radius * np.sin(angles)
	])

	total_mass = float(np.sum(masses))
	v_scale = np.sqrt(G * total_mass / radius) * rotation_fraction

	velocities = np.column_stack([
		-v_scale * np.sin(angles),
		 v_scale * np.cos(angles)
	])

	velocities = remove_center_of_mass_velocity(masses, velocities)
	return arrays_to_bodies(masses, positions, velocities, [image_id] * n_bodies)


PRESETS = {
	"inner": inner_solar_system,
	"sun-earth": sun_earth,
	"polygon": lambda: equal_mass_polygon(6),
}
