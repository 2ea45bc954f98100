import numpy as np
from typing import Iterable, List, Sequence, Tuple
from .body import Body

"""
This module provides small array utilities shared by the simulation driver and the presets. remove_center_of_mass_velocity computes and subtracts the center-of-mass velocity from a velocity array, preserving momentum conservation in the CM frame; bodies_to_arrays and arrays_to_bodies convert between a list of Body objects and the (masses, positions, velocities) numpy arrays used by the vectorized kernels and diagnostics. The conversions keep list order, so row i always corresponds to the i-th body.


"""

def remove_center_of_mass_velocity(
	masses: np.ndarray, velocities: np.ndarray
) -> np.ndarray:
	m = np.asarray(masses, dtype=np.float64).ravel()
	v = np.array(velocities, dtype=np.float64)
	total_mass = float(m.sum())
	if m.size < 2 or total_mass == 0.0:
		return v
	v -= (m @ v) / total_mass
	return v


def bodies_to_arrays(
	bodies: Iterable[Body],
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
	bodies = list(bodies)
	masses = np.array([b.mass for b in bodies], dtype=np.float64)
	positions = np.array([(b.x, b.y) for b in bodies], dtype=np.float64).reshape(-1, 2)
	velocities = np.array([(b.vx, b.vy) for b in bodies], dtype=np.float64).reshape(-1, 2)
	return masses, positions, velocities


def arrays_to_bodies(
	masses: np.ndarray,
	positions: np.ndarray,
	velocities: np.ndarray,
	image_ids: Sequence[str],
) -> List[Body]:
	out = []
	for m, (x, y), (vx, vy), image_id in zip(masses, positions, velocities, image_ids):
		out.append(Body(x, y, vx, vy, m, image_id))
	return out
