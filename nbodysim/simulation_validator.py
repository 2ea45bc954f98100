"""
This module provides validation utilities for N-body initial conditions.

The SimulationValidator class offers static methods to check state validity (positive
masses, finite values, correct dimensions) and report detailed diagnostics for invalid
states. It is applied when bodies enter a simulation, never during stepping: once a run
has started, non-finite values are allowed to propagate. body_is_valid checks a single
Body; state_is_valid checks parallel mass/position/velocity arrays.
"""

from __future__ import annotations
import math
from typing import Sequence, Tuple, TYPE_CHECKING
import numpy as np

if TYPE_CHECKING:
	from .body import Body




Vec2 = Tuple[float, float]


class SimulationValidator:
	@staticmethod
	def body_is_valid(body: "Body") -> bool:
		m = body.mass
		if not (m > 0.0 and math.isfinite(m)):
			return False
		for v in (body.x, body.y, body.vx, body.vy):
			if not math.isfinite(v):
				return False
		if not isinstance(body.image_id, str):
			return False
		return True

	@staticmethod
	def state_is_valid(
		masses: Sequence[float],
		positions: Sequence[Vec2],
		velocities: Sequence[Vec2],
	) -> bool:

		if masses is None or positions is None or velocities is None:
			return False

		m = np.asarray(masses, dtype=float).ravel()
		r = np.asarray(positions, dtype=float)
		v = np.asarray(velocities, dtype=float)

		if r.ndim != 2 or v.ndim != 2 or r.shape != v.shape:
			return False
		if r.shape[0] != m.size or r.shape[1] != 2:
			return False

		for m_i in m:
			if not (m_i > 0.0 and math.isfinite(m_i)):
				return False

		if not np.all(np.isfinite(r)) or not np.all(np.isfinite(v)):
			return False

		return True

	@staticmethod
	def report_invalid_body(label: str, body: "Body") -> None:
		print(f"[invalid] {label}")
		print("body", body)
		if not body.mass > 0.0:
			print(f"  mass {body.mass} is not strictly positive")
		elif not math.isfinite(body.mass):
			print(f"  mass {body.mass} is not finite")
		for name in ("x", "y", "vx", "vy"):
			val = getattr(body, name)
			if not math.isfinite(val):
				print(f"  {name} = {val} is not finite")

	@staticmethod
	def report_invalid_state(
		label: str,
		masses=None,
		positions=None,
		velocities=None,
	) -> None:

		print(f"[invalid] {label}")
		if masses is not None:
			print("masses", masses)
		if positions is not None:
			print("positions", positions)
			for i, pos in enumerate(positions):
				if len(pos) != 2:
					print(f"  position[{i}] has {len(pos)} dimensions (expected 2)")
		if velocities is not None:
			print("velocities", velocities)
			for i, vel in enumerate(velocities):
				if len(vel) != 2:
					print(f"  velocity[{i}] has {len(vel)} dimensions (expected 2)")
