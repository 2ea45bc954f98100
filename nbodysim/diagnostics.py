from __future__ import annotations
from typing import ClassVar, Dict, List, TYPE_CHECKING
import numpy as np

from .geometry_cache import geometry_buffers
from .physics_utils import bodies_to_arrays

if TYPE_CHECKING:
	from .simulation import NBodySimulation

"""
This module implements read-only physical diagnostics for an NBodySimulation. The Diagnostics class computes kinetic, potential and total energy, total linear momentum, the center of mass, and the relative energy drift against a reference value. nonfinite_bodies lists the bodies whose state has become NaN or infinite, and check_finite reports them through a rate-limited print; neither ever modifies the simulation, so a run that degenerates keeps its documented NaN behavior. Print rate limits come from the simulation's SimConfig (diag_prints, diag_print_limit, diag_print_interval).

"""


class Diagnostics:
	_GLOBAL_DIAG_COUNTS: ClassVar[Dict[str, int]] = {}

	def __init__(self, sim: "NBodySimulation") -> None:
		self.sim = sim

	def _arrays(self):
		return bodies_to_arrays(self.sim.bodies)

	def kinetic_energy(self) -> float:
		m, _, v = self._arrays()
		if m.size == 0:
			return 0.0
		return float(0.5 * np.sum(m * np.einsum("ij,ij->i", v, v)))

	def potential_energy(self) -> float:
		m, q, _ = self._arrays()
		n = m.size
		if n < 2 or self.sim.G == 0.0:
			return 0.0
		_, r2, _ = geometry_buffers(q)
		iu = np.triu_indices(n, 1)
		with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
			inv_r = 1.0 / np.sqrt(r2[iu])
			return float(-self.sim.G * np.sum(m[iu[0]] * m[iu[1]] * inv_r))

	def total_energy(self) -> float:
		return self.kinetic_energy() + self.potential_energy()

	def momentum(self) -> np.ndarray:
		m, _, v = self._arrays()
		if m.size == 0:
			return np.zeros(2)
		return np.sum(m[:, None] * v, axis=0)

	def center_of_mass(self) -> np.ndarray:
		m, q, _ = self._arrays()
		total = float(np.sum(m))
		if total == 0.0:
			return np.zeros(2)
		return np.sum(m[:, None] * q, axis=0) / total

	def relative_energy_drift(self, E0: float) -> float:
		E = self.total_energy()
		if E0 == 0.0:
			return abs(E - E0)
		return abs((E - E0) / E0)

	def nonfinite_bodies(self) -> List[str]:
		out = []
		for b in self.sim.bodies:
			if not np.all(np.isfinite((b.x, b.y, b.vx, b.vy))):
				out.append(b.image_id)
		return out

	def check_finite(self) -> bool:
		bad = self.nonfinite_bodies()
		if not bad:
			return True
		self._rate_limited_diag_print(
			"nonfinite",
			f"[diag] non-finite state at t={self.sim.time:.6g} for: {', '.join(bad)}",
		)
		return False

	def _rate_limited_diag_print(self, key: str, msg: str) -> None:
		cfg = getattr(self.sim, "cfg", None)
		if not getattr(cfg, "diag_prints", True):
			return
		limit = max(0, int(getattr(cfg, "diag_print_limit", 3)))
		interval = max(1, int(getattr(cfg, "diag_print_interval", 1000)))

		counts = Diagnostics._GLOBAL_DIAG_COUNTS
		c = counts[key] = counts.get(key, 0) + 1
		if c <= limit:
			print(msg)
		elif c % interval == 0:
			print(f"{msg} (occurrence #{c})")

	@classmethod
	def reset_counts(cls) -> None:
		cls._GLOBAL_DIAG_COUNTS.clear()
