from __future__ import annotations
import math
from typing import Iterable, List, Optional, TYPE_CHECKING
import numpy as np

from .body import Body
from .sim_config import SimConfig
from .forces import gravitational_force
from .physics_utils import bodies_to_arrays, arrays_to_bodies
from .simulation_validator import SimulationValidator
from .diagnostics import Diagnostics

if TYPE_CHECKING:
	from .drawing import ImageDrawer

"""
This central module implements NBodySimulation, the driving loop around a flat list of Body objects. Each step first computes the net force on every body from the positions at the start of the step into a temporary (N, 2) array, and only then applies Body.advance to every body, so no force ever sees a partially updated neighbour. Forces come either from the pairwise Body.net_force_x/net_force_y sums (summed in insertion order) or from the vectorized numpy kernel, selected by SimConfig.force_backend. The class also owns the optional drawer, the elapsed simulated time, in-memory snapshots, and a Diagnostics helper. Invalid bodies are rejected when added; once stepping starts, non-finite values propagate without interruption.

"""


class NBodySimulation:

	def __init__(
		self,
		bodies: Optional[Iterable[Body]] = None,
		cfg: Optional[SimConfig] = None,
		drawer: Optional["ImageDrawer"] = None,
	) -> None:
		if cfg is None:
			self.cfg = SimConfig()
		else:
			self.cfg = cfg.copy()
		self.G = float(self.cfg.G)
		self.drawer = drawer

		self.bodies: List[Body] = []
		self.time: float = 0.0
		self.n_steps: int = 0

		self.diagnostics = Diagnostics(self)

		if bodies is not None:
			self.add_bodies(bodies)

	@property
	def n_bodies(self) -> int:
		return len(self.bodies)

	@property
	def masses(self) -> np.ndarray:
		return bodies_to_arrays(self.bodies)[0]

	@property
	def positions(self) -> np.ndarray:
		return bodies_to_arrays(self.bodies)[1]

	@property
	def velocities(self) -> np.ndarray:
		return bodies_to_arrays(self.bodies)[2]

	def add_body(self, body: Body) -> bool:
		if not SimulationValidator.body_is_valid(body):
			SimulationValidator.report_invalid_body(f"body #{len(self.bodies)} rejected", body)
			return False
		if any(b is body for b in self.bodies):
			print(f"[warning] body {body.image_id!r} already in simulation; ignored")
			return False
		self.bodies.append(body)
		return True

	def add_bodies(self, bodies: Iterable[Body]) -> bool:
		ok = True
		for b in bodies:
			if not self.add_body(b):
				ok = False
		return ok

	def compute_forces(self) -> np.ndarray:
		n = len(self.bodies)
		forces = np.zeros((n, 2), dtype=np.float64)
		if n < 2:
			return forces

		if self.cfg.force_backend == "numpy":
			masses, positions, _ = bodies_to_arrays(self.bodies)
			return gravitational_force(positions, masses, self.G)

		for i, b in enumerate(self.bodies):
			forces[i, 0] = b.net_force_x(self.bodies, self.G)
			forces[i, 1] = b.net_force_y(self.bodies, self.G)
		return forces

	def step(self, dt: Optional[float] = None) -> None:
		if dt is None:
			dt = self.cfg.dt
		dt = float(dt)
		if not math.isfinite(dt) or dt <= 0.0:
			print(f"[warning] step called with dt={dt}; call ignored")
			return

		forces = self.compute_forces()
		for b, (fx, fy) in zip(self.bodies, forces):
			b.advance(dt, float(fx), float(fy))

		self.time += dt
		self.n_steps += 1

		if self.cfg.warn_nonfinite:
			self.diagnostics.check_finite()

	def render(self) -> None:
		drawer = self.drawer
		if drawer is None:
			return
		drawer.begin_frame()
		for b in self.bodies:
			b.render(drawer)
		drawer.end_frame()

	def run(
		self,
		total_time: Optional[float] = None,
		dt: Optional[float] = None,
		render: Optional[bool] = None,
	) -> int:
		if total_time is None:
			total_time = self.cfg.total_time
		if dt is None:
			dt = self.cfg.dt
		if render is None:
			render = self.cfg.render
		dt = float(dt)
		if not math.isfinite(dt) or dt <= 0.0:
			print(f"[warning] run called with dt={dt}; nothing to do")
			return 0

		do_render = bool(render) and self.drawer is not None
		if do_render:
			self.render()

		taken = 0
		while self.time < total_time:
			before = self.time
			self.step(dt)
			if self.time == before:
				print(f"[warning] dt={dt} no longer advances t={before:.6g}; run stopped")
				taken += 1
				break
			taken += 1
			if do_render:
				self.render()
		return taken

	def snapshot(self) -> dict:
		masses, positions, velocities = bodies_to_arrays(self.bodies)
		return {
			"masses": masses,
			"positions": positions,
			"velocities": velocities,
			"image_ids": [b.image_id for b in self.bodies],
			"time": self.time,
			"n_steps": self.n_steps,
		}

	def restore(self, snap: dict) -> bool:
		masses = snap["masses"]
		positions = snap["positions"]
		velocities = snap["velocities"]
		if not SimulationValidator.state_is_valid(masses, positions, velocities):
			SimulationValidator.report_invalid_state(
				"snapshot rejected", masses, positions, velocities,
			)
			return False
		image_ids = list(snap.get("image_ids", [""] * len(masses)))
		if len(image_ids) != len(masses):
			SimulationValidator.report_invalid_state(
				f"snapshot rejected: {len(image_ids)} image ids for {len(masses)} bodies",
				masses, positions, velocities,
			)
			return False
		self.bodies = arrays_to_bodies(masses, positions, velocities, image_ids)
		self.time = float(snap.get("time", 0.0))
		self.n_steps = int(snap.get("n_steps", 0))
		return True

	def clone(self) -> "NBodySimulation":
		other = NBodySimulation(cfg=self.cfg, drawer=self.drawer)
		other.bodies = [b.copy() for b in self.bodies]
		other.time = self.time
		other.n_steps = self.n_steps
		return other
