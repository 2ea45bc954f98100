from __future__ import annotations
from dataclasses import dataclass

from .constants import (
	G_NEWTON,
	DEFAULT_DT,
	DEFAULT_TOTAL_TIME,
	UNIVERSE_RADIUS,
	IMAGE_DIR,
	BACKGROUND_IMAGE,
)

"""
This central configuration module defines all run parameters through the SimConfig dataclass. Key parameters include the gravitational constant, the fixed time step and total duration, the force backend selection, display settings for the optional pygame window, and the diagnostic print controls. The class provides a copy method so a simulation never shares its configuration with the caller, and validates the force backend against the allowed options. It serves as the single source of truth for simulation behavior.

"""
_ALLOWED_BACKENDS = {
	"pairwise",
	"numpy",
}


@dataclass
class SimConfig:
	G: float = G_NEWTON
	dt: float = DEFAULT_DT
	total_time: float = DEFAULT_TOTAL_TIME
	force_backend: str = "pairwise"
	render: bool = False
	universe_radius: float = UNIVERSE_RADIUS
	window_size: int = 800
	image_dir: str = IMAGE_DIR
	background_image: str | None = BACKGROUND_IMAGE
	warn_nonfinite: bool = False
	diag_prints: bool = True
	diag_print_limit: int = 3
	diag_print_interval: int = 1000

	def __post_init__(self) -> None:
		if self.force_backend not in _ALLOWED_BACKENDS:
			print(f"[warning] unknown force_backend {self.force_backend!r}; using 'pairwise'")
			self.force_backend = "pairwise"

	def copy(self) -> "SimConfig":
		new = object.__new__(SimConfig)
		new.__dict__ = dict(getattr(self, "__dict__", {}))
		return new
