import argparse
from typing import List, Optional

from .sim_config import SimConfig
from .simulation import NBodySimulation
from .presets import PRESETS

"""
This module is the command-line entry point. main builds a SimConfig from the arguments, loads one of the built-in presets, runs the simulation for the requested duration (opening a pygame window only when --render is given), and prints the final state of every body followed by the relative energy drift of the run. The output format mirrors the classic planets listing: x, y, vx, vy, mass, image id per line.

"""


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
	cfg = SimConfig()
	parser = argparse.ArgumentParser(prog="nbodysim", description="2D Newtonian n-body simulation")
	parser.add_argument("--preset", choices=sorted(PRESETS), default="inner")
	parser.add_argument("--total-time", type=float, default=cfg.total_time)
	parser.add_argument("--dt", type=float, default=cfg.dt)
	parser.add_argument("--backend", choices=["pairwise", "numpy"], default=cfg.force_backend)
	parser.add_argument("--render", action="store_true")
	parser.add_argument("--image-dir", default=cfg.image_dir)
	parser.add_argument("--size", type=int, default=cfg.window_size)
	return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
	args = _parse_args(argv)

	cfg = SimConfig(
		dt=args.dt,
		total_time=args.total_time,
		force_backend=args.backend,
		render=args.render,
		image_dir=args.image_dir,
		window_size=args.size,
	)

	drawer = None
	if cfg.render:
		from .pygame_drawer import PygameDrawer
		drawer = PygameDrawer(
			cfg.universe_radius,
			size=cfg.window_size,
			image_dir=cfg.image_dir,
			background=cfg.background_image,
		)

	sim = NBodySimulation(PRESETS[args.preset](), cfg=cfg, drawer=drawer)
	if sim.n_bodies == 0:
		print("[error] No bodies loaded")
		return 1

	E0 = sim.diagnostics.total_energy()
	steps = sim.run()
	if drawer is not None:
		drawer.close()

	print(f"{sim.n_bodies}")
	print(f"{cfg.universe_radius:.2e}")
	for b in sim.bodies:
		print(f"{b.x:11.4e} {b.y:11.4e} {b.vx:11.4e} {b.vy:11.4e} {b.mass:11.4e} {b.image_id:>12s}")

	print(f"Steps: {steps}, simulated time: {sim.time:.6g} s")
	print(f"Relative energy drift: {sim.diagnostics.relative_energy_drift(E0):.3e}")
	return 0


if __name__ == "__main__":
	raise SystemExit(main())
