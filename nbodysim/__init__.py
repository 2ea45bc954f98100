"""
This initialization file serves as the main entry point for the 2D N-body simulation
package, exposing all public APIs through a clean namespace.

It re-exports the Body value object, the NBodySimulation driver and its SimConfig, the
vectorized force kernel and geometry helpers, diagnostics and validation utilities, the
drawing seam (ImageDrawer, RecordingDrawer, world_to_screen) and the built-in presets.
PygameDrawer is left in nbodysim.pygame_drawer so that importing the package never opens
a display.
"""

from .constants import G_NEWTON
from .sim_config import SimConfig
from .body import Body
from .simulation import NBodySimulation
from .forces import gravitational_force
from .geometry_cache import geometry_buffers
from .physics_utils import (
    remove_center_of_mass_velocity,
    bodies_to_arrays,
    arrays_to_bodies,
)
from .simulation_validator import SimulationValidator
from .diagnostics import Diagnostics
from .drawing import ImageDrawer, RecordingDrawer, world_to_screen
from .presets import inner_solar_system, sun_earth, equal_mass_polygon, PRESETS


__all__ = [
    "G_NEWTON",
    "SimConfig",
    "Body",
    "NBodySimulation",
    "gravitational_force",
    "geometry_buffers",
    "remove_center_of_mass_velocity",
    "bodies_to_arrays",
    "arrays_to_bodies",
    "SimulationValidator",
    "Diagnostics",
    "ImageDrawer",
    "RecordingDrawer",
    "world_to_screen",
    "inner_solar_system",
    "sun_earth",
    "equal_mass_polygon",
    "PRESETS",
]
