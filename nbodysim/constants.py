from __future__ import annotations

import os
from typing import Final

"""
This module defines the physical constants and run defaults shared across the package. It includes G_NEWTON, the Newtonian gravitational constant in SI units, the classic planets time step and duration, and the default image directory used by the display collaborator (with environment variable override support). Values are plain floats so they can be fed straight into numpy or scalar arithmetic.


"""


G_NEWTON: Final[float] = 6.674e-11

DEFAULT_DT: Final[float] = 25000.0
DEFAULT_TOTAL_TIME: Final[float] = 157788000.0

UNIVERSE_RADIUS: Final[float] = 2.50e11

IMAGE_DIR: str = os.getenv("NBODYSIM_IMAGE_DIR", "images")
BACKGROUND_IMAGE: str = "starfield.jpg"
