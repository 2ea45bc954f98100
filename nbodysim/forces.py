"""
This module implements the vectorized gravitational force kernel.

The gravitational_force function computes the net Newtonian force on every body at
once from numpy position and mass arrays, using geometry_buffers for the pairwise
distances. It is the "numpy" force backend of NBodySimulation and agrees with the
pairwise Body.net_force_x/net_force_y sums up to floating-point summation order. There
is no softening: coincident bodies produce NaN rows, silently. All functions assume 2D
position arrays.
"""

from __future__ import annotations
import numpy as np
from .constants import G_NEWTON
from .geometry_cache import geometry_buffers
from numpy.typing import NDArray




def gravitational_force(
    q: NDArray[np.floating],
    m: NDArray[np.floating],
    G: float = G_NEWTON,
) -> NDArray[np.floating]:
    q = np.asarray(q, dtype=np.float64).reshape(-1, 2)
    m = np.asarray(m, dtype=np.float64).ravel()

    if q.shape[0] < 2 or float(G) == 0.0:
        return np.zeros_like(q)

    dr, _, inv_r3 = geometry_buffers(q)
    with np.errstate(invalid="ignore", over="ignore"):
        F_pair = -(float(G) * m[:, None] * m[None, :])[..., None] * inv_r3[..., None] * dr
        return F_pair.sum(axis=1)
