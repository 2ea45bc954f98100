from __future__ import annotations
import numpy as np
from typing import Tuple

"""
This module provides the pairwise geometry shared by the vectorized force kernel and the energy diagnostics. The geometry_buffers function computes pairwise position differences, squared distances, and inverse cubed distances in a single pass, using Einstein summation notation. Self-interactions are excluded by zeroing the diagonal of the inverse cube; coincident distinct bodies are left unmasked, so their entries come out infinite exactly as the scalar Body arithmetic would. It assumes 2D position arrays.

"""




__all__ = ["geometry_buffers"]

def geometry_buffers(
    pos: np.ndarray,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    pos = np.asarray(pos, dtype=np.float64)

    diff = pos[:, None, :] - pos[None, :, :]
    r2 = np.einsum("ijk,ijk->ij", diff, diff, optimize=True)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        inv_r3 = np.power(r2, -1.5)

    np.fill_diagonal(inv_r3, 0.0)
    return diff, r2, inv_r3
