"""
This module defines the Body class, the point-mass value object of the simulation.

A Body stores a 2D position (x/y), a 2D velocity (vx/vy), a mass and the id of the
image used to draw it. It computes the Newtonian attraction exerted on it by other
bodies, sums those forces over a collection, and advances its own state with a
semi-implicit Euler step once the caller supplies the net force. Coincident positions
are not guarded: the arithmetic runs under a silenced numpy error state so the
resulting inf/NaN values propagate through later steps instead of raising.
"""

from __future__ import annotations
from typing import Iterable, TYPE_CHECKING
import numpy as np

from .constants import G_NEWTON

if TYPE_CHECKING:
	from .drawing import ImageDrawer




class Body:
	__slots__ = ("_x", "_y", "_vx", "_vy", "_mass", "_image_id")

	def __init__(self, x: float, y: float, vx: float, vy: float,
				 mass: float, image_id: str) -> None:
		self._x = float(x)
		self._y = float(y)
		self._vx = float(vx)
		self._vy = float(vy)
		self._mass = float(mass)
		self._image_id = str(image_id)

	@classmethod
	def from_body(cls, other: "Body") -> "Body":
		return cls(other._x, other._y, other._vx, other._vy,
				   other._mass, other._image_id)

	def copy(self) -> "Body":
		return Body.from_body(self)

	__copy__ = copy

	def __deepcopy__(self, memo) -> "Body":
		return Body.from_body(self)

	@property
	def x(self) -> float:
		return self._x

	@property
	def y(self) -> float:
		return self._y

	@property
	def vx(self) -> float:
		return self._vx

	@property
	def vy(self) -> float:
		return self._vy

	@property
	def mass(self) -> float:
		return self._mass

	@property
	def image_id(self) -> str:
		return self._image_id

	name = image_id

	def distance_to(self, other: "Body") -> float:
		dx = self._x - other._x
		dy = self._y - other._y
		return float(np.sqrt(dx * dx + dy * dy))

	def force_magnitude_from(self, other: "Body", G: float = G_NEWTON) -> float:
		"""Magnitude of the gravitational pull of ``other`` on this body.

		Returns inf (or NaN) when both bodies sit at the same position.
		"""
		d = np.float64(self.distance_to(other))
		with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
			f = np.float64(self._mass) * other._mass
			f = f / (d * d)
			return float(f * G)

	def force_component_x(self, other: "Body", G: float = G_NEWTON) -> float:
		dx = np.float64(other._x - self._x)
		with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
			fx = self.force_magnitude_from(other, G) * dx
			return float(fx / np.float64(self.distance_to(other)))

	def force_component_y(self, other: "Body", G: float = G_NEWTON) -> float:
		dy = np.float64(other._y - self._y)
		with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
			fy = self.force_magnitude_from(other, G) * dy
			return float(fy / np.float64(self.distance_to(other)))

	def net_force_x(self, bodies: Iterable["Body"], G: float = G_NEWTON) -> float:
		"""Sum of the x components exerted by every body in ``bodies`` except this one.

		Only the entry that *is* this object is skipped; a distinct body with equal
		fields still contributes. Terms are added in iteration order.
		"""
		total = 0.0
		for b in bodies:
			if b is not self:
				total += self.force_component_x(b, G)
		return total

	def net_force_y(self, bodies: Iterable["Body"], G: float = G_NEWTON) -> float:
		total = 0.0
		for b in bodies:
			if b is not self:
				total += self.force_component_y(b, G)
		return total

	def advance(self, dt: float, net_force_x: float, net_force_y: float) -> None:
		"""Semi-implicit Euler: velocity first, then position from the new velocity."""
		m = np.float64(self._mass)
		with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
			ax = np.float64(net_force_x) / m
			ay = np.float64(net_force_y) / m
			nvx = self._vx + dt * ax
			nvy = self._vy + dt * ay
			nx = self._x + dt * nvx
			ny = self._y + dt * nvy

		self._x = float(nx)
		self._y = float(ny)
		self._vx = float(nvx)
		self._vy = float(nvy)

	def render(self, drawer: "ImageDrawer") -> None:
		drawer.draw_image_at(self._image_id, self._x, self._y)

	def __repr__(self) -> str:
		return (f"Body(x={self._x}, y={self._y}, vx={self._vx}, vy={self._vy}, "
				f"mass={self._mass}, image_id={self._image_id!r})")
