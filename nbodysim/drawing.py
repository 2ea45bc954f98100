"""
This module defines the display-side seam of the simulation.

ImageDrawer is the capability a Body needs to render itself: draw the image named by an
image id centred at a world position. begin_frame/end_frame bracket one frame so a
driver can clear and present the surface around the per-body calls. RecordingDrawer is
a headless implementation that keeps every call, used by tests and by runs without a
window; world_to_screen maps the square world viewport onto pixel coordinates for the
pygame drawer.
"""

from __future__ import annotations
from typing import List, Protocol, Tuple, runtime_checkable




DrawCall = Tuple[str, float, float]


@runtime_checkable
class ImageDrawer(Protocol):
	def draw_image_at(self, image_id: str, x: float, y: float) -> None: ...

	def begin_frame(self) -> None: ...

	def end_frame(self) -> None: ...


class RecordingDrawer:
	def __init__(self) -> None:
		self.frames: List[List[DrawCall]] = []
		self._current: List[DrawCall] | None = None

	def begin_frame(self) -> None:
		self._current = []

	def draw_image_at(self, image_id: str, x: float, y: float) -> None:
		if self._current is None:
			self.begin_frame()
		self._current.append((image_id, float(x), float(y)))

	def end_frame(self) -> None:
		if self._current is not None:
			self.frames.append(self._current)
		self._current = None

	@property
	def calls(self) -> List[DrawCall]:
		out: List[DrawCall] = []
		for frame in self.frames:
			out.extend(frame)
		if self._current:
			out.extend(self._current)
		return out


def world_to_screen(
	x: float,
	y: float,
	radius: float,
	width: int,
	height: int,
) -> Tuple[float, float]:
	"""Map world ``(x, y)`` in ``[-radius, radius]^2`` (y up) to pixels (y down)."""
	sx = (x + radius) / (2.0 * radius) * width
	sy = height - (y + radius) / (2.0 * radius) * height
	return sx, sy
