"""
This module implements PygameDrawer, the ImageDrawer that puts the simulation on screen.

Images are loaded from ``image_dir/<image_id>`` with pygame.image.load and cached per
id; each draw call blits the image centred on the body's position mapped through
world_to_screen. An image that cannot be found is reported once with a warning and a
grey circle is drawn in its place, so a run without the image assets still shows the
bodies. When no target surface is supplied the drawer opens its own pygame window and
presents it at the end of every frame.
"""

from __future__ import annotations
import math
import os
from typing import Dict, Optional, Tuple

import pygame

from .constants import IMAGE_DIR, BACKGROUND_IMAGE
from .drawing import world_to_screen


_PLACEHOLDER_COLOR = (160, 160, 160)
_PLACEHOLDER_RADIUS = 6
_OFFSCREEN_LIMIT = 1.0e6


class PygameDrawer:
    def __init__(
        self,
        radius: float,
        size: int = 800,
        image_dir: str = IMAGE_DIR,
        background: Optional[str] = BACKGROUND_IMAGE,
        surface: Optional[pygame.Surface] = None,
        caption: str = "nbodysim",
    ) -> None:
        self.radius = float(radius)
        self.image_dir = image_dir
        self.background = background
        self._images: Dict[str, Optional[pygame.Surface]] = {}
        self._owns_display = surface is None

        if surface is None:
            pygame.init()
            surface = pygame.display.set_mode((int(size), int(size)))
            pygame.display.set_caption(caption)
        self.surface = surface

    @property
    def size(self) -> Tuple[int, int]:
        return self.surface.get_size()

    def _load(self, image_id: str) -> Optional[pygame.Surface]:
        if image_id in self._images:
            return self._images[image_id]

        path = os.path.join(self.image_dir, image_id)
        if os.path.isfile(path):
            img = pygame.image.load(path)
            if self._owns_display:
                img = img.convert_alpha()
        else:
            print(f"[warning] image not found: {path} (drawing placeholder)")
            img = None
        self._images[image_id] = img
        return img

    def begin_frame(self) -> None:
        self.surface.fill((0, 0, 0))
        if self.background:
            bg = self._load(self.background)
            if bg is not None:
                bg = pygame.transform.scale(bg, self.size)
                self.surface.blit(bg, (0, 0))

    def draw_image_at(self, image_id: str, x: float, y: float) -> None:
        width, height = self.size
        sx, sy = world_to_screen(x, y, self.radius, width, height)
        if not (math.isfinite(sx) and math.isfinite(sy)):
            return
        if abs(sx) > _OFFSCREEN_LIMIT or abs(sy) > _OFFSCREEN_LIMIT:
            return
        center = (int(round(sx)), int(round(sy)))

        img = self._load(image_id)
        if img is None:
            pygame.draw.circle(self.surface, _PLACEHOLDER_COLOR, center, _PLACEHOLDER_RADIUS)
            return
        rect = img.get_rect(center=center)
        self.surface.blit(img, rect)

    def end_frame(self) -> None:
        if self._owns_display:
            pygame.display.flip()
            pygame.event.pump()

    def close(self) -> None:
        if self._owns_display:
            pygame.display.quit()
