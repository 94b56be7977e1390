"""Animated cursor outline: four corners easing towards the cursor's cell."""

from __future__ import annotations

import dataclasses
import enum
import math
from dataclasses import dataclass, field

from glyphgrid.animation import F32_EPSILON, Point, ease_out_expo, ease_point, lerp
from glyphgrid.cursor_settings import CursorSettings

DEFAULT_CELL_PERCENTAGE = 1.0 / 8.0

STANDARD_CORNERS: tuple[tuple[float, float], ...] = (
    (-0.5, -0.5),
    (0.5, -0.5),
    (0.5, 0.5),
    (-0.5, 0.5),
)


class CursorShape(enum.Enum):
    BLOCK = "block"
    VERTICAL = "vertical"
    HORIZONTAL = "horizontal"


def _length_multiplier(distance: float) -> float:
    if distance <= 0.0:
        return 0.0
    return max(math.log10(distance), 0.0)


@dataclass
class Corner:
    """One corner of the cursor, positioned relative to the cell's centre."""

    start_position: Point = field(default_factory=Point)
    current_position: Point = field(default_factory=Point)
    relative_position: Point = field(default_factory=Point)
    previous_destination: Point = field(default_factory=lambda: Point(-1000.0, -1000.0))
    length_multiplier: float = 1.0
    t: float = 0.0

    def update(
        self,
        settings: CursorSettings,
        font_dimensions: Point,
        destination: Point,
        dt: float,
        immediate_movement: bool,
    ) -> bool:
        """Move towards ``destination`` (the cell centre); return whether still animating."""
        if destination != self.previous_destination:
            self.t = 0.0
            self.start_position = self.current_position
            self.previous_destination = destination
            if settings.distance_length_adjust:
                self.length_multiplier = _length_multiplier(
                    (destination - self.current_position).length()
                )
            else:
                self.length_multiplier = 1.0

        if abs(self.t - 1.0) < F32_EPSILON:
            return False

        relative_scaled = Point(
            self.relative_position.x * font_dimensions.x,
            self.relative_position.y * font_dimensions.y,
        )
        corner_destination = destination + relative_scaled

        if immediate_movement:
            self.t = 1.0
            self.current_position = corner_destination
            return True

        # Corners facing the direction of travel move faster than trailing ones.
        travel_direction = (destination - self.current_position).normalized()
        corner_direction = self.relative_position.normalized()
        direction_alignment = travel_direction.dot(corner_direction)

        trail = min(max(1.0 - settings.trail_size, 0.0), 1.0)
        corner_dt = dt * lerp(1.0, trail, -direction_alignment)
        duration = settings.animation_length * self.length_multiplier
        if duration == 0.0:
            self.t = 1.0
        else:
            self.t = min(self.t + corner_dt / duration, 1.0)

        self.current_position = ease_point(
            ease_out_expo, self.start_position, corner_destination, self.t
        )
        return True


class CursorAnimation:
    """The four corners of the cursor and the shape they outline."""

    def __init__(self) -> None:
        self.corners: list[Corner] = [Corner() for _ in STANDARD_CORNERS]
        self.shape = CursorShape.BLOCK
        self.set_shape(CursorShape.BLOCK, DEFAULT_CELL_PERCENTAGE)

    @property
    def positions(self) -> list[Point]:
        """Current positions of the corners, clockwise from the top left."""
        return [corner.current_position for corner in self.corners]

    def set_shape(self, shape: CursorShape, cell_percentage: float) -> None:
        """Lay the corners out for ``shape``; bars cover ``cell_percentage`` of the cell."""
        self.shape = shape
        new_corners = []
        for corner, (x, y) in zip(self.corners, STANDARD_CORNERS):
            if shape is CursorShape.BLOCK:
                relative = Point(x, y)
            elif shape is CursorShape.VERTICAL:
                relative = Point((x + 0.5) * cell_percentage - 0.5, y)
            else:
                relative = Point(x, -((-y + 0.5) * cell_percentage - 0.5))
            new_corners.append(
                dataclasses.replace(
                    corner,
                    relative_position=relative,
                    t=0.0,
                    start_position=corner.current_position,
                )
            )
        self.corners = new_corners

    def update(
        self,
        settings: CursorSettings,
        destination: Point,
        cursor_dimensions: Point,
        dt: float,
        immediate_movement: bool,
    ) -> bool:
        """Move the corners towards the cell at ``destination``; return whether animating.

        ``destination`` is the top-left pixel of the cursor's cell.
        """
        center = destination + cursor_dimensions * 0.5
        if center.is_zero():
            return False
        results = [
            corner.update(settings, cursor_dimensions, center, dt, immediate_movement)
            for corner in self.corners
        ]
        return any(results)