"""Cursor visual effects: expanding highlights and particle trails."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass, field
from typing import Optional, Union

from glyphgrid.animation import Point
from glyphgrid.cursor_settings import CursorSettings, VfxMode

_U64_MASK = (1 << 64) - 1
_U32_MASK = (1 << 32) - 1
_PCG_MULTIPLIER = 6_364_136_223_846_793_005


def _to_f32(value: float) -> float:
    return struct.unpack("<f", struct.pack("<f", value))[0]


class PcgRng:
    """Small deterministic PCG random number generator (XSH-RR, 64-bit state)."""

    def __init__(
        self,
        state: int = 0x853C_49E6_748F_EA9B,
        stream: int = 0xDA3E_39CB_94B9_5BDB,
    ) -> None:
        self.state = state & _U64_MASK
        self.inc = ((stream << 1) | 1) & _U64_MASK

    def next_u32(self) -> int:
        old_state = self.state
        self.state = (old_state * _PCG_MULTIPLIER + self.inc) & _U64_MASK

        rot = old_state >> 59
        xsh = (((old_state >> 18) ^ old_state) >> 27) & _U32_MASK
        return ((xsh >> rot) | (xsh << ((32 - rot) & 31))) & _U32_MASK

    def next_float(self) -> float:
        """A number in [0, 1): the next 32-bit output scaled down by 2**32."""
        (bits,) = struct.unpack("<Q", struct.pack("<d", float(self.next_u32())))
        exponent = (bits >> 52) & 0x7FF
        new_exponent = max(exponent, 32) - 32
        new_bits = (new_exponent << 52) | (bits & 0x801F_FFFF_FFFF_FFFF)
        (value,) = struct.unpack("<d", struct.pack("<Q", new_bits))
        return _to_f32(value)

    def rand_dir(self) -> Point:
        """A vector with both components in [-1, 1); not normalized."""
        x = self.next_float()
        y = self.next_float()
        return Point(x * 2.0 - 1.0, y * 2.0 - 1.0)

    def rand_dir_normalized(self) -> Point:
        return self.rand_dir().normalized()


def rotate_vec(v: Point, rot: float) -> Point:
    """Rotate ``v`` by ``rot`` radians."""
    sin = math.sin(rot)
    cos = math.cos(rot)
    return Point(v.x * cos - v.y * sin, v.x * sin + v.y * cos)


class PointHighlight:
    """A shape that grows out of the cursor's centre and fades away."""

    def __init__(self, mode: VfxMode) -> None:
        if not mode.is_highlight:
            raise ValueError(f"{mode!r} is not a highlight mode")
        self.mode = mode
        self.t = 0.0
        self.center_position = Point(0.0, 0.0)

    def update(
        self,
        settings: CursorSettings,
        destination: Point,
        cursor_dimensions: Point,
        dt: float,
    ) -> bool:
        """Advance the animation; return whether it is still running."""
        self.t = min(self.t + dt * 5.0, 1.0)
        return self.t < 1.0

    def restart(self, position: Point) -> None:
        self.t = 0.0
        self.center_position = position


@dataclass
class Particle:
    pos: Point
    speed: Point
    rotation_speed: float
    lifetime: float


def _particle_count(amount: float) -> int:
    if not math.isfinite(amount) or amount <= 0.0:
        return 0
    return int(amount)


class ParticleTrail:
    """Particles spawned along the path the cursor travels."""

    def __init__(self, trail_mode: VfxMode, rng: Optional[PcgRng] = None) -> None:
        if not trail_mode.is_trail:
            raise ValueError(f"{trail_mode!r} is not a trail mode")
        self.trail_mode = trail_mode
        self.rng = rng if rng is not None else PcgRng()
        self.particles: list[Particle] = []
        self.previous_cursor_dest = Point(0.0, 0.0)

    def update(
        self,
        settings: CursorSettings,
        destination: Point,
        cursor_dimensions: Point,
        dt: float,
    ) -> bool:
        """Age, move and spawn particles; return whether any are alive."""
        for particle in self.particles:
            particle.lifetime -= dt
        self.particles = [p for p in self.particles if p.lifetime > 0.0]

        for particle in self.particles:
            particle.pos = particle.pos + particle.speed * dt
            particle.speed = rotate_vec(particle.speed, dt * particle.rotation_speed)

        if destination != self.previous_cursor_dest:
            self._spawn(settings, destination, cursor_dimensions)
            self.previous_cursor_dest = destination

        return bool(self.particles)

    def _spawn(
        self, settings: CursorSettings, destination: Point, cursor_dimensions: Point
    ) -> None:
        travel = destination - self.previous_cursor_dest
        travel_distance = travel.length()
        relative_distance = (
            travel_distance / cursor_dimensions.y if cursor_dimensions.y else math.inf
        )

        count = _particle_count(
            relative_distance**1.5 * settings.vfx_particle_density * 0.01
        )
        prev_p = self.previous_cursor_dest
        mode = self.trail_mode

        for i in range(count):
            t = i / count

            if mode is VfxMode.RAILGUN:
                phase = (
                    t / math.pi * settings.vfx_particle_phase * relative_distance
                )
                speed = (
                    Point(math.sin(phase), math.cos(phase))
                    * 2.0
                    * settings.vfx_particle_speed
                )
            elif mode is VfxMode.TORPEDO:
                travel_dir = travel.normalized()
                particle_dir = (
                    self.rng.rand_dir_normalized() - travel_dir * 1.5
                ).normalized()
                speed = particle_dir * settings.vfx_particle_speed
            else:
                base_dir = self.rng.rand_dir_normalized()
                direction = Point(base_dir.x * 0.5, 0.4 + abs(base_dir.y))
                speed = direction * 3.0 * settings.vfx_particle_speed

            if mode is VfxMode.RAILGUN:
                pos = prev_p + travel * t
            else:
                pos = (
                    prev_p
                    + travel * self.rng.next_float()
                    + Point(0.0, cursor_dimensions.y * 0.5)
                )

            if mode is VfxMode.RAILGUN:
                rotation_speed = math.pi * settings.vfx_particle_curl
            else:
                rotation_speed = (
                    (self.rng.next_float() - 0.5)
                    * (math.pi / 2.0)
                    * settings.vfx_particle_curl
                )

            self.particles.append(
                Particle(
                    pos=pos,
                    speed=speed,
                    rotation_speed=rotation_speed,
                    lifetime=t * settings.vfx_particle_lifetime,
                )
            )

    def restart(self, position: Point) -> None:
        """Trails keep their particles when the cursor shape changes."""


CursorVfx = Union[PointHighlight, ParticleTrail]


def new_cursor_vfx(mode: VfxMode) -> Optional[CursorVfx]:
    """The effect for ``mode``, or None when effects are disabled."""
    if mode.is_highlight:
        return PointHighlight(mode)
    if mode.is_trail:
        return ParticleTrail(mode)
    return None