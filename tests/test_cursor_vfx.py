import math
from dataclasses import replace

import pytest

from glyphgrid.animation import Point
from glyphgrid.cursor_settings import CursorSettings, VfxMode
from glyphgrid.cursor_vfx import (
    ParticleTrail,
    PcgRng,
    PointHighlight,
    new_cursor_vfx,
    rotate_vec,
)

DIMS = Point(10.0, 10.0)
FAR = Point(1000.0, 0.0)


def test_rng_is_deterministic():
    a, b = PcgRng(), PcgRng()
    assert [a.next_u32() for _ in range(20)] == [b.next_u32() for _ in range(20)]


def test_rng_outputs_fit_32_bits():
    rng = PcgRng()
    values = [rng.next_u32() for _ in range(200)]
    assert all(0 <= v < 2**32 for v in values)
    assert len(set(values)) > 190


def test_next_float_matches_scaled_integer():
    ints, floats = PcgRng(), PcgRng()
    for _ in range(100):
        expected = math.ldexp(ints.next_u32(), -32)
        assert floats.next_float() == pytest.approx(expected, rel=1e-6, abs=1e-12)


def test_next_float_range():
    rng = PcgRng()
    assert all(0.0 <= rng.next_float() < 1.0 for _ in range(500))


def test_rand_dir_range_and_normalized():
    rng = PcgRng()
    for _ in range(100):
        d = rng.rand_dir()
        assert -1.0 <= d.x < 1.0 and -1.0 <= d.y < 1.0
    for _ in range(100):
        assert rng.rand_dir_normalized().length() == pytest.approx(1.0, abs=1e-6)


def test_rotate_vec_quarter_turn():
    r = rotate_vec(Point(1.0, 0.0), math.pi / 2)
    assert r.x == pytest.approx(0.0, abs=1e-12)
    assert r.y == pytest.approx(1.0)


def test_rotate_vec_preserves_length():
    v = Point(3.0, -4.0)
    assert rotate_vec(v, 1.234).length() == pytest.approx(v.length())


def test_point_highlight_update_and_restart():
    vfx = PointHighlight(VfxMode.SONICBOOM)
    settings = CursorSettings()
    assert vfx.update(settings, FAR, DIMS, 0.1) is True
    assert vfx.t == pytest.approx(0.5)
    assert vfx.update(settings, FAR, DIMS, 0.2) is False
    assert vfx.t == 1.0
    vfx.restart(Point(5.0, 6.0))
    assert vfx.t == 0.0
    assert vfx.center_position == Point(5.0, 6.0)


def test_wrong_mode_kinds_rejected():
    with pytest.raises(ValueError):
        PointHighlight(VfxMode.RAILGUN)
    with pytest.raises(ValueError):
        ParticleTrail(VfxMode.RIPPLE)


def test_trail_without_movement_spawns_nothing():
    trail = ParticleTrail(VfxMode.RAILGUN)
    assert trail.update(CursorSettings(), Point(0.0, 0.0), DIMS, 0.016) is False
    assert trail.particles == []


def test_railgun_particles_lie_on_path():
    settings = CursorSettings()
    trail = ParticleTrail(VfxMode.RAILGUN)
    assert trail.update(settings, FAR, DIMS, 0.016) is True
    assert trail.previous_cursor_dest == FAR
    assert trail.particles
    for particle in trail.particles:
        assert particle.pos.y == 0.0
        assert 0.0 <= particle.pos.x < 1000.0
        assert 0.0 <= particle.lifetime < settings.vfx_particle_lifetime
        assert particle.rotation_speed == pytest.approx(math.pi)
        assert particle.speed.length() == pytest.approx(2.0 * settings.vfx_particle_speed)


def test_particles_expire():
    settings = CursorSettings()
    trail = ParticleTrail(VfxMode.RAILGUN)
    trail.update(settings, FAR, DIMS, 0.016)
    spawned = len(trail.particles)
    trail.update(settings, FAR, DIMS, 0.0)
    assert len(trail.particles) == spawned - 1
    assert trail.update(settings, FAR, DIMS, settings.vfx_particle_lifetime) is False
    assert trail.particles == []


def test_particles_move_with_their_speed():
    settings = replace(CursorSettings(), vfx_particle_curl=0.0)
    trail = ParticleTrail(VfxMode.RAILGUN)
    trail.update(settings, FAR, DIMS, 0.016)
    before = {id(p): (p.pos, p.speed) for p in trail.particles}
    trail.update(settings, FAR, DIMS, 0.01)
    for particle in trail.particles:
        pos, speed = before[id(particle)]
        assert particle.pos.x == pytest.approx(pos.x + speed.x * 0.01)
        assert particle.pos.y == pytest.approx(pos.y + speed.y * 0.01)
        assert particle.speed == speed


def test_pixiedust_particles_move_down():
    settings = CursorSettings()
    trail = ParticleTrail(VfxMode.PIXIEDUST)
    trail.update(settings, FAR, DIMS, 0.016)
    assert trail.particles
    for particle in trail.particles:
        assert particle.speed.y > 0.0
        assert particle.pos.y == pytest.approx(DIMS.y * 0.5)
        assert abs(particle.rotation_speed) <= math.pi / 4 * settings.vfx_particle_curl


def test_torpedo_speed_magnitude():
    settings = CursorSettings()
    trail = ParticleTrail(VfxMode.TORPEDO)
    trail.update(settings, FAR, DIMS, 0.016)
    assert trail.particles
    for particle in trail.particles:
        assert particle.speed.length() == pytest.approx(settings.vfx_particle_speed, rel=1e-6)


def test_same_rng_gives_same_trail():
    settings = CursorSettings()
    a = ParticleTrail(VfxMode.TORPEDO)
    b = ParticleTrail(VfxMode.TORPEDO)
    a.update(settings, FAR, DIMS, 0.016)
    b.update(settings, FAR, DIMS, 0.016)
    assert a.particles == b.particles


def test_restart_keeps_particles():
    trail = ParticleTrail(VfxMode.RAILGUN)
    trail.update(CursorSettings(), FAR, DIMS, 0.016)
    before = list(trail.particles)
    trail.restart(Point(1.0, 1.0))
    assert trail.particles == before


def test_new_cursor_vfx():
    assert new_cursor_vfx(VfxMode.DISABLED) is None
    highlight = new_cursor_vfx(VfxMode.WIREFRAME)
    assert isinstance(highlight, PointHighlight)
    assert highlight.mode is VfxMode.WIREFRAME
    trail = new_cursor_vfx(VfxMode.PIXIEDUST)
    assert isinstance(trail, ParticleTrail)
    assert trail.trail_mode is VfxMode.PIXIEDUST