import pygame

from raylight.constants import BG_COLOR, OCCLUDER_COLOR, RAY_COLOR, RAY_HIT_ALPHA, RAY_MISS_ALPHA
from raylight.models import DrawLine
from raylight.render import SurfaceRenderer
from raylight.vector import Vec2


def make_renderer():
    renderer = SurfaceRenderer(pygame.Surface((100, 100)), flip=False)
    renderer.clear()
    return renderer


def horizontal(y, color, alpha):
    return DrawLine(Vec2(0.0, float(y)), Vec2(99.0, float(y)), color, alpha)


def test_clear_fills_background():
    renderer = make_renderer()
    assert renderer.surface.get_at((50, 50))[:3] == BG_COLOR


def test_opaque_line_is_drawn():
    renderer = make_renderer()
    renderer.draw([horizontal(50, (255, 255, 0), 255)])
    assert renderer.surface.get_at((40, 50))[:3] == (255, 255, 0)
    assert renderer.surface.get_at((40, 10))[:3] == BG_COLOR


def test_faint_line_blends_with_background():
    renderer = make_renderer()
    renderer.draw([horizontal(20, RAY_COLOR, RAY_MISS_ALPHA), horizontal(60, RAY_COLOR, RAY_HIT_ALPHA)])
    faint = renderer.surface.get_at((50, 20))
    bright = renderer.surface.get_at((50, 60))
    assert BG_COLOR[0] < faint.r < bright.r < 255


def test_ray_crossing_outline_keeps_outline_tint():
    renderer = make_renderer()
    renderer.draw([
        DrawLine(Vec2(50.0, 0.0), Vec2(50.0, 99.0), OCCLUDER_COLOR, 255),
        horizontal(50, RAY_COLOR, RAY_HIT_ALPHA),
    ])
    crossing = renderer.surface.get_at((50, 50))
    # Yellow over blue: red and green rise, blue is dimmed but not erased
    assert crossing.r > OCCLUDER_COLOR[0]
    assert crossing.g > OCCLUDER_COLOR[1]
    assert 60 < crossing.b < OCCLUDER_COLOR[2]


def test_overlapping_faint_rays_accumulate():
    single = make_renderer()
    single.draw([horizontal(30, RAY_COLOR, RAY_MISS_ALPHA)])

    stacked = make_renderer()
    stacked.draw([horizontal(30, RAY_COLOR, RAY_MISS_ALPHA)] * 5)

    assert stacked.surface.get_at((50, 30)).r > single.surface.get_at((50, 30)).r
