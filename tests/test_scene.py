import math

import pytest

from isocube.canvas import Canvas
from isocube.config import SceneConfig
from isocube.projection import ISOMETRIC_ROTATION, TILT_ISOMETRIC
from isocube.renderer import fit_surface
from isocube.scene import Scene
from isocube.shapes import STAR_PULL, star_points
from isocube.surface import Palette, RecordingSurface


def _render(scene):
    surface = RecordingSurface()
    scene.render(surface)
    return surface


def test_update_threads_the_animation_state():
    scene = Scene(SceneConfig(period=3.0))
    scene.update(0.0)
    assert scene.state.anim_amt == 0.0
    scene.update(2.7)
    scene.update(0.6)
    assert scene.state.anim_amt == pytest.approx(0.1)


def test_update_rejects_negative_dt():
    with pytest.raises(ValueError):
        Scene().update(-1)


def test_wireframe_strokes_six_edges_per_frame():
    surface = _render(Scene(SceneConfig.preset('wire')))
    assert surface.count('stroke') == 6
    assert surface.count('move_to') == 6
    assert surface.count('fill') == 0


def test_every_instance_is_scoped():
    scene = Scene(SceneConfig.preset('tiled'))
    surface = _render(scene)
    instances = len(scene.offsets())
    assert instances == 37
    assert surface.count('save') == surface.count('restore') == instances
    assert surface.count('translate') == instances
    assert surface.depth == 0
    assert surface.max_depth == 1

    names = surface.names()
    for i, name in enumerate(names):
        if name == 'save':
            assert names[i + 1] == 'translate'


def test_translations_follow_the_hex_layout():
    scene = Scene(SceneConfig.preset('hex'))
    surface = _render(scene)
    translations = [c[1:] for c in surface.calls if c[0] == 'translate']
    assert translations == scene.offsets()
    assert len(translations) == 9


def test_solid_faces_are_filled_back_to_front():
    surface = _render(Scene(SceneConfig.preset('solid')))
    assert surface.count('fill') == 6
    assert surface.count('stroke') == 6
    assert surface.count('close_path') == 6
    assert ('fill', '#DDDDDD') in surface.calls


def test_silhouette_with_inner_edges():
    config = SceneConfig(shape='silhouette', inner_edges=True, tilt=TILT_ISOMETRIC)
    surface = _render(Scene(config))
    assert surface.count('fill') == 1
    assert surface.count('stroke') == 4
    # hexagon: one move_to and five line_to, then three single-edge paths
    assert surface.count('line_to') == 5 + 3


def test_rotation_starts_at_the_base_angle():
    scene = Scene(SceneConfig(base_rotation=ISOMETRIC_ROTATION))
    assert scene.rotation() == pytest.approx(ISOMETRIC_ROTATION)


def test_rotation_holds_after_its_interval():
    config = SceneConfig(rotation_interval=(0.0, 0.5), period=1.0)
    scene = Scene(config)
    scene.update(0.25)
    assert scene.rotation() == pytest.approx(config.base_rotation + config.rotation_sweep / 2)
    scene.update(0.5)
    assert scene.rotation() == pytest.approx(config.base_rotation + config.rotation_sweep)


def test_constant_speed_without_easing():
    scene = Scene(SceneConfig(easing='linear', period=1.0))
    scene.update(0.1)
    assert scene.rotation() == pytest.approx(scene.config.base_rotation + 0.1 * math.pi / 2)


def test_loop_is_seamless():
    scene = Scene(SceneConfig(period=1.0))
    start = _render(scene).calls
    scene.update(0.999999999)
    end = _render(scene).calls
    assert len(start) == len(end)


def test_star_morph_over_the_second_half():
    scene = Scene(SceneConfig.preset('star'))
    assert scene.morph() == 0.0
    scene.update(scene.config.period * 0.75)
    assert scene.morph() == pytest.approx(1.0)
    surface = _render(scene)
    assert surface.count('line_to') == 11
    assert surface.count('fill') == 1


def test_star_points_interleave_pulled_midpoints():
    class P:
        def __init__(self, x, y):
            self.x, self.y = x, y

    ring = [P(math.cos(a), math.sin(a)) for a in (i * math.pi / 3 for i in range(6))]
    flat = star_points(ring, 0.0)
    star = star_points(ring, 1.0)
    assert len(star) == 12
    assert math.hypot(flat[1].x, flat[1].y) == pytest.approx(math.cos(math.pi / 6))
    assert math.hypot(star[1].x, star[1].y) == pytest.approx(math.cos(math.pi / 6) * (1 - STAR_PULL))
    assert (star[0].x, star[0].y) == (ring[0].x, ring[0].y)


def test_render_is_not_reentrant():
    scene = Scene()

    class Reentrant(RecordingSurface):
        def save(self):
            super().save()
            scene.render(RecordingSurface())

    with pytest.raises(RuntimeError):
        scene.render(Reentrant())
    # the guard is released after the failure
    assert _render(scene).count('stroke') == 6


def test_single_cube_extent():
    scene = Scene(SceneConfig(cube_size=10))
    assert scene.offsets() == [(0.0, 0.0)]
    assert scene.extent() == pytest.approx(10 * math.sqrt(3))


def test_render_onto_a_canvas():
    scene = Scene(SceneConfig.preset('hex'))
    canvas = Canvas(120, 120)
    palette = Palette(['black', 'white'])
    scene.render(fit_surface(canvas, scene, palette))
    assert any(any(row) for row in canvas.grid)
    text = canvas.to_lines(use_braille=True)
    assert any(line.strip() for line in text)


def test_fitted_scene_stays_inside_the_canvas():
    scene = Scene(SceneConfig.preset('tiled'))
    canvas = Canvas(100, 60)
    surface = fit_surface(canvas, scene, Palette(), margin=0.9)
    recorder = RecordingSurface()
    scene.render(recorder)
    a, _b, _c, d, e, f = surface.transform
    x = None
    for call in recorder.calls:
        if call[0] == 'translate':
            x, y = call[1], call[2]
        elif call[0] in ('move_to', 'line_to'):
            px = a * (x + call[1]) + e
            py = d * (y + call[2]) + f
            assert 0 <= px <= canvas.w
            assert 0 <= py <= canvas.h
