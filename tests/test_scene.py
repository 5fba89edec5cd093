import numpy as np
import pytest

from meshforge.scene import (
    Action,
    ButtonCode,
    KeyCode,
    RenderMode,
    SceneController,
    default_model,
    load_model,
    looks_like_path,
)
from meshforge.stl import STLVertex, Vec, write_stl


def test_looks_like_path():
    assert looks_like_path("models/cube.stl")
    assert looks_like_path("models\\cube.stl")
    assert not looks_like_path("cube.stl")


def test_default_model_shape():
    model = default_model()
    assert len(model) == 18
    assert model[0].pos == Vec(-1, 0, -1)
    assert model[8].pos == Vec(0, 1.5, 0)


def test_load_model_without_argument_uses_default():
    assert load_model(None) == default_model()


def test_load_model_missing_file_falls_back(tmp_path):
    assert load_model("missing.stl", tmp_path) == default_model()


def test_load_model_from_assets_dir_and_path(tmp_path):
    soup = [STLVertex(Vec(0, 0, 0)), STLVertex(Vec(1, 0, 0)), STLVertex(Vec(0, 1, 0))]
    write_stl(soup, "tri.stl", tmp_path)
    by_name = load_model("tri.stl", tmp_path)
    by_path = load_model(str(tmp_path / "tri.stl"), "unused")
    assert [v.pos for v in by_name] == [v.pos for v in soup]
    assert [v.pos for v in by_path] == [v.pos for v in soup]


@pytest.mark.parametrize(
    "key, expected",
    [
        (KeyCode.UP, [0, 0.2, 0]),
        (KeyCode.DOWN, [0, -0.2, 0]),
        (KeyCode.LEFT, [-0.2, 0, 0]),
        (KeyCode.RIGHT, [0.2, 0, 0]),
    ],
)
def test_arrow_keys_move_model(key, expected):
    scene = SceneController()
    scene.on_key(key, Action.PRESS)
    assert np.allclose(scene.model_position, expected)


def test_release_is_ignored():
    scene = SceneController()
    scene.on_key(KeyCode.UP, Action.RELEASE)
    scene.on_key(KeyCode.NUM_2, Action.RELEASE)
    assert np.allclose(scene.model_position, 0)
    assert scene.render_mode is RenderMode.TRIANGLES


def test_color_keys_step_and_clamp():
    scene = SceneController()
    scene.on_key(KeyCode.R, Action.PRESS)
    assert scene.mat_color[0] == pytest.approx(0.05)
    scene.on_key(KeyCode.T, Action.REPEAT)
    scene.on_key(KeyCode.T, Action.REPEAT)
    assert scene.mat_color[0] == pytest.approx(0.0)
    for _ in range(40):
        scene.on_key(KeyCode.B, Action.PRESS)
    assert scene.mat_color[2] == pytest.approx(1.0)
    assert scene.mat_color[1] == 0.0


@pytest.mark.parametrize(
    "key, mode",
    [
        (KeyCode.NUM_1, RenderMode.TRIANGLES),
        (KeyCode.NUM_2, RenderMode.EDGES),
        (KeyCode.NUM_3, RenderMode.VERTICES),
    ],
)
def test_render_mode_keys(key, mode):
    scene = SceneController(render_mode=RenderMode.EDGES if mode is not RenderMode.EDGES else RenderMode.VERTICES)
    scene.on_key(key, Action.PRESS)
    assert scene.render_mode is mode


def test_view_keys():
    scene = SceneController()
    scene.on_key(KeyCode.F1, Action.PRESS)
    cam = scene.viewport.camera
    assert np.allclose(cam.eye - cam.target, [0, 0, 10])
    scene.on_key(KeyCode.F2, Action.PRESS)
    assert np.allclose(cam.eye - cam.target, [0, 10, 0])
    assert np.allclose(cam.up, [0, 0, -1])


def test_f8_toggles_parallel_projection():
    scene = SceneController()
    scene.on_key(KeyCode.F8, Action.PRESS)
    assert scene.viewport.parallel_projection is True
    scene.on_key(KeyCode.F8, Action.PRESS)
    assert scene.viewport.parallel_projection is False


def test_mouse_buttons_track_pressed_state():
    scene = SceneController()
    scene.on_mouse_button(ButtonCode.LEFT, Action.PRESS)
    scene.on_mouse_button(ButtonCode.RIGHT, Action.PRESS)
    assert scene.left_pressed and scene.right_pressed
    scene.on_mouse_button(ButtonCode.LEFT, Action.RELEASE)
    assert scene.left_pressed is False
    assert scene.right_pressed is True


def test_mouse_move_without_buttons_only_tracks_cursor():
    scene = SceneController()
    eye = scene.viewport.camera.eye.copy()
    scene.on_mouse_move(120, 80)
    assert np.allclose(scene.viewport.camera.eye, eye)
    assert (scene.last_x, scene.last_y) == (120, 80)


def test_left_drag_orbits_keeping_distance():
    scene = SceneController()
    scene.viewport.camera.set_front_view()
    scene.on_mouse_button(ButtonCode.LEFT, Action.PRESS)
    scene.on_mouse_move(50, 40)
    cam = scene.viewport.camera
    assert cam.distance_to_target() == pytest.approx(10.0)
    assert np.allclose(cam.target, 0)
    assert not np.allclose(cam.eye, [0, 0, 10])


def test_right_drag_pans():
    scene = SceneController()
    scene.on_mouse_button(ButtonCode.RIGHT, Action.PRESS)
    scene.on_mouse_move(100, 0)
    cam = scene.viewport.camera
    assert cam.target[0] < 0
    assert cam.distance_to_target() == pytest.approx(1.0)


def test_scroll_zooms():
    scene = SceneController()
    scene.viewport.camera.set_front_view()
    scene.on_scroll(0, 4)
    assert scene.viewport.camera.distance_to_target() == pytest.approx(10 - 4 * 0.5)


def test_move_camera_forward():
    scene = SceneController()
    cam = scene.viewport.camera
    eye, forward = cam.eye.copy(), cam.forward()
    scene.move_camera((0, 0, 1))
    assert np.allclose(cam.eye - eye, forward)
    assert cam.distance_to_target() == pytest.approx(1.0)