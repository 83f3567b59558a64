import types

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from burgerslab.functions import FunctionKind  # noqa: E402
from burgerslab.scene import KEY_HELP, Scene  # noqa: E402
from burgerslab.viewer import Viewer  # noqa: E402


@pytest.fixture
def viewer():
    scene = Scene(10, 10, 0, 1, 1, 0.1, 0.0, 1.0, 0.0, 1.0)
    v = Viewer(scene)
    v.steps = 20
    v.plot_resolution = 10
    yield v
    plt.close("all")


def press(viewer, key):
    return viewer.on_key(types.SimpleNamespace(key=key))


def texts(viewer):
    return [t.get_text() for t in viewer.figure.texts]


def test_draw_shows_all_labels(viewer):
    viewer.draw()
    shown = texts(viewer)
    for label in viewer.scene.labels():
        assert label in shown
    assert "   ".join(KEY_HELP) in shown


def test_draw_returns_surface_matching_scene(viewer):
    surface = viewer.draw()
    assert surface.sup == viewer.scene.sup
    assert surface.inf == viewer.scene.inf
    assert surface.zs.shape == (viewer.steps + 1, viewer.steps + 1)


def test_limits_follow_view_window(viewer):
    surface = viewer.draw()
    scene = viewer.scene
    assert viewer.axes.get_xlim() == pytest.approx((scene.view_x_a, scene.view_x_b))
    assert viewer.axes.get_ylim() == pytest.approx((scene.view_y_a, scene.view_y_b))
    assert viewer.axes.get_zlim() == pytest.approx((-surface.abs_max, surface.abs_max))


def test_zoom_key_narrows_limits(viewer):
    viewer.draw()
    before = viewer.axes.get_xlim()
    assert press(viewer, "2") is True
    after = viewer.axes.get_xlim()
    assert after[1] - after[0] == pytest.approx((before[1] - before[0]) / 2)
    assert after == pytest.approx((viewer.scene.view_x_a, viewer.scene.view_x_b))


def test_function_key_updates_text(viewer):
    viewer.draw()
    assert press(viewer, "0") is True
    assert viewer.scene.k == FunctionKind.ZERO
    assert viewer.scene.function_name in texts(viewer)
    assert "u0(x) = 0" in texts(viewer)


def test_rotation_key_changes_elevation(viewer):
    before_elev = viewer.elevation
    before_rot = viewer.scene.x_rot
    assert press(viewer, "up") is True
    assert viewer.elevation - before_elev == pytest.approx(viewer.scene.x_rot - before_rot)
    assert viewer.axes.elev == pytest.approx(viewer.elevation)


def test_unknown_key_is_ignored(viewer):
    viewer.draw()
    state = (viewer.scene.k, viewer.scene.nu, viewer.scene.n_x)
    assert press(viewer, "z") is False
    assert (viewer.scene.k, viewer.scene.nu, viewer.scene.n_x) == state


def test_escape_closes_figure(viewer):
    number = viewer.figure.number
    assert plt.fignum_exists(number)
    assert press(viewer, "escape") is True
    assert viewer.scene.closed is True
    assert not plt.fignum_exists(number)