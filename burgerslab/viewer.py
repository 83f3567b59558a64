"""Interactive matplotlib window showing the solution surface of a scene."""

from __future__ import annotations

import math

import matplotlib.pyplot as plt
import numpy as np

from .scene import KEY_HELP, SURFACE_STEPS, Scene, Surface

_ELEVATION_OFFSET = 120.0
_AZIMUTH_OFFSET = -150.0
_BLUE_LABELS = 9


def _axis_span(a: float, b: float) -> tuple[float, float]:
    """Extent of a coordinate axis drawn for the segment ``[a, b]``."""
    if a * b > 0:
        return (0.0, 2 * b) if a > 0 else (2 * a, 0.0)
    return 2 * a, 2 * b


class Viewer:
    """A figure bound to a scene: draws it and forwards key presses to it."""

    steps = SURFACE_STEPS
    plot_resolution = 100

    def __init__(self, scene: Scene):
        self.scene = scene
        self.figure = plt.figure(figsize=(10, 8))
        self.axes = self.figure.add_subplot(projection="3d")
        self.figure.canvas.mpl_connect("key_press_event", self.on_key)

    @property
    def elevation(self) -> float:
        return self.scene.x_rot + _ELEVATION_OFFSET

    @property
    def azimuth(self) -> float:
        return self.scene.z_rot + _AZIMUTH_OFFSET

    def _face_colors(self, x: np.ndarray, y: np.ndarray) -> np.ndarray:
        scene = self.scene
        colors = np.empty(x.shape + (4,))
        colors[..., 0] = (scene.view_x_a + x) / (scene.view_x_b - scene.view_x_a) / 2 + 0.5
        colors[..., 1] = (scene.view_y_a + y) / (scene.view_y_b - scene.view_y_a) / 2 + 0.5
        colors[..., 2] = 0.5
        colors[..., 3] = 0.7
        return np.clip(colors, 0.0, 1.0)

    def _draw_axes_lines(self, abs_max: float) -> None:
        scene = self.scene
        x_lo, x_hi = _axis_span(scene.view_x_a, scene.view_x_b)
        y_lo, y_hi = _axis_span(scene.view_y_a, scene.view_y_b)
        line = {"color": "red", "linewidth": 2}
        self.axes.plot([x_lo, x_hi], [0.0, 0.0], [0.0, 0.0], **line)
        self.axes.plot([0.0, 0.0], [y_lo, y_hi], [0.0, 0.0], **line)
        self.axes.plot([0.0, 0.0], [0.0, 0.0], [abs_max, -abs_max], **line)

    def _draw_text(self) -> None:
        for text in list(self.figure.texts):
            text.remove()
        self.figure.text(0.01, 0.97, "   ".join(KEY_HELP), color="black", fontsize=9)
        for row, label in enumerate(self.scene.labels()):
            color = "blue" if row < _BLUE_LABELS else "red"
            self.figure.text(0.01, 0.93 - 0.025 * row, label, color=color, fontsize=9)

    def draw(self) -> Surface:
        """Redraw the surface, axes and labels; return the sampled surface."""
        scene = self.scene
        surface = scene.sample_surface(self.steps)
        ax = self.axes
        ax.clear()

        x, y = np.meshgrid(surface.xs, surface.ys, indexing="ij")
        ax.plot_surface(
            x, y, surface.zs,
            facecolors=self._face_colors(x, y),
            rcount=self.plot_resolution, ccount=self.plot_resolution,
            shade=False, linewidth=0,
        )
        self._draw_axes_lines(surface.abs_max)

        ax.set_xlim(scene.view_x_a, scene.view_x_b)
        ax.set_ylim(scene.view_y_a, scene.view_y_b)
        if math.isfinite(surface.abs_max):
            ax.set_zlim(-surface.abs_max, surface.abs_max)
        ax.set_xlabel("x")
        ax.set_ylabel("t")
        ax.set_zlabel("u")
        ax.view_init(elev=self.elevation, azim=self.azimuth)

        self._draw_text()
        self.figure.canvas.draw_idle()
        return surface

    def on_key(self, event) -> bool:
        """Handle a key press event; return whether the key was bound."""
        handled = self.scene.handle_key(event.key)
        if self.scene.closed:
            plt.close(self.figure)
        elif handled:
            self.draw()
        return handled


def show(scene: Scene) -> Viewer:
    """Open a window for ``scene`` and block until it is closed."""
    for name, key in (("keymap.back", "left"), ("keymap.forward", "right")):
        bound = list(plt.rcParams[name])
        if key in bound:
            bound.remove(key)
            plt.rcParams[name] = bound
    viewer = Viewer(scene)
    viewer.draw()
    plt.show()
    return viewer