from __future__ import annotations

import pyglet  # type: ignore
import numpy as np

from bitgrid import LightGrid
from config import Config


def to_rgba(lit: np.ndarray, scale: int = Config.PX_PER_UNIT) -> np.ndarray:
  """Image of a (height, width) boolean array, row 0 at the top.

  Each light becomes a scale x scale block of pixels.
  """
  h, w = lit.shape

  rgba_array = np.full(
    fill_value=Config.OFF_COLOR,
    shape=(h, w, 4),
    dtype=np.uint8,
  )
  rgba_array[lit] = Config.ON_COLOR

  if scale > 1:
    rgba_array = rgba_array.repeat(scale, axis=0).repeat(scale, axis=1)

  return rgba_array


class Renderer:
  def __init__(self, grid: LightGrid, scale: int = Config.PX_PER_UNIT) -> None:
    self.batch = pyglet.graphics.Batch()

    self.width = grid.width * scale
    self.height = grid.height * scale

    # pyglet images start at the bottom row.
    rgba_bytes = np.ascontiguousarray(to_rgba(grid.to_array(), scale)[::-1]).tobytes()

    image_data = pyglet.image.ImageData(
      width=self.width,
      height=self.height,
      fmt='RGBA',
      data=rgba_bytes,
    )
    self.texture = image_data.get_texture()
    self.sprite = pyglet.sprite.Sprite(
      self.texture,
      batch=self.batch,
    )

  def render(self) -> None:
    self.batch.draw()


def show(grid: LightGrid, scale: int = Config.PX_PER_UNIT) -> None:
  window = pyglet.window.Window(
    width=grid.width * scale,
    height=grid.height * scale,
    caption=f'Lights ({grid.count()} lit)',
  )

  renderer = Renderer(grid, scale)

  def on_draw():
    window.clear()
    renderer.render()

  window.event(on_draw)  # type: ignore

  pyglet.app.run()
