from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Self

import numpy as np

from config import Config
from errors import InvalidDimensions
from instructions import OPERATIONS, Instruction, Operation

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BrightnessGrid:
  """Dense grid of light brightness levels.

  'turn on' raises a light by 1, 'turn off' lowers it by 1 down to 0 and
  'toggle' raises it by 2.
  """

  levels: np.ndarray

  @classmethod
  def new(
    cls,
    width: int = Config.GRID_WIDTH,
    height: int = Config.GRID_HEIGHT,
  ) -> Self:
    if width <= 0 or height <= 0:
      raise InvalidDimensions(width, height)

    logger.debug('allocated %dx%d brightness grid', width, height)
    return cls(levels=np.zeros((height, width), dtype=np.uint32))

  @property
  def width(self) -> int:
    return self.levels.shape[1]

  @property
  def height(self) -> int:
    return self.levels.shape[0]

  def update(self, op: Operation, x1: int, y1: int, x2: int, y2: int) -> None:
    if op not in OPERATIONS:
      raise ValueError(f'unknown operation {op!r}')

    if x1 >= x2 or y1 >= y2:
      return

    x1, x2 = max(x1, 0), min(x2, self.width)
    y1, y2 = max(y1, 0), min(y2, self.height)

    if x1 >= x2 or y1 >= y2:
      return

    region = self.levels[y1:y2, x1:x2]

    match op:
      case 'turn on':
        region += 1
      case 'turn off':
        np.subtract(region, 1, out=region, where=region > 0)
      case 'toggle':
        region += 2

  def apply(self, instruction: Instruction) -> None:
    self.update(
      instruction.operation,
      instruction.x1,
      instruction.y1,
      instruction.x2,
      instruction.y2,
    )

  def total(self) -> int:
    return int(self.levels.sum(dtype=np.uint64))
