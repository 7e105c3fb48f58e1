from typing import Final


class Config:
  GRID_WIDTH: Final = 1000
  GRID_HEIGHT: Final = 1000
  BITS_PER_WORD: Final = 128

  # Coordinates are bounded by an unsigned 64-bit machine word.
  MAX_COORDINATE: Final = 2 ** 64 - 1

  INPUT_PATH: Final = './data/exercise_06.txt'

  PX_PER_UNIT: Final = 1
  ON_COLOR: Final = (255, 214, 102, 255)
  OFF_COLOR: Final = (18, 18, 18, 255)

  LOG_FORMAT: Final = '%(asctime)s  %(name)-12s  %(levelname)-7s  %(message)s'
