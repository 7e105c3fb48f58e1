from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Self
from collections.abc import Generator

import numpy as np

from config import Config
from errors import InvalidDimensions
from instructions import OPERATIONS, Instruction, Operation

logger = logging.getLogger(__name__)


def word_mask(start_bit: int, end_bit: int) -> int:
  """Mask with ones at bit offsets [start_bit, end_bit) of a word.

  An end_bit equal to the word width gives all ones from start_bit up to the
  word's top bit, since Python ints do not wrap on the shift.
  """
  return (1 << end_bit) - (1 << start_bit)


@dataclass(slots=True)
class LightGrid:
  """Packed on/off lights, row-major, bits_per_word lights per word.

  Light (x, y) is bit x % bits_per_word of
  words[y * word_width + x // bits_per_word]; the least significant bit of a
  word is its leftmost light.
  """

  width: int
  height: int
  bits_per_word: int = Config.BITS_PER_WORD

  word_width: int = field(init=False)
  words: list[int] = field(init=False, repr=False)

  def __post_init__(self) -> None:
    if self.width <= 0 or self.height <= 0:
      raise InvalidDimensions(self.width, self.height)

    if self.bits_per_word <= 0:
      raise InvalidDimensions(
        self.width, self.height, f'bits per word must be positive, got {self.bits_per_word}'
      )

    self.word_width = -(-self.width // self.bits_per_word)
    self.words = [0] * (self.word_width * self.height)

    logger.debug(
      'allocated %dx%d grid as %d words of %d bits',
      self.width, self.height, len(self.words), self.bits_per_word,
    )

  @classmethod
  def new(
    cls,
    width: int = Config.GRID_WIDTH,
    height: int = Config.GRID_HEIGHT,
    bits_per_word: int = Config.BITS_PER_WORD,
  ) -> Self:
    return cls(width=width, height=height, bits_per_word=bits_per_word)

  def update(self, op: Operation, x1: int, y1: int, x2: int, y2: int) -> None:
    if op not in OPERATIONS:
      raise ValueError(f'unknown operation {op!r}')

    if x1 >= x2 or y1 >= y2:
      return

    x1, x2 = max(x1, 0), min(x2, self.width)
    y1, y2 = max(y1, 0), min(y2, self.height)

    if x1 >= x2 or y1 >= y2:
      return

    bits = self.bits_per_word
    full = (1 << bits) - 1

    for column in range(x1 // bits, (x2 - 1) // bits + 1):
      offset = column * bits
      mask = word_mask(max(x1 - offset, 0), min(x2 - offset, bits))

      for index in range(y1 * self.word_width + column, y2 * self.word_width, self.word_width):
        match op:
          case 'turn on':
            self.words[index] |= mask
          case 'turn off':
            self.words[index] &= full ^ mask
          case 'toggle':
            self.words[index] ^= mask

  def apply(self, instruction: Instruction) -> None:
    self.update(
      instruction.operation,
      instruction.x1,
      instruction.y1,
      instruction.x2,
      instruction.y2,
    )

  def count(self) -> int:
    return sum(word.bit_count() for word in self.words)

  def get(self, x: int, y: int) -> bool:
    if x < 0 or x >= self.width:
      return False

    if y < 0 or y >= self.height:
      return False

    column, bit = divmod(x, self.bits_per_word)
    return (self.words[y * self.word_width + column] >> bit) & 1 != 0

  def iter(self) -> Generator[tuple[int, int]]:
    for index, word in enumerate(self.words):
      y, column = divmod(index, self.word_width)
      offset = column * self.bits_per_word

      while word:
        mask = word & -word
        word ^= mask
        yield offset + mask.bit_length() - 1, y

  def clear(self) -> None:
    self.words = [0] * len(self.words)

  def row(self, y: int) -> int:
    """Lights of row y as a single integer, bit x set for lit light x."""
    start = y * self.word_width
    value = 0
    for column, word in enumerate(self.words[start:start + self.word_width]):
      value |= word << (column * self.bits_per_word)
    return value

  def render(self, chars: tuple[str, str] = ('.', '#')) -> str:
    c0, c1 = chars
    table = str.maketrans('01', c0 + c1)

    lines = []
    for y in range(self.height):
      # Reverse so that light 0 comes first.
      lines.append(f'{self.row(y):0{self.width}b}'[::-1].translate(table))
    return '\n'.join(lines)

  def display(self, chars: tuple[str, str] = ('.', '#')) -> None:
    print(self.render(chars))

  def hexdump(self) -> str:
    digits = -(-self.bits_per_word // 4)
    padded = digits * 4

    lines = []
    for y in range(self.height):
      start = y * self.word_width
      fields = []
      for word in self.words[start:start + self.word_width]:
        reversed_word = int(f'{word:0{padded}b}'[::-1], 2)
        fields.append(f'{reversed_word:0{digits}X}'.replace('0', ' '))
      lines.append('|'.join(fields) + '|')
    return '\n'.join(lines)

  def to_array(self) -> np.ndarray:
    """Lights as a (height, width) boolean array."""
    n_bytes = -(-self.width // 8)
    out = np.empty((self.height, self.width), dtype=np.bool_)

    for y in range(self.height):
      raw = np.frombuffer(self.row(y).to_bytes(n_bytes, 'little'), dtype=np.uint8)
      out[y] = np.unpackbits(raw, bitorder='little')[:self.width].astype(np.bool_)

    return out
