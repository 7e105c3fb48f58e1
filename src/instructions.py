from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Final, Literal
from collections.abc import Generator

from config import Config
from errors import MalformedInstruction

type Operation = Literal['turn on', 'turn off', 'toggle']

OPERATIONS: Final[tuple[Operation, ...]] = ('turn on', 'turn off', 'toggle')

MAX_DIGITS: Final = len(str(Config.MAX_COORDINATE))

# Groups: operation, x1, y1, x2, y2. Both end coordinates are inclusive.
INSTRUCTION_RE: Final = re.compile(
  r'(?P<op>[a-z]+(?: [a-z]+)?) '
  r'(?P<x1>[0-9]+),(?P<y1>[0-9]+) through (?P<x2>[0-9]+),(?P<y2>[0-9]+)'
)


@dataclass(frozen=True, slots=True)
class Instruction:
  """A light operation over the half-open rectangle [x1, x2) x [y1, y2)."""

  operation: Operation
  x1: int
  y1: int
  x2: int
  y2: int

  @property
  def area(self) -> int:
    if self.x1 >= self.x2 or self.y1 >= self.y2:
      return 0
    return (self.x2 - self.x1) * (self.y2 - self.y1)


def parse(line: str, lineno: int | None = None) -> Instruction:
  """Parse one line such as ``turn on 0,0 through 1,1``.

  The inclusive end coordinates of the text are turned into exclusive ones,
  so the example above becomes ``Instruction('turn on', 0, 0, 2, 2)``.
  Raises MalformedInstruction when the line does not follow the grammar.
  """
  match = INSTRUCTION_RE.fullmatch(line)
  if match is None:
    raise MalformedInstruction(line, 'does not match the instruction grammar', lineno)

  op = match['op']
  if op not in OPERATIONS:
    raise MalformedInstruction(line, f'unknown operation {op!r}', lineno)

  digits = [match[name] for name in ('x1', 'y1', 'x2', 'y2')]

  # No coordinate is longer than MAX_COORDINATE.
  if any(len(value) > MAX_DIGITS for value in digits):
    raise MalformedInstruction(line, 'coordinate out of range', lineno)

  x1, y1, x2, y2 = (int(value) for value in digits)

  if max(x1, y1) > Config.MAX_COORDINATE:
    raise MalformedInstruction(line, 'start coordinate out of range', lineno)

  if max(x2, y2) >= Config.MAX_COORDINATE:
    raise MalformedInstruction(line, 'end coordinate out of range', lineno)

  return Instruction(op, x1, y1, x2 + 1, y2 + 1)


def parse_instructions(text: str) -> Generator[Instruction]:
  for lineno, line in enumerate(text.splitlines(), start=1):
    line = line.rstrip()
    if not line:
      continue

    yield parse(line, lineno)
