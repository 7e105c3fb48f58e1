import argparse
import logging

from bitgrid import LightGrid
from brightness import BrightnessGrid
from config import Config
from errors import LightGridError
from instructions import parse_instructions

logger = logging.getLogger(__name__)


def solve(
  text: str,
  width: int = Config.GRID_WIDTH,
  height: int = Config.GRID_HEIGHT,
  bits_per_word: int = Config.BITS_PER_WORD,
) -> LightGrid:
  grid = LightGrid.new(width, height, bits_per_word)

  applied = 0
  for instruction in parse_instructions(text):
    grid.apply(instruction)
    applied += 1

  logger.debug('applied %d instructions', applied)
  return grid


def solve_brightness(
  text: str,
  width: int = Config.GRID_WIDTH,
  height: int = Config.GRID_HEIGHT,
) -> BrightnessGrid:
  grid = BrightnessGrid.new(width, height)

  applied = 0
  for instruction in parse_instructions(text):
    grid.apply(instruction)
    applied += 1

  logger.debug('applied %d brightness instructions', applied)
  return grid


def read_input(filename: str) -> str:
  with open(filename, encoding='utf-8') as input_file:
    return input_file.read().rstrip()


def build_parser() -> argparse.ArgumentParser:
  ap = argparse.ArgumentParser(
    prog='lightgrid',
    description='Apply light instructions to a grid and count the result.',
  )
  ap.add_argument('input', nargs='?', default=Config.INPUT_PATH)
  ap.add_argument('--width', type=int, default=Config.GRID_WIDTH)
  ap.add_argument('--height', type=int, default=Config.GRID_HEIGHT)
  ap.add_argument('--bits-per-word', type=int, default=Config.BITS_PER_WORD)
  ap.add_argument(
    '--part',
    default='all',
    choices=['1', '2', 'all'],
    help='1: count lit lights, 2: total brightness.',
  )
  ap.add_argument(
    '--dump',
    default=None,
    choices=['text', 'hex'],
    help='Print the final light grid.',
  )
  ap.add_argument('--show', action='store_true', help='Open a window with the final light grid.')
  ap.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging.')
  return ap


def main(argv: list[str] | None = None) -> None:
  args = build_parser().parse_args(argv)

  logging.basicConfig(
    level=logging.DEBUG if args.verbose else logging.WARNING,
    format=Config.LOG_FORMAT,
  )

  try:
    text = read_input(args.input)
  except OSError as exc:
    raise SystemExit(f'cannot read {args.input}: {exc}') from exc

  try:
    if args.part in ('1', 'all'):
      grid = solve(text, args.width, args.height, args.bits_per_word)
      print(f'part1: {grid.count()}')

      if args.dump == 'text':
        grid.display()
      elif args.dump == 'hex':
        print(grid.hexdump())

      if args.show:
        # Only needed for the window.
        from render import show
        show(grid)

    if args.part in ('2', 'all'):
      brightness = solve_brightness(text, args.width, args.height)
      print(f'part2: {brightness.total()}')
  except LightGridError as exc:
    raise SystemExit(f'error: {exc}') from exc


if __name__ == '__main__':
  main()
