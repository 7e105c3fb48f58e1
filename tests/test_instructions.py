import pytest
from hypothesis import given, strategies as st

from config import Config
from errors import MalformedInstruction
from instructions import Instruction, OPERATIONS, parse, parse_instructions
from main import main


def test_parse_turn_on_makes_end_exclusive():
  assert parse('turn on 0,0 through 1,1') == Instruction('turn on', 0, 0, 2, 2)


def test_parse_single_cell():
  assert parse('turn off 3,3 through 3,3') == Instruction('turn off', 3, 3, 4, 4)


def test_parse_toggle():
  assert parse('toggle 461,550 through 564,900') == Instruction('toggle', 461, 550, 565, 901)


@pytest.mark.parametrize('line', [
  'turn on 0,0 1,1',
  'turn on 0,0 to 1,1',
  'turn on a,0 through 1,1',
  'turn on 0,0 through 1,-1',
  'switch on 0,0 through 1,1',
  'turn 0,0 through 1,1',
  'Turn on 0,0 through 1,1',
  'toggle 0,0 through 1,1,2',
  'toggle 0,0 through 1',
  ' toggle 0,0 through 1,1',
  'toggle 0,0 through 1,1 ',
  'toggle 0,0 through ١,1',
  '',
])
def test_parse_rejects_malformed_lines(line):
  with pytest.raises(MalformedInstruction):
    parse(line)


def test_parse_rejects_coordinate_overflow():
  with pytest.raises(MalformedInstruction, match='out of range'):
    parse(f'toggle {Config.MAX_COORDINATE + 1},0 through 0,0')

  with pytest.raises(MalformedInstruction, match='out of range'):
    parse(f'toggle 0,0 through {Config.MAX_COORDINATE},0')


@pytest.mark.parametrize('coordinate', ['9' * 5000, '0' * 5000 + '1', '1' + '0' * 20])
def test_parse_rejects_overlong_coordinate(coordinate):
  with pytest.raises(MalformedInstruction, match='out of range'):
    parse(f'toggle {coordinate},0 through 0,0')

  with pytest.raises(MalformedInstruction, match='out of range'):
    parse(f'turn on 0,0 through 1,{coordinate}')


def test_parse_accepts_largest_start_coordinate():
  instruction = parse(f'toggle {Config.MAX_COORDINATE},0 through 0,0')

  assert instruction.x1 == Config.MAX_COORDINATE
  assert instruction.area == 0


def test_cli_reports_overlong_coordinate(tmp_path):
  path = tmp_path / 'input.txt'
  path.write_text('turn on 0,0 through 1,1\ntoggle ' + '9' * 5000 + ',0 through 0,0\n', encoding='utf-8')

  with pytest.raises(SystemExit, match='line 2: coordinate out of range'):
    main([str(path)])


def test_malformed_instruction_keeps_line():
  with pytest.raises(MalformedInstruction) as info:
    parse('flip 0,0 through 1,1', lineno=7)

  assert info.value.line == 'flip 0,0 through 1,1'
  assert info.value.lineno == 7
  assert 'line 7' in str(info.value)


def test_malformed_instruction_is_value_error():
  with pytest.raises(ValueError):
    parse('nope')


def test_parse_instructions_in_order_skipping_blank_lines():
  text = 'turn on 0,0 through 1,1\n\ntoggle 2,2 through 2,3  \r\nturn off 0,0 through 0,0\n'

  assert list(parse_instructions(text)) == [
    Instruction('turn on', 0, 0, 2, 2),
    Instruction('toggle', 2, 2, 3, 4),
    Instruction('turn off', 0, 0, 1, 1),
  ]


def test_parse_instructions_is_lazy():
  instructions = parse_instructions('turn on 0,0 through 1,1\nbogus\n')

  assert next(instructions) == Instruction('turn on', 0, 0, 2, 2)

  with pytest.raises(MalformedInstruction) as info:
    next(instructions)

  assert info.value.lineno == 2


def test_area():
  assert Instruction('toggle', 0, 0, 2, 3).area == 6
  assert Instruction('toggle', 2, 0, 2, 3).area == 0


@given(
  st.sampled_from(OPERATIONS),
  st.integers(0, 10_000),
  st.integers(0, 10_000),
  st.integers(0, 10_000),
  st.integers(0, 10_000),
)
def test_parse_formatted_line(op, x1, y1, x2, y2):
  instruction = parse(f'{op} {x1},{y1} through {x2},{y2}')

  assert instruction == Instruction(op, x1, y1, x2 + 1, y2 + 1)
