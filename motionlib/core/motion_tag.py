#!/usr/bin/env python3

###
# motion tag grammar:
#   <EntrySpeed><EntryDir><DisplayDuration><ExitDir><ExitSpeed>
# example: <0.3F1.2R0.9> enters from the front in 0.3s, holds 1.2s,
# exits right in 0.9s
###

import enum
import re
from dataclasses import dataclass
from decimal import Decimal
from motionlib.core import utils

TAG_PATTERN = re.compile(r"<[^>]*>")
DIGITS = "0123456789"
SYNTAX_HELP = ("Use format <[EntrySpeed][EntryDir][Duration][ExitDir][ExitSpeed]> "
	"like <0.3F1.2R0.9>")

MAX_SPEED = Decimal('10')
MAX_DISPLAY_DURATION = Decimal('30')

MOTION_EXAMPLES = [
	('<0.3F1.2R0.9>', 'Front entry (0.3s), display 1.2s, exit right (0.9s)'),
	('<0.5L1.8B0.4>', 'Left entry (0.5s), display 1.8s, exit back (0.4s)'),
	('<0.8R2.0F1.2>', 'Right entry (0.8s), display 2.0s, exit front (1.2s)'),
	('<0.2B0.5L0.6>', 'Back entry (0.2s), display 0.5s, exit left (0.6s)'),
]

#============================================

class Direction(enum.Enum):
	LEFT = 'L'
	RIGHT = 'R'
	FRONT = 'F'
	BACK = 'B'

	@property
	def label(self) -> str:
		return self.name.capitalize()

#============================================

class TagValidationError(RuntimeError):
	def __init__(self, field: str, value: str, message: str):
		super().__init__(message)
		self.field = field
		self.value = value
		self.message = message

#============================================

# (field name, kind, human name, upper bound)
TAG_FIELDS = (
	('entry_speed', 'number', 'entry speed', MAX_SPEED),
	('entry_direction', 'direction', 'entry direction', None),
	('display_duration', 'number', 'display duration', MAX_DISPLAY_DURATION),
	('exit_direction', 'direction', 'exit direction', None),
	('exit_speed', 'number', 'exit speed', MAX_SPEED),
)

#============================================

def _range_message(human_name: str, value: str, upper: Decimal) -> str:
	return (f"Invalid {human_name} '{value}'. "
		f"Use a positive number (0.1 to {upper} seconds)")

#============================================

def _direction_message(human_name: str, value: str) -> str:
	return f"Invalid {human_name} '{value}'. Use L, R, F, or B"

#============================================

def _check_range(field: str, human_name: str, value: str, upper: Decimal) -> None:
	number = Decimal(value)
	# a value too small for a float would be stored as 0.0
	if number <= 0 or number > upper or float(number) <= 0:
		raise TagValidationError(field, value, _range_message(human_name, value, upper))
	return

#============================================

@dataclass(frozen=True)
class MotionTag:
	entry_speed: float
	entry_direction: Direction
	display_duration: float
	exit_direction: Direction
	exit_speed: float

	def __post_init__(self):
		for field, kind, human_name, upper in TAG_FIELDS:
			value = getattr(self, field)
			if kind == 'direction':
				if not isinstance(value, Direction):
					raise TagValidationError(field, str(value),
						_direction_message(human_name, str(value)))
				continue
			_check_range(field, human_name, str(utils.to_decimal(value)), upper)

	@property
	def total_duration(self) -> float:
		total = (utils.to_decimal(self.entry_speed)
			+ utils.to_decimal(self.display_duration)
			+ utils.to_decimal(self.exit_speed))
		return float(total)

	def to_tag_string(self) -> str:
		return "<{}{}{}{}{}>".format(
			utils.format_number(self.entry_speed),
			self.entry_direction.value,
			utils.format_number(self.display_duration),
			self.exit_direction.value,
			utils.format_number(self.exit_speed),
		)

	def to_dict(self) -> dict:
		return {
			'entry_speed': self.entry_speed,
			'entry_direction': self.entry_direction.label,
			'display_duration': self.display_duration,
			'exit_direction': self.exit_direction.label,
			'exit_speed': self.exit_speed,
		}

#============================================

def _scan_number(content: str, pos: int) -> int:
	"""
	Scan one unsigned decimal number starting at pos.

	Accepts digits with an optional single dot followed by at least one
	digit, matching the pattern \\d*\\.?\\d+.

	Returns:
		The index after the number, or -1 when no number starts at pos.
	"""
	start = pos
	while pos < len(content) and content[pos] in DIGITS:
		pos += 1
	int_digits = pos - start
	if pos < len(content) and content[pos] == '.':
		frac_start = pos + 1
		frac_end = frac_start
		while frac_end < len(content) and content[frac_end] in DIGITS:
			frac_end += 1
		if frac_end == frac_start:
			return -1
		return frac_end
	if int_digits == 0:
		return -1
	return pos

#============================================

def _bad_run(content: str, pos: int) -> str:
	"""
	Text from pos up to the next direction letter, used in error messages.
	"""
	end = pos
	while end < len(content) and content[end] not in 'LRFB':
		end += 1
	if end == pos and pos < len(content):
		end = pos + 1
	return content[pos:end]

#============================================

def _strip_delimiters(raw: str) -> str:
	if len(raw) >= 2 and raw.startswith('<') and raw.endswith('>'):
		return raw[1:-1]
	return raw

#============================================

def parse_tag(raw: str) -> MotionTag:
	"""
	Parse and validate one motion tag.

	Args:
		raw: Tag text, with or without the enclosing angle brackets.

	Returns:
		The validated MotionTag.

	Raises:
		TagValidationError: naming the first field that fails the grammar,
		or the first field that is out of range.
	"""
	if not isinstance(raw, str):
		raise TagValidationError('syntax', repr(raw),
			f"Invalid motion syntax. {SYNTAX_HELP}")
	content = _strip_delimiters(raw)
	if content == '':
		raise TagValidationError('syntax', '', f"Empty motion tag. {SYNTAX_HELP}")
	pos = 0
	values = {}
	# grammar pass
	for field, kind, human_name, upper in TAG_FIELDS:
		if kind == 'number':
			end = _scan_number(content, pos)
			if end < 0:
				value = _bad_run(content, pos)
				raise TagValidationError(field, value,
					_range_message(human_name, value, upper))
			values[field] = content[pos:end]
			pos = end
			continue
		if pos >= len(content) or content[pos] not in 'LRFB':
			value = content[pos:pos + 1]
			raise TagValidationError(field, value, _direction_message(human_name, value))
		values[field] = content[pos]
		pos += 1
	if pos != len(content):
		trailing = content[pos:]
		raise TagValidationError('syntax', trailing,
			f"Unexpected text '{trailing}' after exit speed. {SYNTAX_HELP}")
	# range pass
	for field, kind, human_name, upper in TAG_FIELDS:
		if kind == 'number':
			_check_range(field, human_name, values[field], upper)
	tag = MotionTag(
		entry_speed=float(values['entry_speed']),
		entry_direction=Direction(values['entry_direction']),
		display_duration=float(values['display_duration']),
		exit_direction=Direction(values['exit_direction']),
		exit_speed=float(values['exit_speed']),
	)
	return tag

#============================================

def validate_tag(raw: str) -> tuple:
	"""
	Editor-facing check that never raises.

	Returns:
		(True, None) for a valid tag, otherwise (False, error message).
	"""
	try:
		parse_tag(raw)
	except TagValidationError as error:
		return (False, error.message)
	return (True, None)

#============================================

def is_tag_token(token: str) -> bool:
	return TAG_PATTERN.fullmatch(token) is not None

#============================================

def find_tag_spans(text: str) -> list:
	"""
	List every bracket-delimited substring as (start, end, raw).
	"""
	spans = []
	for match in TAG_PATTERN.finditer(text):
		spans.append((match.start(), match.end(), match.group(0)))
	return spans
