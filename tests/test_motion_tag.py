#!/usr/bin/env python3

"""
Pytest coverage for motion tag parsing and validation.
"""

# Standard Library
import os
import sys

# PIP3 modules
import pytest

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
	sys.path.insert(0, REPO_ROOT)

# local repo modules
from motionlib.core import motion_tag
from motionlib.core.motion_tag import Direction

#============================================

def test_parse_reference_tag() -> None:
	"""
	Ensure the reference tag parses into all five fields.
	"""
	tag = motion_tag.parse_tag("<0.3F1.2R0.9>")
	assert tag.entry_speed == 0.3
	assert tag.entry_direction is Direction.FRONT
	assert tag.display_duration == 1.2
	assert tag.exit_direction is Direction.RIGHT
	assert tag.exit_speed == 0.9
	assert tag.total_duration == 2.4

#============================================

def test_parse_without_delimiters() -> None:
	tag = motion_tag.parse_tag("0.5L1.8B0.4")
	assert tag.entry_direction is Direction.LEFT
	assert tag.exit_direction is Direction.BACK

#============================================

@pytest.mark.parametrize("raw", ["<2L30R10>", "<.5B0.1F1.25>", "<10F0.1L0.1>"])
def test_accepts_number_forms_and_bounds(raw: str) -> None:
	valid, error = motion_tag.validate_tag(raw)
	assert valid, error

#============================================

@pytest.mark.parametrize("raw, field", [
	("<99Z1R0.5>", "entry_direction"),
	("<0.3X1.2R0.9>", "entry_direction"),
	("<F1.2R0.9>", "entry_speed"),
	("<0.3F1.R0.9>", "display_duration"),
	("<0.3F1.2R>", "exit_speed"),
	("<0.3F1.2>", "exit_direction"),
	("<-1F1.2R0.9>", "entry_speed"),
	("<1e2F1.2R0.9>", "entry_direction"),
	("<0.3F1.2R0.9x>", "syntax"),
	("<0.3 F1.2R0.9>", "entry_direction"),
	("<>", "syntax"),
])
def test_grammar_errors_name_field(raw: str, field: str) -> None:
	with pytest.raises(motion_tag.TagValidationError) as caught:
		motion_tag.parse_tag(raw)
	assert caught.value.field == field

#============================================

@pytest.mark.parametrize("raw, field", [
	("<0F1.2R0.9>", "entry_speed"),
	("<10.5F1.2R0.9>", "entry_speed"),
	("<0.3F0R0.9>", "display_duration"),
	("<0.3F30.01R0.9>", "display_duration"),
	("<0.3F1.2R11>", "exit_speed"),
	("<0.3F1.2R0.0>", "exit_speed"),
])
def test_range_errors_name_field(raw: str, field: str) -> None:
	with pytest.raises(motion_tag.TagValidationError) as caught:
		motion_tag.parse_tag(raw)
	assert caught.value.field == field
	assert "positive number" in caught.value.message

#============================================

def test_validate_tag_reports_message() -> None:
	valid, error = motion_tag.validate_tag("<0.3Z1.2R0.9>")
	assert not valid
	assert "Invalid entry direction 'Z'" in error

#============================================

def test_direct_construction_enforces_ranges() -> None:
	with pytest.raises(motion_tag.TagValidationError):
		motion_tag.MotionTag(0.3, Direction.FRONT, 31.0, Direction.RIGHT, 0.9)
	with pytest.raises(motion_tag.TagValidationError):
		motion_tag.MotionTag(0.3, 'F', 1.0, Direction.RIGHT, 0.9)

#============================================

def test_tag_string_round_trip() -> None:
	for raw, _description in motion_tag.MOTION_EXAMPLES:
		tag = motion_tag.parse_tag(raw)
		assert motion_tag.parse_tag(tag.to_tag_string()) == tag
	assert motion_tag.parse_tag("<7L1.25R3>").to_tag_string() == "<7L1.25R3>"

#============================================

def test_find_tag_spans() -> None:
	spans = motion_tag.find_tag_spans("Hi <0.3F1.2R0.9> there <bad>")
	assert spans == [(3, 16, "<0.3F1.2R0.9>"), (23, 28, "<bad>")]

#============================================

@pytest.mark.parametrize("raw", ["<1.2345678F1R1>", "<0.0000001F1R1>", "<9.87654321B29.999999999L0.10000001>"])
def test_tag_string_keeps_all_digits(raw: str) -> None:
	"""
	Ensure long fractional parts survive formatting back to a tag.
	"""
	tag = motion_tag.parse_tag(raw)
	assert tag.to_tag_string() == raw
	assert motion_tag.parse_tag(tag.to_tag_string()) == tag

#============================================

def test_underflowing_value_reports_written_token() -> None:
	"""
	Ensure a value too small for a float is rejected with the text as written.
	"""
	written = "0." + "0" * 400 + "1"
	with pytest.raises(motion_tag.TagValidationError) as caught:
		motion_tag.parse_tag(f"<{written}F1R1>")
	assert caught.value.field == "entry_speed"
	assert caught.value.value == written

#============================================

def test_is_tag_token() -> None:
	assert motion_tag.is_tag_token("<0.3F1.2R0.9>")
	assert motion_tag.is_tag_token("<bad>")
	assert not motion_tag.is_tag_token("word")
	assert not motion_tag.is_tag_token("<open")
