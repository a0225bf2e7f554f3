#!/usr/bin/env python3

import math
import re
from decimal import Decimal

QUIET_MODE = False

#============================================

def set_quiet_mode(value: bool) -> None:
	global QUIET_MODE
	QUIET_MODE = bool(value)
	return

#============================================

def is_quiet_mode() -> bool:
	return QUIET_MODE

#============================================

def log_warning(message: str) -> None:
	if is_quiet_mode():
		return
	print(f"WARNING: {message}")
	return

#============================================

def normalize_whitespace(text: str) -> str:
	return re.sub(r"\s+", " ", text).strip()

#============================================

def to_decimal(value) -> Decimal:
	"""
	Convert a number to Decimal through its shortest string form,
	so 0.3 becomes Decimal('0.3') rather than the binary expansion.
	"""
	if isinstance(value, Decimal):
		return value
	if isinstance(value, bool):
		raise RuntimeError("time values must be numbers, not booleans")
	if isinstance(value, int):
		return Decimal(value)
	if isinstance(value, float):
		if not math.isfinite(value):
			raise RuntimeError(f"time value must be finite: {value}")
		return Decimal(str(value))
	raise RuntimeError("time values must be int or float")

#============================================

def parse_number(raw_value, name: str) -> float:
	if raw_value is None:
		raise RuntimeError(f"{name} is required")
	if isinstance(raw_value, bool):
		raise RuntimeError(f"{name} must be a number")
	if isinstance(raw_value, (int, float)):
		value = float(raw_value)
	elif isinstance(raw_value, str):
		try:
			value = float(raw_value.strip())
		except ValueError:
			raise RuntimeError(f"{name} must be a number, got '{raw_value}'")
	else:
		raise RuntimeError(f"{name} must be a number")
	if not math.isfinite(value):
		raise RuntimeError(f"{name} must be finite")
	return value

#============================================

def format_number(value: float) -> str:
	"""
	Format a seconds value the way it is written in a motion tag.
	"""
	text = format(to_decimal(value).normalize(), "f")
	if text in ("", "-0"):
		return "0"
	return text
