#!/usr/bin/env python3

import os
import yaml
from motionlib.core import layout
from motionlib.core import utils

MIN_GAP = -2.0
MAX_GAP = 5.0

PRESETS = {
	'default': {'gap': 0.0, 'description': 'Words play back to back'},
	'subtle': {'gap': 0.2, 'description': 'Gentle, minimal movement'},
	'dynamic': {'gap': 0.1, 'description': 'Balanced motion with energy'},
	'dramatic': {'gap': -0.1, 'description': 'Bold, sweeping movements'},
}

LAYOUT_KEYS = (
	'margin', 'min_spacing', 'line_height', 'center_bias', 'spiral_step',
	'spiral_samples', 'font_size', 'glyph_width_ratio', 'line_height_ratio',
	'jitter_ratio',
)

#============================================

class MotionSettings():
	def __init__(self, gap: float = 0.0, canvas: tuple = layout.DEFAULT_CANVAS,
		layout_overrides: dict = None, seed: int = None, preset: str = 'default'):
		self.gap = parse_gap(gap)
		self.canvas = canvas
		self.layout_overrides = dict(layout_overrides or {})
		self.seed = seed
		self.preset = preset

	#============================
	def layout_config(self) -> layout.LayoutConfig:
		(width, height) = self.canvas
		return layout.create_layout_config(width, height, **self.layout_overrides)

	#============================
	@classmethod
	def from_preset(cls, name: str) -> 'MotionSettings':
		preset = PRESETS.get(name)
		if preset is None:
			raise RuntimeError(f"unknown motion preset: {name}")
		return cls(gap=preset['gap'], preset=name)

#============================================

def parse_gap(raw_gap) -> float:
	gap = utils.parse_number(raw_gap, "gap")
	if gap < MIN_GAP or gap > MAX_GAP:
		raise RuntimeError(f"gap must be between {MIN_GAP} and {MAX_GAP} seconds")
	return gap

#============================================

class SettingsLoader():
	def __init__(self, yaml_file: str):
		self.yaml_file = yaml_file

	#============================
	def load(self) -> MotionSettings:
		data = self._load_yaml()
		if data.get('motion') != 1:
			raise RuntimeError("motion must be set to 1 for settings files")
		preset_name = data.get('preset', 'default')
		settings = MotionSettings.from_preset(preset_name)
		if data.get('gap') is not None:
			settings.gap = parse_gap(data.get('gap'))
		if data.get('canvas') is not None:
			settings.canvas = self._parse_canvas(data.get('canvas'))
		settings.layout_overrides = self._parse_layout(data.get('layout', {}))
		settings.seed = self._parse_seed(data.get('seed'))
		# build once so bad layout values fail at load time
		settings.layout_config()
		return settings

	#============================
	def _load_yaml(self) -> dict:
		if not os.path.exists(self.yaml_file):
			raise RuntimeError(f"file not found: {self.yaml_file}")
		file_size = os.path.getsize(self.yaml_file)
		if file_size > 10 ** 6:
			raise RuntimeError("settings file is larger than 1MB")
		with open(self.yaml_file, 'r') as data_file:
			data = yaml.safe_load(data_file)
		if not isinstance(data, dict):
			raise RuntimeError("settings yaml must be a mapping at the top level")
		return data

	#============================
	def _parse_canvas(self, canvas) -> tuple:
		if not isinstance(canvas, list) or len(canvas) != 2:
			raise RuntimeError("canvas must be [width, height]")
		width = utils.parse_number(canvas[0], "canvas width")
		height = utils.parse_number(canvas[1], "canvas height")
		if width <= 0 or height <= 0:
			raise RuntimeError("canvas width and height must be positive")
		return (width, height)

	#============================
	def _parse_layout(self, layout_data) -> dict:
		if layout_data is None:
			return {}
		if not isinstance(layout_data, dict):
			raise RuntimeError("layout must be a mapping")
		overrides = {}
		for key, value in layout_data.items():
			if key not in LAYOUT_KEYS:
				raise RuntimeError(f"unknown layout key: layout.{key}")
			if key == 'spiral_samples':
				if isinstance(value, bool) or not isinstance(value, int):
					raise RuntimeError("layout.spiral_samples must be an integer")
				overrides[key] = value
				continue
			overrides[key] = utils.parse_number(value, f"layout.{key}")
		return overrides

	#============================
	def _parse_seed(self, raw_seed):
		if raw_seed is None:
			return None
		if isinstance(raw_seed, bool) or not isinstance(raw_seed, int):
			raise RuntimeError("seed must be an integer")
		return raw_seed
