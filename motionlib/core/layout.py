#!/usr/bin/env python3

###
# word placement on the canvas
# tagged segments sit near the center with a little jitter,
# plain segments search an expanding spiral for a free slot
###

import dataclasses
import math
import random
import numpy
from motionlib.core import diagnostics
from motionlib.core.models import Position

DEFAULT_CANVAS = (800, 600)

#============================================

@dataclasses.dataclass(frozen=True)
class LayoutConfig:
	canvas_width: float
	canvas_height: float
	margin: float
	min_spacing: float = 20.0
	line_height: float = 40.0
	center_bias: float = 0.7
	spiral_step: float = 20.0
	spiral_samples: int = 8
	font_size: float = 32.0
	glyph_width_ratio: float = 0.6
	line_height_ratio: float = 1.2
	jitter_ratio: float = 0.1

	def __post_init__(self):
		if self.canvas_width <= 0 or self.canvas_height <= 0:
			raise RuntimeError("canvas width and height must be positive")
		if self.margin < 0 or self.min_spacing < 0:
			raise RuntimeError("layout margin and spacing must not be negative")
		if self.spiral_step <= 0:
			raise RuntimeError("layout spiral_step must be positive")
		if self.spiral_samples < 1:
			raise RuntimeError("layout spiral_samples must be at least 1")

	@property
	def short_side(self) -> float:
		return min(self.canvas_width, self.canvas_height)

#============================================

def create_layout_config(canvas_width: float, canvas_height: float, **overrides) -> LayoutConfig:
	if canvas_width <= 0 or canvas_height <= 0:
		raise RuntimeError("canvas width and height must be positive")
	values = {
		'canvas_width': float(canvas_width),
		'canvas_height': float(canvas_height),
		'margin': min(canvas_width, canvas_height) * 0.05,
	}
	values.update(overrides)
	return LayoutConfig(**values)

#============================================

def estimate_dimensions(text: str, config: LayoutConfig) -> tuple:
	"""
	Rough text box from character count; no font metrics involved.
	"""
	width = len(text) * config.font_size * config.glyph_width_ratio
	height = config.font_size * config.line_height_ratio
	return (width, height)

#============================================

def collision_box(x: float, y: float, width: float, height: float, spacing: float) -> tuple:
	return (x - spacing, y - spacing, x + width + spacing, y + height + spacing)

#============================================

def boxes_overlap(a: tuple, b: tuple) -> bool:
	"""
	Boxes are (left, top, right, bottom); touching edges count as overlap.
	"""
	return not (a[2] < b[0] or a[0] > b[2] or a[3] < b[1] or a[1] > b[3])

#============================================

class LayoutEngine():
	def __init__(self, config: LayoutConfig, rng: random.Random = None):
		self.config = config
		self.rng = rng if rng is not None else random.Random()
		self.diagnostics = []

	#============================
	def layout(self, segments: list) -> list:
		self.diagnostics = []
		occupied = []
		placed = []
		for segment in segments:
			(width, height) = estimate_dimensions(segment.text, self.config)
			if segment.is_tagged:
				(x, y) = self._jitter_position(width, height)
			else:
				(x, y) = self._spiral_position(segment, width, height, occupied)
			(x, y) = self._constrain(x, y, width, height)
			occupied.append(collision_box(x, y, width, height, self.config.min_spacing))
			placed.append(dataclasses.replace(segment, position=Position(x, y)))
		return placed

	#============================
	def _center(self) -> tuple:
		return (self.config.canvas_width / 2.0, self.config.canvas_height / 2.0)

	#============================
	def _jitter_position(self, width: float, height: float) -> tuple:
		(center_x, center_y) = self._center()
		offset_range = self.config.short_side * self.config.jitter_ratio
		jitter_x = (self.rng.random() - 0.5) * offset_range
		jitter_y = (self.rng.random() - 0.5) * offset_range
		return (center_x + jitter_x - width / 2.0, center_y + jitter_y - height / 2.0)

	#============================
	def _ring_candidates(self, radius: float, width: float, height: float) -> numpy.ndarray:
		"""
		Top-left corners for boxes centered on evenly spaced ring points.
		"""
		(center_x, center_y) = self._center()
		samples = self.config.spiral_samples
		angles = numpy.arange(samples) / samples * 2.0 * math.pi
		xs = center_x + numpy.cos(angles) * radius - width / 2.0
		ys = center_y + numpy.sin(angles) * radius - height / 2.0
		return numpy.column_stack((xs, ys))

	#============================
	def _valid_mask(self, candidates: numpy.ndarray, width: float, height: float,
		occupied: numpy.ndarray) -> numpy.ndarray:
		config = self.config
		xs = candidates[:, 0]
		ys = candidates[:, 1]
		mask = ((xs >= config.margin) & (ys >= config.margin)
			& (xs + width <= config.canvas_width - config.margin)
			& (ys + height <= config.canvas_height - config.margin))
		if occupied.shape[0] == 0:
			return mask
		spacing = config.min_spacing
		left = (xs - spacing)[:, None]
		top = (ys - spacing)[:, None]
		right = (xs + width + spacing)[:, None]
		bottom = (ys + height + spacing)[:, None]
		apart = ((right < occupied[:, 0]) | (left > occupied[:, 2])
			| (bottom < occupied[:, 1]) | (top > occupied[:, 3]))
		return mask & apart.all(axis=1)

	#============================
	def _spiral_position(self, segment, width: float, height: float,
		occupied: list) -> tuple:
		occupied_array = numpy.array(occupied, dtype=float).reshape(-1, 4)
		limit = self.config.short_side / 2.0
		radius = 0.0
		while radius < limit:
			candidates = self._ring_candidates(radius, width, height)
			valid = numpy.flatnonzero(self._valid_mask(candidates, width, height,
				occupied_array))
			if valid.size > 0:
				(x, y) = candidates[valid[0]]
				return (float(x), float(y))
			radius += self.config.spiral_step
		self.diagnostics.append(diagnostics.layout_overflow(segment.text,
			segment.sequence_index))
		(center_x, center_y) = self._center()
		return (center_x - width / 2.0, center_y - height / 2.0)

	#============================
	def _constrain(self, x: float, y: float, width: float, height: float) -> tuple:
		config = self.config
		x = max(config.margin, min(x, config.canvas_width - width - config.margin))
		y = max(config.margin, min(y, config.canvas_height - height - config.margin))
		return (x, y)

#============================================

def layout(segments: list, config: LayoutConfig, rng: random.Random = None) -> list:
	return LayoutEngine(config, rng).layout(segments)

#============================================

def rescale_positions(segments: list, old_config: LayoutConfig,
	new_config: LayoutConfig) -> list:
	"""
	Scale existing positions to a resized canvas without a new layout run.
	"""
	scale_x = new_config.canvas_width / old_config.canvas_width
	scale_y = new_config.canvas_height / old_config.canvas_height
	rescaled = []
	for segment in segments:
		position = Position(segment.position.x * scale_x, segment.position.y * scale_y)
		rescaled.append(dataclasses.replace(segment, position=position))
	return rescaled
