#!/usr/bin/env python3

import random
from motionlib.core import layout
from motionlib.core import parser
from motionlib.core import timeline
from motionlib.core.models import TimelineResult
from motionlib.core.settings import MotionSettings

#============================================

def compile_text(text: str, gap: float = 0.0, layout_config: layout.LayoutConfig = None,
	rng: random.Random = None, seed: int = None) -> TimelineResult:
	"""
	Compile motion-tagged text into a timed, positioned segment list.

	Args:
		text: Raw text with optional <EntrySpeed Dir Duration Dir ExitSpeed> tags.
		gap: Seconds between one segment's end and the next start; may be negative.
		layout_config: Canvas description; defaults to an 800x600 canvas.
		rng: Random source for tagged-segment jitter.
		seed: Seed for a fresh random source when rng is not given.

	Returns:
		TimelineResult with segments, total duration, display text and
		advisory diagnostics. Malformed tags never raise.
	"""
	if layout_config is None:
		layout_config = layout.create_layout_config(*layout.DEFAULT_CANVAS)
	if rng is None:
		rng = random.Random(seed)
	scheduler = timeline.TimelineScheduler(gap)
	motion_parser = parser.MotionParser(text)
	segments = motion_parser.parse()
	display_text = parser.strip_tags(text)
	(segments, total_duration) = scheduler.schedule(segments)
	engine = layout.LayoutEngine(layout_config, rng)
	segments = engine.layout(segments)
	result = TimelineResult(
		segments=tuple(segments),
		total_duration=total_duration,
		display_text=display_text,
		diagnostics=tuple(motion_parser.diagnostics + engine.diagnostics),
	)
	return result

#============================================

class MotionCompiler():
	def __init__(self, settings: MotionSettings = None):
		self.settings = settings if settings is not None else MotionSettings()

	#============================
	def compile(self, text: str) -> TimelineResult:
		return compile_text(text, gap=self.settings.gap,
			layout_config=self.settings.layout_config(), seed=self.settings.seed)
