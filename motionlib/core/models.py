#!/usr/bin/env python3

from dataclasses import dataclass, field
from typing import Optional
from motionlib.core.motion_tag import MotionTag

#============================================

@dataclass(frozen=True)
class Position:
	x: float = 0.0
	y: float = 0.0

	def to_dict(self) -> dict:
		return {'x': self.x, 'y': self.y}

#============================================

@dataclass(frozen=True)
class Segment:
	text: str
	sequence_index: int
	tag: Optional[MotionTag] = None
	start_time: float = 0.0   # seconds from timeline zero
	duration: float = 0.0     # entry + display + exit, or the untagged default
	position: Position = field(default_factory=Position)

	@property
	def is_tagged(self) -> bool:
		return self.tag is not None

	@property
	def end_time(self) -> float:
		return self.start_time + self.duration

	def to_dict(self) -> dict:
		data = {
			'index': self.sequence_index,
			'text': self.text,
			'start': self.start_time,
			'duration': self.duration,
			'position': self.position.to_dict(),
		}
		if self.tag is not None:
			data['tag'] = self.tag.to_tag_string()
			data['motion'] = self.tag.to_dict()
		return data

#============================================

@dataclass(frozen=True)
class TimelineResult:
	segments: tuple = ()
	total_duration: float = 0.0
	display_text: str = ""
	diagnostics: tuple = ()

	def to_dict(self) -> dict:
		return {
			'display_text': self.display_text,
			'total_duration': self.total_duration,
			'segments': [segment.to_dict() for segment in self.segments],
			'diagnostics': [diag.to_dict() for diag in self.diagnostics],
		}
