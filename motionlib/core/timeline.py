#!/usr/bin/env python3

import dataclasses
from decimal import Decimal
from motionlib.core import utils

DEFAULT_UNTAGGED_DURATION = Decimal('2.0')

#============================================

class TimelineScheduler():
	"""
	Assign start times and durations to parsed segments.

	Segments play in source order. Each one starts `gap` seconds after the
	previous one ends; a negative gap pulls the next segment back into the
	previous one's exit. The cursor is never clamped.
	"""
	def __init__(self, gap: float = 0.0):
		self.gap = utils.to_decimal(utils.parse_number(gap, "gap"))

	#============================
	def segment_duration(self, segment) -> Decimal:
		tag = segment.tag
		if tag is None:
			return DEFAULT_UNTAGGED_DURATION
		return (utils.to_decimal(tag.entry_speed)
			+ utils.to_decimal(tag.display_duration)
			+ utils.to_decimal(tag.exit_speed))

	#============================
	def schedule(self, segments: list) -> tuple:
		"""
		Returns:
			(scheduled segments, total duration in seconds)
		"""
		cursor = Decimal(0)
		total = Decimal(0)
		scheduled = []
		for segment in segments:
			duration = self.segment_duration(segment)
			scheduled.append(dataclasses.replace(segment,
				start_time=float(cursor), duration=float(duration)))
			total = max(total, cursor + duration)
			cursor += duration + self.gap
		return (scheduled, float(total))

#============================================

def schedule(segments: list, gap: float = 0.0) -> tuple:
	return TimelineScheduler(gap).schedule(segments)

#============================================

def total_duration(segments: list) -> float:
	if len(segments) == 0:
		return 0.0
	ends = [utils.to_decimal(s.start_time) + utils.to_decimal(s.duration)
		for s in segments]
	return float(max(ends))

#============================================

def state_at_time(segments: list, time: float) -> tuple:
	"""
	Split segments into (active, completed, upcoming) at a time point.

	A segment is active from its start through its end, inclusive.
	"""
	active = []
	completed = []
	upcoming = []
	for segment in segments:
		if segment.start_time <= time <= segment.end_time:
			active.append(segment)
		elif time > segment.end_time:
			completed.append(segment)
		else:
			upcoming.append(segment)
	return (active, completed, upcoming)

#============================================

def segment_progress(segment, time: float) -> float:
	if time < segment.start_time:
		return 0.0
	if time > segment.end_time or segment.duration <= 0:
		return 1.0
	return (time - segment.start_time) / segment.duration

#============================================

def next_event_time(segments: list, time: float):
	"""
	Earliest segment start or end strictly after time, or None.
	"""
	upcoming_events = []
	for segment in segments:
		if segment.start_time > time:
			upcoming_events.append(segment.start_time)
		if segment.end_time > time:
			upcoming_events.append(segment.end_time)
	if len(upcoming_events) == 0:
		return None
	return min(upcoming_events)
