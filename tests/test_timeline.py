#!/usr/bin/env python3

"""
Tests for segment scheduling and timeline queries.
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
from motionlib.core import parser
from motionlib.core import timeline

TAG = "<0.3F1.2R0.9>"

#============================================

def test_tagged_then_untagged_timing() -> None:
	"""
	Ensure tagged duration is entry + display + exit and plain uses the default.
	"""
	(segments, total) = timeline.schedule(parser.parse(f"Hello {TAG} World"), 0)
	assert segments[0].start_time == 0.0
	assert segments[0].duration == 2.4
	assert segments[1].start_time == 2.4
	assert segments[1].duration == 2.0
	assert total == 4.4

#============================================

def test_negative_gap_overlaps() -> None:
	"""
	Ensure a negative gap pulls the next segment into the previous one.
	"""
	(segments, total) = timeline.schedule(parser.parse(f"A {TAG} B {TAG}"), -1.0)
	assert segments[1].start_time == 1.4
	assert total == 3.8
	overlap = segments[0].end_time - segments[1].start_time
	assert overlap == pytest.approx(1.0)

#============================================

def test_cursor_is_not_clamped() -> None:
	"""
	Ensure large negative gaps are not clamped at zero.
	"""
	(segments, total) = timeline.schedule(parser.parse("a <0.1F0.1L0.1> b <0.1F0.1L0.1> c"), -2.0)
	assert segments[1].start_time == pytest.approx(-1.7)
	assert segments[2].start_time == pytest.approx(-3.4)
	assert total == pytest.approx(0.3)

#============================================

@pytest.mark.parametrize("gap", [0.0, 0.25, 1.5])
def test_non_negative_gap_is_monotonic(gap: float) -> None:
	text = f"a {TAG} b c <0.5L1.8B0.4> d <1F2R3> e"
	(segments, total) = timeline.schedule(parser.parse(text), gap)
	for first, second in zip(segments, segments[1:]):
		assert second.start_time >= first.start_time + first.duration - 1e-9
		assert second.start_time - first.end_time == pytest.approx(gap)
	assert total == pytest.approx(max(s.end_time for s in segments))
	assert total == pytest.approx(timeline.total_duration(segments))

#============================================

def test_empty_schedule() -> None:
	assert timeline.schedule([], 0.5) == ([], 0.0)
	assert timeline.total_duration([]) == 0.0

#============================================

@pytest.mark.parametrize("gap", [float('nan'), float('inf'), "soon", None, True])
def test_bad_gap_raises(gap) -> None:
	with pytest.raises(RuntimeError):
		timeline.TimelineScheduler(gap)

#============================================

def test_state_at_time() -> None:
	"""
	Ensure segments split into active, completed and upcoming.
	"""
	(segments, _total) = timeline.schedule(parser.parse(f"a {TAG} b {TAG} c"), 0)
	(active, completed, upcoming) = timeline.state_at_time(segments, 3.0)
	assert [s.text for s in active] == ["b"]
	assert [s.text for s in completed] == ["a"]
	assert [s.text for s in upcoming] == ["c"]
	(active, _completed, _upcoming) = timeline.state_at_time(segments, 2.4)
	assert [s.text for s in active] == ["a", "b"]

#============================================

def test_segment_progress() -> None:
	(segments, _total) = timeline.schedule(parser.parse(f"a {TAG}"), 0)
	segment = segments[0]
	assert timeline.segment_progress(segment, -1.0) == 0.0
	assert timeline.segment_progress(segment, 1.2) == pytest.approx(0.5)
	assert timeline.segment_progress(segment, 9.0) == 1.0

#============================================

def test_next_event_time() -> None:
	(segments, _total) = timeline.schedule(parser.parse(f"a {TAG} b"), 1.0)
	assert timeline.next_event_time(segments, 0.0) == pytest.approx(2.4)
	assert timeline.next_event_time(segments, 2.5) == pytest.approx(3.4)
	assert timeline.next_event_time(segments, 3.4) == pytest.approx(5.4)
	assert timeline.next_event_time(segments, 10.0) is None
