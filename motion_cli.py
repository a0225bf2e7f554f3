#!/usr/bin/env python3

import argparse
import sys
import yaml
from motionlib.core import diagnostics
from motionlib.core import motion_tag
from motionlib.core import settings as settings_module
from motionlib.core import timeline
from motionlib.core import utils
from motionlib.core.compiler import MotionCompiler

#============================================

def parse_args(argv: list = None):
	"""
	Parse command-line arguments.
	"""
	parser = argparse.ArgumentParser(description="Motion language compiler")
	parser.add_argument('-t', '--text', dest='text',
		help='motion text to compile')
	parser.add_argument('-i', '--input', dest='input_file',
		help='file holding motion text to compile')
	source_group = parser.add_mutually_exclusive_group()
	source_group.add_argument('-s', '--settings', dest='settings_file',
		help='yaml file with motion settings')
	source_group.add_argument('-p', '--preset', dest='preset',
		choices=sorted(settings_module.PRESETS.keys()),
		help='built-in motion preset')
	parser.add_argument('-g', '--gap', dest='gap', type=float,
		help='seconds between segments, negative to overlap')
	parser.add_argument('-W', '--width', dest='width', type=float,
		help='canvas width in pixels')
	parser.add_argument('-H', '--height', dest='height', type=float,
		help='canvas height in pixels')
	parser.add_argument('--seed', dest='seed', type=int,
		help='seed for tagged segment jitter')
	parser.add_argument('-a', '--at', dest='at_time', type=float,
		help='report which segments are active at this time')
	parser.add_argument('-e', '--examples', dest='examples', action='store_true',
		help='print example motion tags and exit')
	parser.add_argument('-q', '--quiet', dest='quiet', action='store_true',
		help='suppress warnings')
	args = parser.parse_args(argv)
	return args

#============================================

def read_text(args) -> str:
	if args.text is not None:
		return args.text
	if args.input_file is not None:
		with open(args.input_file, 'r', encoding='utf-8') as handle:
			return handle.read()
	return sys.stdin.read()

#============================================

def build_settings(args) -> settings_module.MotionSettings:
	if args.settings_file is not None:
		settings = settings_module.SettingsLoader(args.settings_file).load()
	elif args.preset is not None:
		settings = settings_module.MotionSettings.from_preset(args.preset)
	else:
		settings = settings_module.MotionSettings()
	if args.gap is not None:
		settings.gap = settings_module.parse_gap(args.gap)
	if args.width is not None or args.height is not None:
		(width, height) = settings.canvas
		if args.width is not None:
			width = args.width
		if args.height is not None:
			height = args.height
		settings.canvas = (width, height)
	if args.seed is not None:
		settings.seed = args.seed
	return settings

#============================================

def build_report(result, at_time: float = None) -> dict:
	report = result.to_dict()
	if at_time is not None:
		(active, completed, upcoming) = timeline.state_at_time(result.segments, at_time)
		report['at'] = {
			'time': at_time,
			'active': [s.sequence_index for s in active],
			'completed': [s.sequence_index for s in completed],
			'upcoming': [s.sequence_index for s in upcoming],
			'next_event': timeline.next_event_time(result.segments, at_time),
		}
	return report

#============================================

def main(argv: list = None):
	args = parse_args(argv)
	utils.set_quiet_mode(args.quiet)
	if args.examples:
		for tag, description in motion_tag.MOTION_EXAMPLES:
			print(f"{tag}  {description}")
		return
	settings = build_settings(args)
	text = read_text(args)
	result = MotionCompiler(settings).compile(text)
	for diagnostic in result.diagnostics:
		utils.log_warning(diagnostics.format_diagnostic(diagnostic))
	report = build_report(result, args.at_time)
	print(yaml.safe_dump(report, sort_keys=False))


if __name__ == '__main__':
	main()
