#!/usr/bin/env python3

import re
from motionlib.core import diagnostics
from motionlib.core import motion_tag
from motionlib.core import utils
from motionlib.core.models import Segment

# a tag token, a plain word, or a stray bracket with no partner
TOKEN_PATTERN = re.compile(r"<[^>]*>|[^\s<>]+|[<>]")

WORD = 'word'
TAG = 'tag'

#============================================

def tokenize(text: str) -> list:
	"""
	Split raw text into ordered (kind, text) tokens.

	Whitespace separates tokens. A bracket-delimited substring is a single
	tag token even when it is glued to a word, and stray brackets are
	dropped.
	"""
	tokens = []
	for match in TOKEN_PATTERN.finditer(text):
		token = match.group(0)
		if token in ('<', '>'):
			continue
		if motion_tag.is_tag_token(token):
			tokens.append((TAG, token))
		else:
			tokens.append((WORD, token))
	return tokens

#============================================

def strip_tags(text: str) -> str:
	"""
	Remove all tag syntax from text and collapse whitespace.
	"""
	stripped = motion_tag.TAG_PATTERN.sub('', text)
	stripped = stripped.replace('<', '').replace('>', '')
	return utils.normalize_whitespace(stripped)

#============================================

class MotionParser():
	def __init__(self, text: str):
		if not isinstance(text, str):
			raise RuntimeError("motion text must be a string")
		self.text = text
		self.tokens = []
		self.diagnostics = []

	#============================
	def parse(self) -> list:
		self.tokens = tokenize(self.text)
		self.diagnostics = []
		segments = []
		pending = []
		for token_index, (kind, token) in enumerate(self.tokens):
			if kind == WORD:
				pending.append(token)
				continue
			tag = self._read_tag(token, token_index)
			if tag is None:
				# malformed tags leave the group open
				continue
			if len(pending) == 0:
				self.diagnostics.append(diagnostics.orphan_tag(token, token_index))
				continue
			segments.append(self._make_segment(pending, tag, len(segments)))
			pending = []
		if len(pending) > 0:
			segments.append(self._make_segment(pending, None, len(segments)))
		return segments

	#============================
	def _read_tag(self, token: str, token_index: int):
		try:
			return motion_tag.parse_tag(token)
		except motion_tag.TagValidationError as error:
			self.diagnostics.append(diagnostics.malformed_tag(token, token_index, error))
		return None

	#============================
	def _make_segment(self, words: list, tag, sequence_index: int) -> Segment:
		return Segment(text=" ".join(words), sequence_index=sequence_index, tag=tag)

#============================================

def parse(text: str) -> list:
	return MotionParser(text).parse()

#============================================

def lint_text(text: str) -> list:
	"""
	Diagnostics for every malformed or orphaned tag in text.
	"""
	parser = MotionParser(text)
	parser.parse()
	return list(parser.diagnostics)
