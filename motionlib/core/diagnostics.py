#!/usr/bin/env python3

from dataclasses import dataclass
from typing import Optional

MALFORMED_TAG = 'malformed_tag'
ORPHAN_TAG = 'orphan_tag'
LAYOUT_OVERFLOW = 'layout_overflow'

#============================================

@dataclass(frozen=True)
class Diagnostic:
	"""
	Advisory message for the editor. Never aborts a compile.
	"""
	kind: str
	message: str
	field: Optional[str] = None
	token: Optional[str] = None
	token_index: Optional[int] = None

	def to_dict(self) -> dict:
		data = {'kind': self.kind, 'message': self.message}
		if self.field is not None:
			data['field'] = self.field
		if self.token is not None:
			data['token'] = self.token
		if self.token_index is not None:
			data['token_index'] = self.token_index
		return data

#============================================

def malformed_tag(token: str, token_index: int, error) -> Diagnostic:
	return Diagnostic(MALFORMED_TAG, error.message, field=error.field,
		token=token, token_index=token_index)

#============================================

def orphan_tag(token: str, token_index: int) -> Diagnostic:
	message = f"Motion tag {token} has no preceding text and was ignored"
	return Diagnostic(ORPHAN_TAG, message, token=token, token_index=token_index)

#============================================

def layout_overflow(text: str, sequence_index: int) -> Diagnostic:
	message = (f"No free position for segment {sequence_index} '{text}', "
		"placed at canvas center")
	return Diagnostic(LAYOUT_OVERFLOW, message, token=text)

#============================================

def format_diagnostic(diagnostic: Diagnostic) -> str:
	location = ""
	if diagnostic.token_index is not None:
		location = f"token {diagnostic.token_index}: "
	return f"{diagnostic.kind}: {location}{diagnostic.message}"
