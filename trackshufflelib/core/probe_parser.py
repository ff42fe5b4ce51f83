#!/usr/bin/env python3

"""
Map ffprobe text reports to FileMetadata.

Fields whose pattern is not present in the report are left as None.
"""

import re
from dataclasses import dataclass
from typing import Optional

CHANNELS_RE = re.compile(r"\d+ Hz, (?:(\d+) channels|(mono|stereo))")
FORMAT_RE = re.compile(r"format_name=([A-Za-z0-9]+)")
SAMPLE_RATE_RE = re.compile(r"(\d+) Hz")
ENCODER_RE = re.compile(r"Stream #\d+:\d+[^:\n]*: Audio: (\w+)")

#============================================

@dataclass(frozen=True)
class FileMetadata():
	input_path: str
	channels: Optional[str] = None
	container_format: Optional[str] = None
	sample_rate: Optional[int] = None
	encoder_name: Optional[str] = None

	#============================
	def can_synthesize_silence(self) -> bool:
		"""True when every field needed to build matching silence is known."""
		required = (self.channels, self.container_format, self.sample_rate,
			self.encoder_name)
		return all(value is not None for value in required)

#============================================

def find_channels(text: str) -> Optional[str]:
	match = CHANNELS_RE.search(text)
	if match is None:
		return None
	if match.group(2) is not None:
		return match.group(2)
	# numeric counts collapse to stereo
	if int(match.group(1)) != 0:
		return 'stereo'
	return None

#============================================

def find_format(text: str) -> Optional[str]:
	match = FORMAT_RE.search(text)
	if match is None:
		return None
	return match.group(1)

#============================================

def find_sample_rate(text: str) -> Optional[int]:
	match = SAMPLE_RATE_RE.search(text)
	if match is None:
		return None
	return int(match.group(1))

#============================================

def find_encoder(text: str) -> Optional[str]:
	match = ENCODER_RE.search(text)
	if match is None:
		return None
	return match.group(1)

#============================================

def parse_probe_report(input_path: str, text: str) -> FileMetadata:
	metadata = FileMetadata(
		input_path=input_path,
		channels=find_channels(text),
		container_format=find_format(text),
		sample_rate=find_sample_rate(text),
		encoder_name=find_encoder(text),
	)
	return metadata
