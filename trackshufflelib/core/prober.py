#!/usr/bin/env python3

import os
from trackshufflelib.core import probe_parser
from trackshufflelib.media import ffmpeg

#============================================

def list_input_files(root_directory: str) -> list:
	"""
	Return the non-directory entries directly under root_directory.

	The listing follows a shell glob of '*': dotfiles are not matched,
	so they are neither shuffled nor recorded in the manifest, and the
	result is sorted.
	"""
	input_files = []
	for name in sorted(os.listdir(root_directory)):
		if name.startswith('.'):
			continue
		filepath = os.path.join(root_directory, name)
		if os.path.isdir(filepath):
			continue
		input_files.append(filepath)
	return input_files

#============================================

class MediaProber():
	def __init__(self, config):
		self.config = config

	#============================
	def probe_file(self, filepath: str) -> probe_parser.FileMetadata:
		report = ffmpeg.probeReport(filepath)
		return probe_parser.parse_probe_report(filepath, report)

	#============================
	def collect(self) -> list:
		metadata_list = []
		for filepath in list_input_files(self.config.root_directory):
			metadata_list.append(self.probe_file(filepath))
		return metadata_list
