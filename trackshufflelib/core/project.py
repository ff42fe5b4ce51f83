#!/usr/bin/env python3

import os
from trackshufflelib.core import utils
from trackshufflelib.core import run_context
from trackshufflelib.core import shuffler
from trackshufflelib.core.manifest import ManifestWriter
from trackshufflelib.core.prober import MediaProber
from trackshufflelib.core.splicer import Splicer

#============================================

class ShuffleProject():
	def __init__(self, config, timestamp: str = None):
		self.config = config
		self.context = run_context.build_run_context(config.root_directory,
			timestamp=timestamp)
		self.rng = shuffler.make_rng(config.seed)
		self._prober = MediaProber(config)
		self._splicer = Splicer(config, self.context, self.rng)
		self._manifest = ManifestWriter(self.context.manifest_path)
		self.entries = []

	#============================
	def check_dependencies(self) -> None:
		utils.check_dependency('ffprobe')
		if not self.config.silence_disabled and not self.config.dry_run:
			utils.check_dependency('ffmpeg')

	#============================
	def plan(self) -> list:
		"""
		Probe and shuffle the input files.

		Returns:
			list: FileMetadata in processing order.
		"""
		metadata_list = self._prober.collect()
		return shuffler.shuffle_entries(metadata_list, self.rng)

	#============================
	def describe_plan(self, ordered: list) -> list:
		rows = []
		for index, metadata in enumerate(ordered, start=1):
			output_file = self._splicer.output_path(metadata, index)
			rows.append({
				'input': os.path.basename(metadata.input_path),
				'output': os.path.basename(output_file),
				'channels': metadata.channels,
				'format': metadata.container_format,
				'sample_rate': metadata.sample_rate,
				'encoder': metadata.encoder_name,
			})
		return rows

	#============================
	def run(self) -> list:
		self.check_dependencies()
		if self.config.dry_run:
			ordered = self.plan()
			if not utils.is_quiet_mode():
				print("dry run: no files written")
			rows = self.describe_plan(ordered)
			return [(row['input'], row['output']) for row in rows]
		run_context.create_output_directories(self.context)
		ordered = self.plan()
		self.entries = []
		for index, metadata in enumerate(ordered, start=1):
			output_file = self._splicer.create_output(metadata, index)
			entry = self._manifest.append(metadata.input_path, output_file)
			self.entries.append(entry)
		return self.entries
