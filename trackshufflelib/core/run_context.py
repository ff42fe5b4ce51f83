#!/usr/bin/env python3

import os
from dataclasses import dataclass
from trackshufflelib.core import utils

RANDOMIZED_DIRNAME = 'Randomized'
MANIFEST_FILENAME = 'map.txt'

#============================================

@dataclass(frozen=True)
class RunContext():
	randomized_root: str
	output_dir: str
	manifest_path: str

	#============================
	def concat_list_path(self, index: int) -> str:
		return os.path.join(self.output_dir, f"concat-{index}.txt")

	#============================
	def temp_silence_path(self, index: int, extension: str) -> str:
		return os.path.join(self.output_dir, f"silence_tmp-{index}.{extension}")

	#============================
	def encoded_silence_path(self, index: int, extension: str) -> str:
		return os.path.join(self.output_dir, f"silence-{index}.{extension}")

#============================================

def build_run_context(root_directory: str, timestamp: str = None) -> RunContext:
	if timestamp is None:
		timestamp = utils.make_timestamp()
	randomized_root = os.path.join(root_directory, RANDOMIZED_DIRNAME)
	output_dir = os.path.join(randomized_root, timestamp)
	manifest_path = os.path.join(output_dir, MANIFEST_FILENAME)
	return RunContext(randomized_root, output_dir, manifest_path)

#============================================

def create_output_directories(context: RunContext) -> None:
	os.makedirs(context.randomized_root, exist_ok=True)
	os.makedirs(context.output_dir, exist_ok=True)
	return
