#!/usr/bin/env python3

import os
import shutil
from trackshufflelib.core import utils
from trackshufflelib.core import shuffler
from trackshufflelib.media import ffmpeg

#============================================

def output_extension(metadata) -> str:
	if metadata.container_format is not None:
		return metadata.container_format
	extension = os.path.splitext(metadata.input_path)[1]
	return extension.lstrip('.')

#============================================

def output_filename(prefix: str, index: int, extension: str) -> str:
	if extension == '':
		return f"{prefix}_{index}"
	return f"{prefix}_{index}.{extension}"

#============================================

class Splicer():
	def __init__(self, config, context, rng):
		self.config = config
		self.context = context
		self.rng = rng

	#============================
	def output_path(self, metadata, index: int) -> str:
		filename = output_filename(self.config.output_filename_prefix, index,
			output_extension(metadata))
		return os.path.join(self.context.output_dir, filename)

	#============================
	def create_output(self, metadata, index: int) -> str:
		output_file = self.output_path(metadata, index)
		if self.config.silence_disabled:
			self._copy_input(metadata.input_path, output_file)
			return output_file
		if not metadata.can_synthesize_silence():
			utils.warn(f"incomplete probe data, copying without silence: "
				f"{metadata.input_path}")
			self._copy_input(metadata.input_path, output_file)
			return output_file
		self._create_with_silence(metadata, index, output_file)
		return output_file

	#============================
	def _copy_input(self, input_file: str, output_file: str) -> None:
		shutil.copyfile(input_file, output_file)

	#============================
	def _create_with_silence(self, metadata, index: int, output_file: str) -> None:
		extension = metadata.container_format
		tmp_silence_file = self.context.temp_silence_path(index, extension)
		silence_file = self.context.encoded_silence_path(index, extension)
		concat_file = self.context.concat_list_path(index)
		seconds = shuffler.draw_silence_seconds(self.rng,
			self.config.silence_min_seconds, self.config.silence_max_seconds)
		ffmpeg.makeSilence(tmp_silence_file, seconds, metadata.channels,
			metadata.sample_rate)
		ffmpeg.reencodeAudio(tmp_silence_file, silence_file, metadata.encoder_name)
		ffmpeg.writeConcatList(concat_file, [silence_file, metadata.input_path])
		ffmpeg.concatStreamCopy(concat_file, output_file)
		if not self.config.keep_temp:
			utils.remove_files([tmp_silence_file, silence_file, concat_file])
