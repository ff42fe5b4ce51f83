#!/usr/bin/env python3

import os
import yaml
from dataclasses import dataclass
from typing import Optional

SILENCE_MIN_DEFAULT = 5
SILENCE_MAX_DEFAULT = 10
FILE_PREFIX_DEFAULT = 'file'
SILENCE_DISABLE_TOKEN = '0'

CONFIG_KEYS = ('silence', 'prefix', 'seed', 'keep_temp')
SILENCE_KEYS = ('min', 'max', 'enabled')

#============================================

class ConfigurationError(RuntimeError):
	pass

#============================================

@dataclass(frozen=True)
class ShuffleConfig():
	root_directory: str
	silence_min_seconds: int = SILENCE_MIN_DEFAULT
	silence_max_seconds: int = SILENCE_MAX_DEFAULT
	silence_disabled: bool = False
	output_filename_prefix: str = FILE_PREFIX_DEFAULT
	seed: Optional[int] = None
	keep_temp: bool = False
	dry_run: bool = False

#============================================

def validate_root_directory(directory) -> str:
	if directory is None or not os.path.isdir(directory):
		raise ConfigurationError(f"Could not open directory: \"{directory}\"")
	return directory

#============================================

def parse_silence_range(raw_range) -> tuple:
	"""
	Parse the "min max" silence argument.

	Returns:
		tuple: (min_seconds, max_seconds, disabled), or None when the
		argument is empty and defaults should apply.
	"""
	if raw_range is None:
		return None
	tokens = str(raw_range).split()
	if len(tokens) == 0:
		return None
	if tokens == [SILENCE_DISABLE_TOKEN]:
		return (SILENCE_MIN_DEFAULT, SILENCE_MAX_DEFAULT, True)
	if len(tokens) != 2:
		raise ConfigurationError(
			f"silence range must be \"min max\" or \"0\", got: \"{raw_range}\""
		)
	try:
		min_seconds = int(tokens[0])
		max_seconds = int(tokens[1])
	except ValueError:
		raise ConfigurationError(
			f"silence range values must be integers, got: \"{raw_range}\""
		) from None
	(min_seconds, max_seconds) = normalize_silence_bounds(min_seconds, max_seconds)
	return (min_seconds, max_seconds, False)

#============================================

def normalize_silence_bounds(min_seconds: int, max_seconds: int) -> tuple:
	if min_seconds < 0 or max_seconds < 0:
		raise ConfigurationError("silence range values must not be negative")
	# inverted ranges are swapped
	if min_seconds > max_seconds:
		return (max_seconds, min_seconds)
	return (min_seconds, max_seconds)

#============================================

def validate_prefix(prefix) -> str:
	if prefix is None:
		return FILE_PREFIX_DEFAULT
	prefix = str(prefix)
	if prefix == '':
		raise ConfigurationError("file prefix must not be empty")
	if os.sep in prefix or (os.altsep is not None and os.altsep in prefix):
		raise ConfigurationError(f"file prefix must not contain a path separator: {prefix}")
	return prefix

#============================================

def load_config_file(config_path: str) -> dict:
	if not os.path.isfile(config_path):
		raise ConfigurationError(f"config file not found: {config_path}")
	file_size = os.path.getsize(config_path)
	if file_size > 10 ** 6:
		raise ConfigurationError("config file is larger than 1MB")
	with open(config_path, 'r') as config_file:
		data = yaml.safe_load(config_file)
	if data is None:
		return {}
	if not isinstance(data, dict):
		raise ConfigurationError("config file must be a mapping at the top level")
	for key in data:
		if key not in CONFIG_KEYS:
			raise ConfigurationError(f"unknown config key: {key}")
	silence = data.get('silence', {})
	if silence is None:
		silence = {}
	if not isinstance(silence, dict):
		raise ConfigurationError("config silence must be a mapping")
	for key in silence:
		if key not in SILENCE_KEYS:
			raise ConfigurationError(f"unknown config key: silence.{key}")
	return data

#============================================

def _coerce_int(value, key_path: str) -> int:
	if isinstance(value, bool) or not isinstance(value, int):
		raise ConfigurationError(f"config {key_path} must be an integer")
	return value

#============================================

def _coerce_bool(value, key_path: str) -> bool:
	if not isinstance(value, bool):
		raise ConfigurationError(f"config {key_path} must be true or false")
	return value

#============================================

def resolve_config(root_directory, silence_range=None, prefix=None,
	config_path: str = None, seed: int = None, keep_temp: bool = None,
	dry_run: bool = False) -> ShuffleConfig:
	"""
	Build the run configuration from defaults, an optional YAML file,
	and the command-line values, in increasing priority.
	"""
	root_directory = validate_root_directory(root_directory)
	file_data = {}
	if config_path is not None:
		file_data = load_config_file(config_path)
	silence_data = file_data.get('silence') or {}

	min_seconds = SILENCE_MIN_DEFAULT
	max_seconds = SILENCE_MAX_DEFAULT
	disabled = False
	if 'min' in silence_data:
		min_seconds = _coerce_int(silence_data['min'], 'silence.min')
	if 'max' in silence_data:
		max_seconds = _coerce_int(silence_data['max'], 'silence.max')
	if 'enabled' in silence_data:
		disabled = not _coerce_bool(silence_data['enabled'], 'silence.enabled')
	(min_seconds, max_seconds) = normalize_silence_bounds(min_seconds, max_seconds)

	parsed_range = parse_silence_range(silence_range)
	if parsed_range is not None:
		(min_seconds, max_seconds, disabled) = parsed_range

	if prefix is None:
		prefix = file_data.get('prefix')
	prefix = validate_prefix(prefix)

	if seed is None and file_data.get('seed') is not None:
		seed = _coerce_int(file_data['seed'], 'seed')
	if keep_temp is None:
		keep_temp = _coerce_bool(file_data.get('keep_temp', False), 'keep_temp')

	config = ShuffleConfig(
		root_directory=root_directory,
		silence_min_seconds=min_seconds,
		silence_max_seconds=max_seconds,
		silence_disabled=disabled,
		output_filename_prefix=prefix,
		seed=seed,
		keep_temp=keep_temp,
		dry_run=dry_run,
	)
	return config
