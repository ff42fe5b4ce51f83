#!/usr/bin/env python3

import os
import shlex
import shutil
import subprocess
import sys
import time

QUIET_ENV_VAR = 'TRACKSHUFFLE_QUIET'

#============================================

def set_quiet_mode(quiet: bool) -> None:
	if quiet:
		os.environ[QUIET_ENV_VAR] = '1'
	else:
		os.environ.pop(QUIET_ENV_VAR, None)
	return

#============================================

def is_quiet_mode() -> bool:
	return os.environ.get(QUIET_ENV_VAR, '') == '1'

#============================================

def runCmd(cmd: list) -> str:
	"""
	Run an external command and return its combined stdout/stderr text.

	The exit status is not inspected; callers check for the files the
	command was expected to produce.
	"""
	showcmd = shlex.join(cmd)
	if not is_quiet_mode():
		print(f"CMD: '{showcmd}'")
	proc = subprocess.run(cmd, stdout=subprocess.PIPE,
		stderr=subprocess.STDOUT, stdin=subprocess.DEVNULL)
	output = proc.stdout.decode('utf-8', errors='replace')
	return output

#============================================

def warn(message: str) -> None:
	print(f"WARNING: {message}", file=sys.stderr)
	return

#============================================

def check_dependency(cmd_name: str) -> None:
	if shutil.which(cmd_name) is None:
		raise RuntimeError(f"missing dependency: {cmd_name}")
	return

#============================================

def ensure_file_exists(filepath: str) -> None:
	if not os.path.exists(filepath):
		raise RuntimeError(f"file not found: {filepath}")
	return

#============================================

def remove_files(filepaths: list) -> None:
	for filepath in filepaths:
		if os.path.exists(filepath):
			os.remove(filepath)
	return

#============================================

def make_timestamp() -> str:
	return time.strftime("%Y%m%d_%H%M%S")
