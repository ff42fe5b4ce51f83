#!/usr/bin/env python3

import os

MANIFEST_SEPARATOR = ' -> '

#============================================

class ManifestWriter():
	def __init__(self, manifest_path: str):
		self.manifest_path = manifest_path

	#============================
	def append(self, input_file: str, output_file: str) -> tuple:
		input_basename = os.path.basename(input_file)
		output_basename = os.path.basename(output_file)
		with open(self.manifest_path, 'a', encoding='utf-8') as handle:
			handle.write(f"{input_basename}{MANIFEST_SEPARATOR}{output_basename}\n")
		return (input_basename, output_basename)

#============================================

def read_manifest(manifest_path: str) -> list:
	entries = []
	with open(manifest_path, 'r', encoding='utf-8') as handle:
		for line in handle:
			line = line.rstrip('\n')
			if line == '':
				continue
			(original, renamed) = line.rsplit(MANIFEST_SEPARATOR, 1)
			entries.append((original, renamed))
	return entries
