#!/usr/bin/env python3

import os
from trackshufflelib.core import utils

#============================================

def makeSilence(silencefile: str, seconds: float, channel_layout: str,
	samplerate: int) -> str:
	filter_text = f"anullsrc=channel_layout={channel_layout}:sample_rate={samplerate}"
	cmd = ["ffmpeg", "-y", "-f", "lavfi", "-i", filter_text,
		"-t", f"{seconds:.2f}", silencefile]
	utils.runCmd(cmd)
	utils.ensure_file_exists(silencefile)
	return silencefile

#============================================

def reencodeAudio(infile: str, outfile: str, encoder: str) -> str:
	# match the source codec so the sample format (bit depth) lines up
	cmd = ["ffmpeg", "-y", "-i", infile, "-acodec", encoder, outfile]
	utils.runCmd(cmd)
	utils.ensure_file_exists(outfile)
	return outfile

#============================================

def quoteConcatPath(filepath: str) -> str:
	path = os.path.abspath(filepath)
	escaped = path.replace("'", "'\\''")
	return f"'{escaped}'"

#============================================

def writeConcatList(listfile: str, mediafiles: list) -> str:
	lines = []
	for mediafile in mediafiles:
		lines.append(f"file {quoteConcatPath(mediafile)}")
	with open(listfile, 'w') as handle:
		handle.write("\n".join(lines))
		handle.write("\n")
	return listfile

#============================================

def concatStreamCopy(listfile: str, outfile: str) -> str:
	cmd = ["ffmpeg", "-y", "-f", "concat", "-safe", "0", "-i", listfile,
		"-codec", "copy", outfile]
	utils.runCmd(cmd)
	utils.ensure_file_exists(outfile)
	return outfile
