#!/usr/bin/env python3

from trackshufflelib.core import utils

#============================================

def probeReport(mediafile: str) -> str:
	cmd = ["ffprobe", mediafile, "-show_format"]
	return utils.runCmd(cmd)
