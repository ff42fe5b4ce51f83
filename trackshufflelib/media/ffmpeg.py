#!/usr/bin/env python3

from trackshufflelib.media.ffprobe import probeReport
from trackshufflelib.media.ffmpeg_silence import makeSilence
from trackshufflelib.media.ffmpeg_silence import reencodeAudio
from trackshufflelib.media.ffmpeg_silence import writeConcatList
from trackshufflelib.media.ffmpeg_silence import concatStreamCopy

__all__ = [
	'probeReport',
	'makeSilence',
	'reencodeAudio',
	'writeConcatList',
	'concatStreamCopy',
]
