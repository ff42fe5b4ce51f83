#!/usr/bin/env python3

import random

#============================================

def make_rng(seed: int = None) -> random.Random:
	return random.Random(seed)

#============================================

def shuffle_entries(entries: list, rng: random.Random) -> list:
	"""
	Return a uniformly random permutation of entries.

	One remaining element is drawn and removed per step until none are
	left. The input list is not modified.
	"""
	remaining = list(entries)
	shuffled = []
	while len(remaining) > 0:
		pick = rng.randrange(len(remaining))
		# swap-remove keeps each draw O(1)
		remaining[pick], remaining[-1] = remaining[-1], remaining[pick]
		shuffled.append(remaining.pop())
	return shuffled

#============================================

def draw_silence_seconds(rng: random.Random, min_seconds: float,
	max_seconds: float) -> float:
	return round(rng.uniform(min_seconds, max_seconds), 2)
