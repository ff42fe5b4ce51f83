#!/usr/bin/env python3

import os
from rich.console import Console
from rich.table import Table
from trackshufflelib.core.manifest import read_manifest

NORD_COLORS = {
	'header': "#88C0D0",
	'paths': "#A3BE8C",
	'numbers': "#B48EAD",
	'strings': "#EBCB8B",
}

#============================================

def build_summary_table(entries: list, title: str = None) -> Table:
	table = Table(title=title, header_style=f"bold {NORD_COLORS['header']}")
	table.add_column("#", justify="right", style=NORD_COLORS['numbers'])
	table.add_column("original", style=NORD_COLORS['paths'])
	table.add_column("randomized", style=NORD_COLORS['strings'])
	for index, (original, renamed) in enumerate(entries, start=1):
		table.add_row(str(index), original, renamed)
	return table

#============================================

def print_summary(entries: list, title: str = None, console: Console = None) -> None:
	if console is None:
		console = Console()
	console.print(build_summary_table(entries, title=title))
	return

#============================================

def print_manifest_summary(manifest_path: str, console: Console = None) -> list:
	"""
	Print the mapping recorded in map.txt, titled with its directory.
	"""
	entries = read_manifest(manifest_path)
	print_summary(entries, title=os.path.dirname(manifest_path), console=console)
	return entries
