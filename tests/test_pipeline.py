#!/usr/bin/env python3

"""
Pytest coverage for the shuffle pipeline with the media tools stubbed out.
"""

# Standard Library
import collections
import io
import os
import subprocess
import sys

# PIP3 modules
import pytest
import yaml
from rich.console import Console

REPO_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if REPO_ROOT not in sys.path:
	sys.path.insert(0, REPO_ROOT)

# local repo modules
import trackshuffle_cli
from trackshufflelib.core import summary
from trackshufflelib.core import utils
from trackshufflelib.core.config import resolve_config
from trackshufflelib.core.manifest import read_manifest
from trackshufflelib.core.project import ShuffleProject
from trackshufflelib.media import ffmpeg

#============================================

FAKE_REPORTS = {
	".wav": (
		"  Stream #0:0: Audio: pcm_s16le ([1][0][0][0] / 0x0001), "
		"44100 Hz, 2 channels, s16, 1411 kb/s\n"
		"format_name=wav\n"
	),
	".mp3": (
		"  Stream #0:0: Audio: mp3 (mp3float), 22050 Hz, mono, fltp, 64 kb/s\n"
		"format_name=mp3\n"
	),
}

#============================================

def _fake_probe_report(mediafile: str) -> str:
	extension = os.path.splitext(mediafile)[1]
	return FAKE_REPORTS.get(extension, "Invalid data found when processing input\n")

#============================================

def _write_file(path: str, payload: bytes) -> str:
	with open(path, "wb") as handle:
		handle.write(payload)
	return path

#============================================

def _read_file(path: str) -> bytes:
	with open(path, "rb") as handle:
		return handle.read()

#============================================

@pytest.fixture
def stub_probe(monkeypatch):
	monkeypatch.setattr(ffmpeg, "probeReport", _fake_probe_report)
	monkeypatch.setattr(utils, "check_dependency", lambda cmd_name: None)
	monkeypatch.setenv(utils.QUIET_ENV_VAR, "1")

#============================================

@pytest.fixture
def loud_env(monkeypatch):
	"""
	Turn command echo on and restore the environment after main() runs.
	"""
	monkeypatch.setenv(utils.QUIET_ENV_VAR, "0")

#============================================

@pytest.fixture
def stub_ffmpeg(monkeypatch):
	"""
	Replace ffmpeg steps with byte-level stand-ins and record concat lists.
	"""
	calls = collections.defaultdict(list)

	def make_silence(silencefile, seconds, channel_layout, samplerate):
		calls['silence'].append((seconds, channel_layout, samplerate))
		return _write_file(silencefile, b"SILENCE")

	def reencode(infile, outfile, encoder):
		calls['encode'].append(encoder)
		return _write_file(outfile, _read_file(infile) + b"+" + encoder.encode())

	def concat(listfile, outfile):
		with open(listfile, "r") as handle:
			lines = handle.read().splitlines()
		calls['concat'].append(lines)
		payload = b""
		for line in lines:
			path = line[len("file '"):-1]
			payload += _read_file(path)
		return _write_file(outfile, payload)

	monkeypatch.setattr(ffmpeg, "makeSilence", make_silence)
	monkeypatch.setattr(ffmpeg, "reencodeAudio", reencode)
	monkeypatch.setattr(ffmpeg, "concatStreamCopy", concat)
	return calls

#============================================

def _make_inputs(root: str) -> dict:
	payloads = {
		"a.wav": b"RIFF-a-wav-data",
		"b.mp3": b"ID3-b-mp3-data",
		"c.wav": b"RIFF-c-wav-data",
	}
	for name, payload in payloads.items():
		_write_file(os.path.join(root, name), payload)
	os.makedirs(os.path.join(root, "subdir"))
	_write_file(os.path.join(root, ".hidden"), b"skip me")
	return payloads

#============================================

def test_silence_disabled_copies_bytes(tmp_path, stub_probe) -> None:
	"""
	Ensure each input yields one byte-identical output and one manifest line.
	"""
	root = str(tmp_path)
	payloads = _make_inputs(root)
	config = resolve_config(root, "0")
	project = ShuffleProject(config, timestamp="20260101_000000")
	entries = project.run()
	output_dir = os.path.join(root, "Randomized", "20260101_000000")
	assert project.context.output_dir == output_dir
	assert len(entries) == 3
	manifest = read_manifest(os.path.join(output_dir, "map.txt"))
	assert manifest == entries
	assert sorted(original for original, _ in manifest) == sorted(payloads)
	indices = []
	for original, renamed in manifest:
		(stem, extension) = os.path.splitext(renamed)
		assert extension == os.path.splitext(original)[1]
		(prefix, index) = stem.rsplit("_", 1)
		assert prefix == "file"
		indices.append(int(index))
		assert _read_file(os.path.join(output_dir, renamed)) == payloads[original]
	assert indices == [1, 2, 3]
	output_names = sorted(os.listdir(output_dir))
	assert len(output_names) == 4
	assert "map.txt" in output_names

#============================================

def test_two_file_scenario(tmp_path, stub_probe) -> None:
	root = str(tmp_path)
	_write_file(os.path.join(root, "a.wav"), b"aaa")
	_write_file(os.path.join(root, "b.mp3"), b"bbb")
	config = resolve_config(root, "0")
	project = ShuffleProject(config)
	entries = project.run()
	expected = {"a.wav": "wav", "b.mp3": "mp3"}
	assert sorted(original for original, _ in entries) == ["a.wav", "b.mp3"]
	for index, (original, renamed) in enumerate(entries, start=1):
		assert renamed == f"file_{index}.{expected[original]}"

#============================================

def test_seeded_runs_share_order(tmp_path, stub_probe) -> None:
	root = str(tmp_path)
	for index in range(10):
		_write_file(os.path.join(root, f"track{index:02d}.wav"), b"x")
	first = ShuffleProject(resolve_config(root, "0", seed=5), timestamp="one").run()
	second = ShuffleProject(resolve_config(root, "0", seed=5), timestamp="two").run()
	assert first == second

#============================================

def test_silence_enabled_splices_and_cleans(tmp_path, stub_probe, stub_ffmpeg) -> None:
	"""
	Ensure silence is prepended, concat lists are per file, and scratch
	files are removed.
	"""
	root = str(tmp_path)
	payloads = _make_inputs(root)
	config = resolve_config(root, "2 2", "song")
	project = ShuffleProject(config, timestamp="run")
	entries = project.run()
	output_dir = project.context.output_dir
	assert len(stub_ffmpeg['concat']) == 3
	for lines in stub_ffmpeg['concat']:
		assert len(lines) == 2
		assert "silence-" in lines[0]
	for seconds, channel_layout, samplerate in stub_ffmpeg['silence']:
		assert seconds == 2.0
		assert channel_layout in ("mono", "stereo")
		assert samplerate in (44100, 22050)
	for original, renamed in entries:
		assert renamed.startswith("song_")
		data = _read_file(os.path.join(output_dir, renamed))
		assert data.startswith(b"SILENCE+")
		assert data.endswith(payloads[original])
	remaining = sorted(os.listdir(output_dir))
	assert "map.txt" in remaining
	assert len(remaining) == 4

#============================================

def test_keep_temp_leaves_scratch_files(tmp_path, stub_probe, stub_ffmpeg) -> None:
	root = str(tmp_path)
	_write_file(os.path.join(root, "a.wav"), b"aaa")
	config = resolve_config(root, "1 1", keep_temp=True)
	project = ShuffleProject(config, timestamp="run")
	project.run()
	remaining = sorted(os.listdir(project.context.output_dir))
	assert "concat-1.txt" in remaining
	assert "silence-1.wav" in remaining
	assert "silence_tmp-1.wav" in remaining

#============================================

def test_unparseable_file_is_copied(tmp_path, stub_probe, stub_ffmpeg) -> None:
	"""
	Ensure files without usable probe data still get one output.
	"""
	root = str(tmp_path)
	_write_file(os.path.join(root, "notes.txt"), b"hello")
	config = resolve_config(root)
	project = ShuffleProject(config, timestamp="run")
	entries = project.run()
	assert entries == [("notes.txt", "file_1.txt")]
	assert stub_ffmpeg['concat'] == []
	output_file = os.path.join(project.context.output_dir, "file_1.txt")
	assert _read_file(output_file) == b"hello"

#============================================

def test_dry_run_creates_nothing(tmp_path, stub_probe) -> None:
	root = str(tmp_path)
	_make_inputs(root)
	config = resolve_config(root, dry_run=True)
	entries = ShuffleProject(config).run()
	assert len(entries) == 3
	assert not os.path.exists(os.path.join(root, "Randomized"))

#============================================

def test_cli_invalid_root_creates_nothing(tmp_path, loud_env, capsys) -> None:
	missing = os.path.join(str(tmp_path), "missing")
	status = trackshuffle_cli.main([missing, "0"])
	assert status == 1
	assert "Could not open directory" in capsys.readouterr().err
	assert not os.path.exists(os.path.join(missing, "Randomized"))
	assert os.listdir(str(tmp_path)) == []

#============================================

def test_cli_dump_plan(tmp_path, stub_probe, capsys) -> None:
	root = str(tmp_path)
	_make_inputs(root)
	status = trackshuffle_cli.main([root, "0", "track", "-p", "-s", "3"])
	assert status == 0
	data = yaml.safe_load(capsys.readouterr().out)
	outputs = [row['output'] for row in data['plan']]
	assert [name.split(".")[0] for name in outputs] == ["track_1", "track_2", "track_3"]
	assert not os.path.exists(os.path.join(root, "Randomized"))

#============================================

def test_cli_run(tmp_path, stub_probe, loud_env) -> None:
	root = str(tmp_path)
	_make_inputs(root)
	status = trackshuffle_cli.main([root, "0", "-q"])
	assert status == 0
	randomized = os.path.join(root, "Randomized")
	run_dirs = os.listdir(randomized)
	assert len(run_dirs) == 1
	manifest = read_manifest(os.path.join(randomized, run_dirs[0], "map.txt"))
	assert len(manifest) == 3
	assert utils.is_quiet_mode()

#============================================

def test_summary_table_lists_entries(tmp_path, stub_probe) -> None:
	root = str(tmp_path)
	_make_inputs(root)
	entries = ShuffleProject(resolve_config(root, "0"), timestamp="run").run()
	table = summary.build_summary_table(entries, title="run")
	assert table.row_count == 3
	assert [column.header for column in table.columns] == ["#", "original", "randomized"]

#============================================

def test_cli_dump_plan_is_pure_yaml(tmp_path, loud_env, monkeypatch, capsys) -> None:
	"""
	Ensure --dump-plan stdout parses as yaml even without -q.
	"""
	root = str(tmp_path)
	_write_file(os.path.join(root, "a: b.wav"), b"aaa")
	_write_file(os.path.join(root, "c.wav"), b"ccc")

	def fake_run(cmd, **kwargs):
		report = _fake_probe_report(cmd[1]).encode("utf-8")
		return subprocess.CompletedProcess(cmd, 0, stdout=report)

	monkeypatch.setattr(utils, "check_dependency", lambda cmd_name: None)
	monkeypatch.setattr(utils.subprocess, "run", fake_run)
	status = trackshuffle_cli.main([root, "0", "-p"])
	assert status == 0
	out = capsys.readouterr().out
	assert "CMD:" not in out
	data = yaml.safe_load(out)
	assert list(data.keys()) == ["plan"]
	assert sorted(row['input'] for row in data['plan']) == ["a: b.wav", "c.wav"]
	for row in data['plan']:
		assert row['format'] == "wav"

#============================================

def test_cli_run_prints_manifest_summary(tmp_path, stub_probe, loud_env, capsys) -> None:
	root = str(tmp_path)
	_make_inputs(root)
	status = trackshuffle_cli.main([root, "0"])
	assert status == 0
	out = capsys.readouterr().out
	for index in (1, 2, 3):
		assert f"file_{index}." in out

#============================================

def test_manifest_summary_reads_map_file(tmp_path, stub_probe) -> None:
	root = str(tmp_path)
	_make_inputs(root)
	project = ShuffleProject(resolve_config(root, "0"), timestamp="run")
	entries = project.run()
	console = Console(file=io.StringIO(), width=200)
	recorded = summary.print_manifest_summary(project.context.manifest_path,
		console=console)
	assert recorded == entries
	text = console.file.getvalue()
	for original, renamed in entries:
		assert original in text
		assert renamed in text
