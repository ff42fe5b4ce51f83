#!/usr/bin/env python3

import argparse
import sys
import yaml
from trackshufflelib.core import utils
from trackshufflelib.core import summary
from trackshufflelib.core.config import ConfigurationError
from trackshufflelib.core.config import resolve_config
from trackshufflelib.core.project import ShuffleProject

#============================================

def parse_args(argv: list = None):
	"""
	Parse command-line arguments.
	"""
	parser = argparse.ArgumentParser(
		description="Shuffle a directory of audio files, padding each with random silence")
	parser.add_argument('root_directory',
		help='directory holding the audio files to shuffle')
	parser.add_argument('silence_range', nargs='?', default=None,
		help='silence seconds as "min max", or "0" to disable (default "5 10")')
	parser.add_argument('prefix', nargs='?', default=None,
		help='output filename prefix (default "file")')
	parser.add_argument('-c', '--config', dest='config_file',
		help='yaml file with default settings')
	parser.add_argument('-s', '--seed', dest='seed', type=int,
		help='random seed for a repeatable order')
	parser.add_argument('-k', '--keep-temp', dest='keep_temp',
		help='keep temporary silence and concat files', action='store_true')
	parser.add_argument('-K', '--no-keep-temp', dest='keep_temp',
		help='remove temporary silence and concat files', action='store_false')
	parser.add_argument('-n', '--dry-run', dest='dry_run', action='store_true',
		help='probe and plan only, do not write files')
	parser.add_argument('-p', '--dump-plan', dest='dump_plan', action='store_true',
		help='print the planned order as yaml and exit')
	parser.add_argument('-q', '--quiet', dest='quiet', action='store_true',
		help='do not echo commands or print a summary')
	parser.set_defaults(keep_temp=None)
	args = parser.parse_args(argv)
	return args

#============================================

def main(argv: list = None) -> int:
	args = parse_args(argv)
	# --dump-plan owns stdout, so command echo is suppressed
	if args.quiet or args.dump_plan:
		utils.set_quiet_mode(True)
	try:
		config = resolve_config(args.root_directory, args.silence_range,
			args.prefix, config_path=args.config_file, seed=args.seed,
			keep_temp=args.keep_temp, dry_run=args.dry_run or args.dump_plan)
	except ConfigurationError as error:
		print(f"ERROR: {error}", file=sys.stderr)
		return 1
	project = ShuffleProject(config)
	if args.dump_plan:
		project.check_dependencies()
		plan = project.describe_plan(project.plan())
		print(yaml.safe_dump({'plan': plan}, sort_keys=False))
		return 0
	entries = project.run()
	if utils.is_quiet_mode():
		return 0
	if config.dry_run:
		summary.print_summary(entries, title="dry run")
	else:
		summary.print_manifest_summary(project.context.manifest_path)
	return 0


if __name__ == '__main__':
	sys.exit(main())
