#!/usr/bin/env python3
# Dedicated to the public domain under CC0: https://creativecommons.org/publicdomain/zero/1.0/.

from argparse import ArgumentParser
from os import environ, getcwd, pathsep
from pathlib import Path
from subprocess import run
from sys import executable


def main() -> None:
  arg_parser = ArgumentParser(description='Find and run utest unit tests with the extension ".ut.py", defaulting to "test/".')
  arg_parser.add_argument('paths', nargs='*', default=['test'])
  args = arg_parser.parse_args()

  env = dict(environ)
  work_dir = env.setdefault('UTEST_WORK_DIR', getcwd())
  # Make the packages in the working directory importable without an installation.
  env['PYTHONPATH'] = pathsep.join(p for p in (work_dir, env.get('PYTHONPATH')) if p)

  paths = sorted(p for arg in args.paths for p in walk_tests(Path(arg)))
  if not paths: exit(f'utest: no tests found in: {", ".join(args.paths)}')

  failed = []
  for path in paths:
    print(path)
    c = run([executable, str(path)], env=env).returncode
    if c != 0:
      failed.append(path)
      print()

  if failed:
    print(f'utest: {len(failed)} of {len(paths)} test files failed.')
  exit(1 if failed else 0)


def walk_tests(path:Path) -> list[Path]:
  'Return the ".ut.py" files at or under `path`.'
  if path.is_file(): return [path] if path.name.endswith('.ut.py') else []
  return [p for p in path.rglob('*.ut.py') if p.is_file()]


if __name__ == '__main__': main()
