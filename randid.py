'''Prints random web-safe ids. Alphanumeric (BASE62) by default, or zero padded
numeric ids with --numeric. Ids are not guaranteed to be unique.'''
import os
import sys
import random
import logging
import argparse
from dataclasses import dataclass
from importlib import metadata
from typing import Optional

sys.path.append(os.path.dirname(os.path.abspath(__file__)))
from idgen import idgen


@dataclass
class Args:
    length: int
    numeric: bool
    count: int
    seed: Optional[int]


def eprint(*errors, **kwargs):
    '''prints errors to stderr'''
    print(*errors, file=sys.stderr, **kwargs)


def get_version() -> str:
    base_folder = os.path.dirname(os.path.abspath(__file__))
    version_file = os.path.join(base_folder, "VERSION.md")
    if not os.path.exists(version_file):
        # installed copies only carry the version in package metadata
        return metadata.version("randid")
    with open(version_file, "r") as f:
        return f.read().strip()


def init_logs():
    logging.basicConfig(level=logging.INFO,
                        format='[%(levelname)s] %(asctime)s - %(message)s',
                        datefmt='%Y-%m-%d %H:%M:%S')


def parse_args(argv: Optional[list[str]] = None) -> Args:
    version = get_version()
    parser = argparse.ArgumentParser(description=__doc__, prog="randid")
    parser.add_argument("length", type=int, help="number of characters in each id")
    parser.add_argument("--numeric", "-n", help="generate zero padded numeric ids", action="store_true")
    parser.add_argument("--count", "-c", type=int, help="number of ids to print, defaults to 1", default=1)
    parser.add_argument("--seed", "-s", type=int, help="seed for reproducible output", default=None)
    parser.add_argument("--version", "-v", action="version", version=f"%(prog)s {version}")
    arg_data = parser.parse_args(argv)
    args_dict = vars(arg_data)
    return Args(**args_dict)


def validate(args: Args):
    if args.length < 0:
        eprint(f"Error: length must be non-negative, got {args.length}")
        sys.exit(1)

    if args.count < 1:
        eprint(f"Error: count must be at least 1, got {args.count}")
        sys.exit(2)


def generate_ids(args: Args) -> list[str]:
    rng = random.Random(args.seed) if args.seed is not None else None
    id_generator = idgen(args.length, numeric=args.numeric, rng=rng)
    return [id_generator.generate() for _ in range(args.count)]


def main(argv: Optional[list[str]] = None):
    args = parse_args(argv)
    validate(args)
    init_logs()
    ids = generate_ids(args)
    for id in ids:
        print(id)
    kind = "numeric" if args.numeric else "alphanumeric"
    logging.info(f"Generated {len(ids)} {kind} id(s) of length {args.length}")


if __name__ == '__main__':
    main()
