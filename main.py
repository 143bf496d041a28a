from dotenv import load_dotenv
load_dotenv()  # This must come before using os.environ

import argparse
import os
import sys

from solver import solve_from_files

# ============================================================================
# CONFIGURATION - SET THESE IN .env OR THE ENVIRONMENT
# ============================================================================

# Print status lines to stderr? ("1", "true", "yes" = on)
VERBOSE_ENV = "HONEYCOMB_VERBOSE"

# Report repeated dictionary words only once?
DEDUPLICATE_ENV = "HONEYCOMB_DEDUPLICATE"

TRUTHY = {"1", "true", "yes", "on"}

# ============================================================================


def env_flag(name):
    """Read a boolean flag from the environment"""
    return os.environ.get(name, "").strip().lower() in TRUTHY


def build_parser():
    parser = argparse.ArgumentParser(
        description='List dictionary words that can be traced through a honeycomb lattice'
    )
    parser.add_argument('lattice', help='Path to lattice file (ring count, then one line per ring)')
    parser.add_argument('dictionary', help='Path to dictionary file (one word per line)')
    return parser


def main(argv=None):
    """
    Run the solver and print found words, sorted, one per line

    Returns:
        Process exit status (0 on success, 1 on a fatal input error)
    """
    args = build_parser().parse_args(argv)

    try:
        words = solve_from_files(
            args.lattice,
            args.dictionary,
            verbose=env_flag(VERBOSE_ENV),
            deduplicate=env_flag(DEDUPLICATE_ENV),
        )
    except FileNotFoundError as e:
        which = "Lattice" if e.filename == args.lattice else "Dictionary"
        print(f"❌ {which} file not found: {e.filename}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"❌ Invalid input: {e}", file=sys.stderr)
        return 1

    for word in words:
        print(word)
    return 0


if __name__ == "__main__":
    sys.exit(main())
