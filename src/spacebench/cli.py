# src/spacebench/cli.py
import sys
import argparse
from pathlib import Path

# Module imports
from spacebench.config import (
    DEFAULT_FILE_COUNT,
    DEFAULT_FOLDER,
    DEFAULT_LINES_PER_FILE,
    STRATEGY_PER_FILE,
    STRATEGY_PER_LINE,
)
from spacebench.core.corpus import create_test_files, remove_test_files
from spacebench.core.lister import DirectoryNotFoundError
from spacebench.core.report import compare
from spacebench.core.strategies import count_per_file, count_per_line
from spacebench.models import AggregateResult, Comparison

def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number

def create_arg_parser():
    parser = argparse.ArgumentParser(
        description="Benchmark counting spaces with one task per file versus one task per line."
    )
    parser.add_argument("folder", type=str, nargs="?", default=DEFAULT_FOLDER, help="Folder holding the test files")
    parser.add_argument("-n", "--files", type=_positive_int, default=DEFAULT_FILE_COUNT, help="Number of files to generate")
    parser.add_argument("-l", "--lines", type=_positive_int, default=DEFAULT_LINES_PER_FILE, help="Lines per generated file")
    parser.add_argument("-w", "--workers", type=_positive_int, default=None, help="Thread pool size (default: executor default)")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the generated corpus")
    parser.add_argument(
        "-x", "--exclude",
        action="append",
        default=[],
        help="Gitwildmatch pattern of file names to skip (repeatable)"
    )
    parser.add_argument("--existing", action="store_true", help="Benchmark an existing folder instead of generating one")
    parser.add_argument("--keep", action="store_true", help="Do not delete the folder afterwards")
    return parser

def print_strategy(title: str, result: AggregateResult, show_lines: bool = False):
    print(f"=== {title} ===")
    print(f"Spaces:  {result.total:,}")
    print(f"Time:    {result.elapsed_ms:.2f} ms")
    print(f"Average: {result.average_ms_per_file():.2f} ms/file")
    if show_lines:
        print(f"Lines processed: {result.units:,}")
    print()

def print_comparison(comparison: Comparison):
    print("=== Comparison ===")
    print(f"Space difference:    {comparison.space_difference}")
    print(f"Relative difference: {comparison.relative_difference_pct:.1f}%")

    if comparison.faster is None:
        print("Both strategies took the same time")
        return

    label = "Method 1" if comparison.faster == STRATEGY_PER_FILE else "Method 2"
    speedup = f" ({comparison.speedup:.2f}x)" if comparison.speedup is not None else ""
    print(f"{label} ({comparison.faster}) is faster by {comparison.time_saved_ms:.2f} ms{speedup}")

def main():
    try:
        # 1. Setup
        parser = create_arg_parser()
        args = parser.parse_args()

        folder = Path(args.folder)
        keep = args.keep or args.existing

        # Cleanup removes the whole folder, so never generate into one that already holds files
        if not args.existing and folder.exists() and (not folder.is_dir() or any(folder.iterdir())):
            print(
                f"Error: '{folder}' already exists and is not empty; "
                f"pick a new folder or pass --existing to benchmark it",
                file=sys.stderr,
            )
            sys.exit(1)

        print(f"--- spacebench ---")
        if args.existing:
            print(f"Benchmarking: {folder}")
        else:
            print("Creating test files...")
            expected = create_test_files(folder, args.files, args.lines, seed=args.seed)
            print(f"Created {args.files} files with {args.lines} lines each ({expected:,} spaces)\n")

        # 2. Run both strategies against the same snapshot
        try:
            per_file = count_per_file(folder, max_workers=args.workers, exclude=args.exclude)
            print_strategy(f"Method 1: one file, one task ({STRATEGY_PER_FILE})", per_file)

            per_line = count_per_line(folder, max_workers=args.workers, exclude=args.exclude)
            print_strategy(f"Method 2: one line, one task ({STRATEGY_PER_LINE})", per_line, show_lines=True)

            # 3. Compare
            print_comparison(compare(per_file, per_line))
        finally:
            # 4. Cleanup
            if not keep and folder.exists():
                if remove_test_files(folder):
                    print(f"\nTest folder '{folder}' removed")

    except DirectoryNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)

    except Exception as e:
        print(f"An unexpected error occurred: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
