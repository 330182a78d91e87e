"""
Main.py:
Handles pipeline and CLI
"""

import argparse
import logging
import os
import sys
import time
from typing import IO, List, Optional

import psutil

from .comparer.comparer import STDOUT, SequenceComparer
from .constants.constants import KMERSIZE
from .errors import D2Error
from .models.comparer import ComparerInput, ComparerOutput
from .models.config import AmbiguityPolicy


def get_memory_usage():
    """Get current memory usage in bytes using psutil"""
    process = psutil.Process(os.getpid())
    return process.memory_info().rss


def parse_args(argv: Optional[List[str]] = None):
    parser = argparse.ArgumentParser(
        prog='bblast',
        description='Alignment-free D2 comparison of nucleotide sequence sets. '
                    'Input is a (multi)FASTA or FASTQ query file and an optional target file; '
                    'without a target the query set is compared against itself.',
    )

    # Required arguments
    parser.add_argument('query', help='Query (multi)FASTA/FASTQ file')
    parser.add_argument('target', nargs='?', help='Target (multi)FASTA/FASTQ file')

    # Optional arguments
    parser.add_argument('-o', '--output', default=STDOUT, help='Output matrix file (default: stdout)')
    parser.add_argument('-k', '--kmer', type=int, default=KMERSIZE, help='K-mer size')
    parser.add_argument('-a', '--ambiguity',
                        choices=[p.value for p in AmbiguityPolicy],
                        default=AmbiguityPolicy.SKIP_WINDOW.value,
                        help='How symbols other than A/C/G/T are counted')
    parser.add_argument('-s', '--symmetric', action='store_true',
                        help='Query and target are the same sequences; score only the upper triangle')
    parser.add_argument('-v', '--verbose', action='store_true', help='Log progress for every matrix row')
    parser.add_argument('-m', '--memory', action='store_true', help='Track memory usage and timings')

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    startTime = time.perf_counter()
    startCpuTime = time.process_time()

    if args.memory:
        baseline_memory = get_memory_usage()

    try:
        queryFile: IO = open(args.query, "r", encoding="utf-8")
    except OSError as e:
        print(f"bblast: error: {e}", file=sys.stderr)
        return 1
    targetFile: Optional[IO] = None
    if args.target:
        try:
            targetFile = open(args.target, "r", encoding="utf-8")
        except OSError as e:
            queryFile.close()
            print(f"bblast: error: {e}", file=sys.stderr)
            return 1

    comparerInput = ComparerInput(
        query=queryFile,
        target=targetFile,
        outputLocation=args.output,
        kmerSize=args.kmer,
        ambiguityPolicy=AmbiguityPolicy(args.ambiguity),
        symmetric=args.symmetric,
    )

    try:
        output: ComparerOutput = SequenceComparer().compare(comparerInput)
    except (D2Error, OSError) as e:
        print(f"bblast: error: {e}", file=sys.stderr)
        return 1
    finally:
        queryFile.close()
        if targetFile is not None:
            targetFile.close()

    if args.memory:
        endTime = time.perf_counter()
        endCpuTime = time.process_time()
        memory_used = get_memory_usage() - baseline_memory
        rows, cols = output.scoreMatrix.shape

        # stdout may hold the matrix itself
        report = sys.stderr if args.output == STDOUT else sys.stdout
        print("\nMemory Usage", file=report)
        print(f"Total memory used: {memory_used / 10**6:.2f} MB", file=report)
        print(f"Finished scoring {rows} x {cols} sequence pairs.", file=report)
        print(f"The 'main' part took {endTime - startTime:.4f} seconds to execute.", file=report)
        print(f"The 'main cpu' part took {endCpuTime - startCpuTime:.4f} seconds to execute.", file=report)

    return 0


if __name__ == "__main__":
    sys.exit(main())
