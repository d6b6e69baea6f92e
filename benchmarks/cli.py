"""Command-line interface for approxax accuracy and speed benchmarking."""

import argparse
import sys

from .accuracy_benchmark import AccuracyBenchmark


def parse_list_argument(arg_string: str) -> list[str]:
    """Parse comma-separated string into list."""
    if not arg_string:
        return []
    return [item.strip() for item in arg_string.split(",")]


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        description="approxax Accuracy and Speed Benchmarking Suite",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Accuracy and timing of every function in float32
  python -m benchmarks.cli

  # Only the root functions, in float64, without timing
  python -m benchmarks.cli --functions sqrt,inv_sqrt --dtype float64 --accuracy-only

  # Write error plots and JSON results
  python -m benchmarks.cli --plot ./plots --output-dir ./benchmark_results
        """,
    )

    parser.add_argument(
        "--functions", "-f", type=str, help="Comma-separated families or case names (e.g., sqrt,inv_sqrt_2,sin)"
    )
    parser.add_argument("--samples", "-n", type=int, default=4096, help="Number of sample points (default: 4096)")
    parser.add_argument(
        "--dtype", choices=["float32", "float64"], default="float32", help="Evaluation width (default: float32)"
    )
    parser.add_argument("--accuracy-only", action="store_true", help="Skip timing measurements")
    parser.add_argument("--plot", type=str, help="Directory to write error plots to (requires matplotlib)")
    parser.add_argument("--output-dir", "-d", type=str, help="Directory to save JSON results to")
    parser.add_argument("--list-functions", action="store_true", help="List available benchmark cases and exit")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose output")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    if args.dtype == "float64":
        import approxax

        approxax.enable_x64()

    benchmark = AccuracyBenchmark(output_dir=args.output_dir)

    if args.list_functions:
        print("Available benchmark cases:")
        for case in benchmark.cases:
            print(f"  - {case.name} ({case.family}) on [{case.domain[0]:g}, {case.domain[1]:g}]")
        return 0

    functions = parse_list_argument(args.functions) if args.functions else None
    if functions and not benchmark.select(functions):
        print(f"No benchmark cases match: {', '.join(functions)}", file=sys.stderr)
        return 1

    if args.verbose:
        print(f"Running {len(benchmark.select(functions))} cases with {args.samples} samples in {args.dtype}...")

    benchmark.run(functions=functions, samples=args.samples, dtype=args.dtype, include_speed=not args.accuracy_only)
    print(benchmark.generate_report())

    if benchmark.output_dir is not None:
        path = benchmark.save_results()
        print(f"\nResults saved to: {path}")

    if args.plot:
        written = benchmark.plot_errors(args.plot, dtype=args.dtype)
        print(f"Wrote {len(written)} plots to {args.plot}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
