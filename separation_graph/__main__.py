import argparse

from .config import AGGREGATION_METHODS, SELF_PAIR_POLICIES, SeparationConfig
from .io import read_edge_csv
from .report import format_report, plot_separation_distribution
from .separation_analyzer import SeparationAnalyzer
from .separation_graph import SeparationGraph


def build_parser():
    ap = argparse.ArgumentParser(
        prog="separation_graph",
        description="Degrees of separation across every node pair of an undirected edge list")
    ap.add_argument("path", help="CSV file with one 'node,node' edge per row")
    ap.add_argument("--delimiter", default=",")
    ap.add_argument("--self-pairs", choices=SELF_PAIR_POLICIES, default="discard")
    ap.add_argument("--method", choices=AGGREGATION_METHODS, default="pairwise")
    ap.add_argument("--threshold", type=int, action="append", dest="thresholds",
                    help="degree for cumulative reachability (repeatable, default 6 and 20)")
    ap.add_argument("--plot", default=None, help="write the distribution chart to this file")
    ap.add_argument("--quiet", action="store_true", help="suppress progress messages")
    ap.add_argument("--timing", action="store_true", help="print timing statistics")
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)
    config = SeparationConfig(
        self_pairs=args.self_pairs,
        method=args.method,
        thresholds=tuple(args.thresholds or (6, 20)),
        verbose=not args.quiet,
    )

    nodes, edges = read_edge_csv(args.path, delimiter=args.delimiter, verbose=config.verbose)
    graph = SeparationGraph.from_columns(nodes, edges, on_missing=config.on_missing,
                                         verbose=config.verbose)
    if config.verbose:
        graph.compute_components()
        print(f"         {graph}, {graph.n_components} components")

    analyzer = SeparationAnalyzer(config)
    _, stats = analyzer.analyze(graph)
    print(format_report(stats))

    if args.plot:
        import matplotlib
        matplotlib.use("Agg")
        ax = plot_separation_distribution(stats)
        ax.figure.savefig(args.plot, dpi=150, bbox_inches="tight")
        if config.verbose:
            print(f"Saved distribution plot to {args.plot}")

    if args.timing:
        print(analyzer.timing.get_stats())
        print(analyzer.timing.report_nested_timing("analyze"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
