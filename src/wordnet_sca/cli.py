"""CLI for wordnet-sca."""

import argparse
import json
import sys
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path

from .ancestor import NoCommonAncestorError
from .outcast import Outcast
from .visualize import compute_stats, generate_html, generate_json
from .wordnet import UnknownNounError, WordNet


def load_config(config_path: Path) -> dict:
    """Load configuration from YAML file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Dictionary of configuration values.
    """
    try:
        import yaml

        with open(config_path) as f:
            return yaml.safe_load(f) or {}
    except ImportError as err:
        raise ImportError("PyYAML required for config files: pip install pyyaml") from err


def add_common_args(parser: argparse.ArgumentParser) -> None:
    """Add common arguments shared between subcommands."""
    parser.add_argument("--synsets", type=Path, help="Path to the synsets file")
    parser.add_argument("--hypernyms", type=Path, help="Path to the hypernyms file")
    parser.add_argument("--config", type=Path, help="Path to YAML config file")


def resolve_common_args(args: argparse.Namespace, parser: argparse.ArgumentParser) -> dict:
    """Load config, fill in missing paths and validate them.

    Returns:
        The loaded config (empty if no --config was given).
    """
    config: dict = {}
    if args.config:
        config = load_config(args.config)
        if not args.synsets and "synsets" in config:
            args.synsets = Path(config["synsets"])
        if not args.hypernyms and "hypernyms" in config:
            args.hypernyms = Path(config["hypernyms"])

    if not args.synsets:
        parser.error("--synsets is required")
    if not args.hypernyms:
        parser.error("--hypernyms is required")

    args.synsets = args.synsets.resolve()
    args.hypernyms = args.hypernyms.resolve()
    return config


def load_wordnet(args: argparse.Namespace) -> WordNet:
    """Build the WordNet database from args."""
    print(f"Loading {args.synsets.name} and {args.hypernyms.name}...", file=sys.stderr)
    wordnet = WordNet.from_files(args.synsets, args.hypernyms)
    print(
        f"Loaded {len(wordnet)} synsets, {wordnet.graph.edge_count()} hypernym edges",
        file=sys.stderr,
    )
    return wordnet


def read_group(path: Path) -> list[str]:
    """Read whitespace-separated nouns from a file."""
    with open(path) as f:
        return f.read().split()


def cmd_distance(args: argparse.Namespace, wordnet: WordNet) -> None:
    print(wordnet.distance(args.noun1, args.noun2))


def cmd_sca(args: argparse.Namespace, wordnet: WordNet) -> None:
    synset = wordnet.sca_synset(args.noun1, args.noun2)
    print(f"{synset.id}: {' '.join(synset.nouns)}")
    print(f"  {synset.gloss}")


def cmd_trace(args: argparse.Namespace, wordnet: WordNet) -> None:
    """Print the hypernym chain between two nouns through their SCA."""
    path = wordnet.path(args.noun1, args.noun2)
    ancestor = wordnet.sca_synset(args.noun1, args.noun2).id
    print(f"Path of length {len(path) - 1}:\n")

    # Indent by hops from the ancestor
    top = path.index(ancestor)
    for i, synset_id in enumerate(path):
        nouns = " ".join(wordnet.synset(synset_id).nouns)
        level = abs(i - top)
        marker = "* " if synset_id == ancestor else ""
        print(f"{'  ' * level}{marker}{synset_id}: {nouns}")


def cmd_outcast(args: argparse.Namespace, wordnet: WordNet, config: dict) -> None:
    """Find the outcast of each group file, evaluating groups in parallel."""
    workers = args.workers or config.get("workers") or 4
    outcast = Outcast(wordnet)
    groups = {path: read_group(path) for path in args.files}

    results: dict[Path, str | None] = {}
    with ThreadPoolExecutor(max_workers=max(1, min(workers, len(groups)))) as executor:
        future_to_path = {
            executor.submit(outcast.outcast, nouns): path for path, nouns in groups.items()
        }
        for future in as_completed(future_to_path):
            results[future_to_path[future]] = future.result()

    for path in args.files:
        answer = results[path]
        print(f"{path.name}: {answer if answer is not None else '(no outcast)'}")


def cmd_dump(args: argparse.Namespace, wordnet: WordNet) -> None:
    print(wordnet.graph.dump(), end="")


def cmd_stats(args: argparse.Namespace, wordnet: WordNet) -> None:
    if args.output:
        generate_json(wordnet, args.output, top=args.top)
        print(f"Wrote {args.output}")
    else:
        print(json.dumps(compute_stats(wordnet, top=args.top), indent=2))


def cmd_visualize(args: argparse.Namespace, wordnet: WordNet) -> None:
    generate_html(wordnet, args.noun1, args.noun2, args.output)
    print(f"Wrote {args.output}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point for wordnet-sca CLI."""
    parser = argparse.ArgumentParser(
        description="Semantic distance and outcast detection over a WordNet noun graph"
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    command_parsers: dict[str, argparse.ArgumentParser] = {}

    for name, help_text in (
        ("distance", "Distance between two nouns"),
        ("sca", "Shortest common ancestor of two nouns"),
        ("trace", "Print the hypernym path between two nouns"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        add_common_args(sub)
        sub.add_argument("noun1")
        sub.add_argument("noun2")
        command_parsers[name] = sub

    visualize_parser = subparsers.add_parser(
        "visualize", help="Render the hypernyms of two nouns as HTML"
    )
    add_common_args(visualize_parser)
    visualize_parser.add_argument("noun1")
    visualize_parser.add_argument("noun2")
    visualize_parser.add_argument(
        "--output",
        type=Path,
        default=Path("sca.html"),
        help="Output HTML file (default: sca.html)",
    )
    command_parsers["visualize"] = visualize_parser

    outcast_parser = subparsers.add_parser(
        "outcast", help="Find the outcast noun of each group file"
    )
    add_common_args(outcast_parser)
    outcast_parser.add_argument(
        "files", type=Path, nargs="+", help="Files of whitespace-separated nouns"
    )
    outcast_parser.add_argument(
        "-j", "--workers", type=int, help="Number of worker threads (default: 4)"
    )
    command_parsers["outcast"] = outcast_parser

    dump_parser = subparsers.add_parser("dump", help="Print the hypernym digraph")
    add_common_args(dump_parser)
    command_parsers["dump"] = dump_parser

    stats_parser = subparsers.add_parser("stats", help="Print graph statistics as JSON")
    add_common_args(stats_parser)
    stats_parser.add_argument("--output", type=Path, help="Optional JSON output path")
    stats_parser.add_argument(
        "--top",
        type=int,
        default=20,
        help="Number of most common hypernyms to list (default: 20)",
    )
    command_parsers["stats"] = stats_parser

    args = parser.parse_args(argv)

    if args.command is None:
        # No subcommand provided - show help
        parser.print_help()
        return 0

    try:
        config = resolve_common_args(args, command_parsers[args.command])
        wordnet = load_wordnet(args)
        if args.command == "distance":
            cmd_distance(args, wordnet)
        elif args.command == "sca":
            cmd_sca(args, wordnet)
        elif args.command == "trace":
            cmd_trace(args, wordnet)
        elif args.command == "outcast":
            cmd_outcast(args, wordnet, config)
        elif args.command == "dump":
            cmd_dump(args, wordnet)
        elif args.command == "stats":
            cmd_stats(args, wordnet)
        elif args.command == "visualize":
            cmd_visualize(args, wordnet)
    except (UnknownNounError, NoCommonAncestorError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
