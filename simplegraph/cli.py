#!/usr/bin/env python3
"""
simplegraph command line.

Usage:
  simplegraph cycle-sort model.json
  simplegraph cycle-sort models_folder/ --out_json results.json
  simplegraph find-path model.json --start 1 --target 9 --admit even --descending
  simplegraph generate cycle --n 6 --out hexagon.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from .cycles import cycle_sort
from .generators import GENERATORS, SIZED_GENERATORS
from .graph import Graph, canonical_pair, path_vertices
from .model_io import load_graph_from_json, save_graph_to_json
from .path_search import admit_all, ascending, descending, find_path_by

logger = logging.getLogger(__name__)

ADMIT_FILTERS = {
    "all": admit_all,
    "even": lambda v: isinstance(v, int) and v % 2 == 0,
    "odd": lambda v: isinstance(v, int) and v % 2 == 1,
}


def _model_paths(target: Path) -> List[Path]:
    if target.is_dir():
        return sorted(p for p in target.iterdir() if p.is_file() and p.suffix.lower() == ".json")
    return [target]


def _resolve_vertex(graph: Graph, label: str) -> Any:
    """Map a command-line label onto a vertex of the graph (vertices may be ints)."""
    for v in graph[0]:
        if str(v) == label:
            return v
    raise ValueError(f"vertex {label!r} not in graph")


def _fmt_path(path: Sequence[Any]) -> str:
    return "-".join(str(v) for v in path)


def cmd_cycle_sort(args: argparse.Namespace) -> int:
    paths = _model_paths(Path(args.target))
    results: List[Dict[str, Any]] = []
    errors = []

    for path in paths:
        try:
            graph, name = load_graph_from_json(str(path))
        except (OSError, ValueError) as exc:
            errors.append((path.name, str(exc)))
            continue
        res = cycle_sort(graph)
        row: Dict[str, Any] = {"name": name, "nV": len(graph[0]), "nE": len(graph[1]), "ok": res.ok}
        if res.ok:
            ordered = res.graph[1]
            (start,) = ordered[0] & ordered[-1]
            row["order"] = path_vertices(ordered, start)
            row["edges"] = [list(canonical_pair(e)) for e in ordered]
            if args.plot and len(paths) == 1:
                from .visualize import save_plot

                save_plot(res.graph, ordered, args.plot, title=name)
        else:
            row["reason"] = res.reason
        results.append(row)

    print(f"{'name':30s}    V    E  result")
    print("-" * 80)
    for r in results:
        detail = _fmt_path(r["order"]) if r["ok"] else f"not a cycle ({r['reason']})"
        print(f"{r['name'][:30]:30s}  {r['nV']:3d}  {r['nE']:3d}  {detail}")

    if errors:
        print()
        for name, msg in errors:
            print(f"[FAIL] {name}: {msg}")

    if args.out_json:
        with open(args.out_json, "w", encoding="utf-8") as f:
            json.dump(results, f, indent=2, ensure_ascii=False)
        print(f"\nWrote: {args.out_json}")

    return 1 if errors else 0


def cmd_find_path(args: argparse.Namespace) -> int:
    try:
        graph, name = load_graph_from_json(args.model)
        start = _resolve_vertex(graph, args.start)
        target = _resolve_vertex(graph, args.target)
    except (OSError, ValueError) as exc:
        print(f"[FAIL] {args.model}: {exc}")
        return 1

    tie_break = descending if args.descending else ascending
    path = find_path_by(graph, start, target, ADMIT_FILTERS[args.admit], tie_break)
    if path is None:
        print(f"{name}: no path {start} -> {target} (admit={args.admit})")
        return 2

    print(f"{name}: {_fmt_path(path_vertices(path, start))} ({len(path)} edges)")
    if args.plot:
        from .visualize import save_plot

        save_plot(graph, path, args.plot, title=f"{name}: {start} -> {target}")
    return 0


def cmd_generate(args: argparse.Namespace) -> int:
    builder = GENERATORS[args.name]
    if args.name in SIZED_GENERATORS:
        if args.n is None:
            print(f"[FAIL] {args.name} needs --n")
            return 1
        graph = builder(args.n)
    else:
        graph = builder()
    save_graph_to_json(graph, args.out, name=args.name)
    print(f"Wrote: {args.out} (V={len(graph[0])}, E={len(graph[1])})")
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="simplegraph", description="Simple undirected graph operations.")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log search steps at DEBUG level")
    sub = ap.add_subparsers(dest="command", required=True)

    cs = sub.add_parser("cycle-sort", help="Order the edges of cycle graphs in traversal order")
    cs.add_argument("target", help="Model JSON file or folder of *.json models")
    cs.add_argument("--out_json", default=None, help="Write results JSON here")
    cs.add_argument("--plot", default=None, metavar="PNG", help="Save a plot (single model only)")
    cs.set_defaults(func=cmd_cycle_sort)

    fp = sub.add_parser("find-path", help="Constrained path search between two vertices")
    fp.add_argument("model", help="Model JSON file")
    fp.add_argument("--start", required=True)
    fp.add_argument("--target", required=True)
    fp.add_argument("--admit", choices=sorted(ADMIT_FILTERS), default="all",
                    help="Which intermediate vertices may be entered")
    fp.add_argument("--descending", action="store_true", help="Prefer larger neighbours first")
    fp.add_argument("--plot", default=None, metavar="PNG", help="Save a plot of the path")
    fp.set_defaults(func=cmd_find_path)

    gen = sub.add_parser("generate", help="Write a generated graph to JSON")
    gen.add_argument("name", choices=sorted(GENERATORS))
    gen.add_argument("--n", type=int, default=None, help="Size for cycle/path/complete")
    gen.add_argument("--out", required=True)
    gen.set_defaults(func=cmd_generate)
    return ap


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    return args.func(args)


if __name__ == "__main__":
    raise SystemExit(main())
