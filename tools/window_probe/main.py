from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from windowing.api.windowing import create_virtualization_config
from windowing.diagnostics.json_codec import dumps_text
from windowing.rendering.placement import placement_array, window_snapshot
from windowing.runtime.errors import WindowingError
from windowing.runtime.logging import get_windowing_logger, setup_windowing_logging
from windowing.runtime.metrics import WindowMetricsCollector
from windowing.ui_runtime.scroll import ScrollSession

_LOG = get_windowing_logger("windowing.tools.probe")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="window_probe")
    parser.add_argument("--count", type=int, required=True, help="Total item count.")
    parser.add_argument("--item-extent", type=float, required=True, help="Item extent.")
    parser.add_argument("--viewport", type=float, required=True, help="Viewport extent.")
    parser.add_argument(
        "--overscan",
        type=int,
        default=None,
        help="Items materialized beyond each edge (default: WINDOWING_DEFAULT_OVERSCAN or 3).",
    )
    parser.add_argument(
        "--offset",
        type=float,
        action="append",
        default=None,
        help="Scroll offset; repeat to replay a scroll stream (last value wins).",
    )
    parser.add_argument("--scroll-to-index", type=int, default=None, help="Jump to an item index.")
    parser.add_argument("--clamp", action="store_true", help="Clamp jump to scroll bounds.")
    parser.add_argument("--placement", action="store_true", help="Include placement array.")
    parser.add_argument("--pretty", action="store_true", help="Indent JSON output.")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_windowing_logging()
    metrics = WindowMetricsCollector()
    try:
        config = create_virtualization_config(args.item_extent, args.viewport, args.overscan)
        session = ScrollSession(args.count, config, metrics=metrics)
        for offset in args.offset or ():
            session.scroll_to(offset)
        if args.scroll_to_index is not None:
            session.scroll_to_index(args.scroll_to_index, clamp=args.clamp)
        window = session.window()
    except WindowingError as exc:
        _LOG.error("probe_rejected_input: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    payload = window_snapshot(window)
    payload["scroll_offset"] = session.offset
    snapshot = metrics.snapshot()
    payload["coalesced_writes"] = snapshot.coalesced_writes
    if args.placement:
        payload["placement"] = placement_array(window)
    print(dumps_text(payload, pretty=args.pretty))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
