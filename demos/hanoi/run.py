"""Terminal runner for the Tower of Hanoi auto-solve demo."""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

ROOT = Path(__file__).resolve().parents[2]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from hanoi_lite import (  # noqa: E402
    GameState,
    HanoiConfig,
    HanoiSession,
    SessionClock,
    SessionRecorder,
    SessionSnapshot,
    load_config,
)
from hanoi_lite.features import moves_to_goal  # noqa: E402


def _render(snap: SessionSnapshot) -> str:
    board = GameState.from_pegs([list(peg) for peg in snap.pegs])
    return str(board)


async def _run(args: argparse.Namespace, config: HanoiConfig) -> int:
    recorder = SessionRecorder(keep_positions=True)
    session = HanoiSession(config=config, recorder=recorder)
    session.initialize(args.n)

    def show(snap: SessionSnapshot) -> None:
        if recorder.events and recorder.events[-1]["type"] == "move":
            print(f"Move {snap.move_count:03d}  (remaining {moves_to_goal(snap.pegs)})")
            print(_render(snap))
            print()

    print("Initial state:")
    print(_render(session.snapshot()))
    print()

    session.add_listener(show)
    clock = SessionClock(session)
    clock.start()
    try:
        outcome = await session.auto_solve()
    finally:
        await clock.stop()

    final = session.snapshot()
    print(f"Outcome: {outcome.name}")
    print(f"Goal reached: {final.is_solved}")
    print(f"Moves executed: {final.move_count}")
    print(f"Expected moves: {final.optimal_moves}")

    if args.log:
        recorder.to_json(args.log)
        print(f"Wrote {len(recorder.events)} frames to {args.log}")
    return 0 if final.is_solved else 1


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Play the Tower of Hanoi auto-solve in the terminal.")
    parser.add_argument("--n", type=int, default=3, help="Number of disks to solve for (default: 3)")
    parser.add_argument("--config", type=Path, default=None, help="Optional YAML session config")
    parser.add_argument(
        "--delay",
        type=float,
        default=None,
        help="Seconds between moves (overrides the config's move_delay)",
    )
    parser.add_argument("--log", type=str, default=None, help="Write recorded frames to this JSON file")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)
    if args.n < 1:
        parser.error("--n must be at least 1")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    config = load_config(args.config) if args.config else HanoiConfig()
    if args.delay is not None:
        config.move_delay = args.delay
        config.validate()

    sys.exit(asyncio.run(_run(args, config)))


if __name__ == "__main__":
    main()
