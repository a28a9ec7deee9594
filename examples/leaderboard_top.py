#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

import prelate
from prelate import Leaderboard


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Print the top of an aoe4world leaderboard")
    p.add_argument("leaderboard", nargs="?", default="rm_solo", choices=[b.value for b in Leaderboard])
    p.add_argument("limit", nargs="?", type=int, default=25)
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    print(f"{'Rank':>5} | {'Name':24} | {'League':12} | {'Rating':>6} | {'Win %':>6}")
    print("-" * 66)
    async for entry in prelate.leaderboard(Leaderboard(args.leaderboard), limit=args.limit):
        league = str(entry.rank_level) if entry.rank_level else "-"
        win_rate = f"{entry.win_rate:.1f}" if entry.win_rate is not None else "-"
        print(f"{entry.rank or 0:>5} | {entry.name:24} | {league:12} | {entry.rating or 0:>6} | {win_rate:>6}")


if __name__ == "__main__":
    asyncio.run(main())
