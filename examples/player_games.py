#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from prelate import AoE4WorldClient, Leaderboard


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List a player's recent aoe4world games")
    p.add_argument("profile_id", type=int)
    p.add_argument("limit", nargs="?", type=int, default=20)
    p.add_argument(
        "leaderboard",
        nargs="?",
        default=None,
        choices=[board.value for board in Leaderboard],
    )
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    board = Leaderboard(args.leaderboard) if args.leaderboard else None

    async with AoE4WorldClient() as client:
        profile = await client.profile(args.profile_id)
        print("=" * 72)
        print(f"Player     : {profile.name} ({profile.profile_id})")
        print(f"Country    : {profile.country or '-'}")
        print("=" * 72)
        print(f"{'Started':25} | {'Map':18} | {'Civilization':20} | {'Result':6}")
        print("-" * 72)
        games = client.games(args.profile_id, leaderboard=board, limit=args.limit)
        async for game in games:
            me = next((p for p in game.players if p.profile_id == args.profile_id), None)
            started = game.started_at.isoformat() if game.started_at else "-"
            civ = me.civilization.value if me and me.civilization else "-"
            result = me.result.value if me and me.result else "-"
            print(f"{started:25} | {str(game.map or '-'):18} | {civ:20} | {result:6}")
        print("=" * 72)
        print(f"Pages fetched: {games.stats.pages_requested}")


if __name__ == "__main__":
    asyncio.run(main())
