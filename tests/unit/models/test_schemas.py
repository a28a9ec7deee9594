"""Unit tests for aoe4world response models."""

from __future__ import annotations

from datetime import datetime

from prelate.core import Civilization, GameKind, GameResult, Leaderboard, League, Map
from prelate.models import GamesPage, LeaderboardPage, Profile, SearchPage

GAMES_RESPONSE = {
    "total_count": 2,
    "page": 1,
    "per_page": 50,
    "count": 2,
    "offset": 0,
    "filters": {"leaderboard": "rm_1v1", "since": None},
    "games": [
        {
            "game_id": 118238411,
            "started_at": "2024-03-02T18:24:03.000Z",
            "updated_at": "2024-03-02T18:51:10.000Z",
            "duration": 1527,
            "map": "Dry Arabia",
            "kind": "rm_1v1",
            "leaderboard": "rm_1v1",
            "mmr_leaderboard": "rm_1v1",
            "season": 7,
            "server": "Europe",
            "patch": 79,
            "average_rating": 1912.5,
            "average_mmr": 1850,
            "ongoing": False,
            "just_finished": False,
            "teams": [
                [
                    {
                        "player": {
                            "name": "Beasty",
                            "profile_id": 3176,
                            "result": "win",
                            "civilization": "english",
                            "civilization_randomized": False,
                            "rating": 1950,
                            "rating_diff": 12,
                            "mmr": 1880,
                            "mmr_diff": 9,
                            "input_type": "keyboard",
                        }
                    }
                ],
                [
                    {
                        "player": {
                            "name": "Someone",
                            "profile_id": 8139502,
                            "result": "loss",
                            "civilization": "martians",
                            "rating": 1875,
                        }
                    }
                ],
            ],
        },
        {"game_id": 118238000, "map": "Mediterranean", "kind": "custom", "teams": []},
    ],
}


class TestGames:
    def test_games_page(self):
        page = GamesPage.model_validate(GAMES_RESPONSE)

        assert page.pagination.total_count == 2
        assert len(page.items) == 2
        game = page.items[0]
        assert game.map is Map.DRY_ARABIA
        assert game.kind is GameKind.RM_1V1
        assert game.leaderboard is Leaderboard.RM_1V1
        assert isinstance(game.started_at, datetime)
        assert [p.name for p in game.players] == ["Beasty", "Someone"]
        assert game.players[0].result is GameResult.WIN

    def test_unknown_civilization_does_not_fail_page(self):
        page = GamesPage.model_validate(GAMES_RESPONSE)

        civ = page.items[0].players[1].civilization
        assert civ.is_unknown
        assert civ.value == "martians"
        assert page.items[0].players[0].civilization is Civilization.ENGLISH

    def test_unknown_label_dumps_as_received(self):
        page = GamesPage.model_validate(GAMES_RESPONSE)

        wire = page.to_wire()

        assert wire["games"][0]["teams"][1][0]["player"]["civilization"] == "martians"
        assert wire["games"][1]["map"] == "Baltic"


class TestLeaderboard:
    def test_leaderboard_page(self):
        page = LeaderboardPage.model_validate(
            {
                "key": "rm_solo",
                "name": "Ranked Solo",
                "short_name": "RM Solo",
                "site_url": "https://aoe4world.com/leaderboard/rm_solo",
                "query": None,
                "total_count": 40213,
                "page": 1,
                "per_page": 50,
                "count": 1,
                "offset": 0,
                "players": [
                    {
                        "name": "Beasty",
                        "profile_id": 3176,
                        "rank": 1,
                        "rank_level": "conqueror_3",
                        "rating": 2110,
                        "win_rate": 72.4,
                        "twitch_is_live": False,
                    }
                ],
            }
        )

        assert page.key is Leaderboard.RM_SOLO
        assert page.pagination.total_count == 40213
        entry = page.items[0]
        assert entry.rank_level is League.CONQUEROR_3
        assert entry.rank_level.division == 3


class TestProfile:
    def test_search_page(self):
        page = SearchPage.model_validate(
            {
                "page": 1,
                "per_page": 50,
                "count": 1,
                "offset": 0,
                "query": "beasty",
                "exact": False,
                "players": [{"name": "Beasty", "profile_id": 3176, "country": "gb"}],
            }
        )

        assert page.pagination.total_count is None
        assert page.items[0].country == "gb"

    def test_profile_with_modes(self):
        profile = Profile.model_validate(
            {
                "name": "Beasty",
                "profile_id": 3176,
                "steam_id": "76561197993446025",
                "avatars": {"small": "https://a/s.jpg", "medium": None, "full": None},
                "social": {"twitch": "https://twitch.tv/beastyqt"},
                "modes": {
                    "rm_solo": {
                        "rating": 2110,
                        "rank_level": "",
                        "win_rate": 72.4,
                        "rating_history": {"118238411": {"rating": 2098, "streak": 3}},
                    },
                    "custom": {"games_count": 4},
                },
            }
        )

        solo = profile.modes.rm_solo
        assert solo.rank_level is League.UNRANKED
        assert solo.rating_history["118238411"].rating == 2098
        assert profile.modes.qm_4v4 is None
