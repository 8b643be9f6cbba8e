"""Shared scan context that every provider writes into."""

from __future__ import annotations

from gamecatalog.models.collection import Collection
from gamecatalog.models.game import Game


class SearchContext:
    """Games, collections and the path index collected during one scan.

    The scanner creates one context per scan and hands it to each provider
    in turn.  Providers mutate it in place; nothing is ever removed.

    Games are keyed by sequential integer IDs.  ``path_to_gameid`` maps the
    canonical path of every known game file to its game, so a second
    reference to the same file resolves to the existing record.
    """

    def __init__(self) -> None:
        self.games: dict[int, Game] = {}
        self.path_to_gameid: dict[str, int] = {}
        self.collections: dict[str, Collection] = {}
        self.collection_childs: dict[str, list[int]] = {}
        self._collection_members: dict[str, set[int]] = {}

    # ------------------------------------------------------------------
    # Games
    # ------------------------------------------------------------------

    def game_id_for_path(self, canonical_path: str) -> int | None:
        return self.path_to_gameid.get(canonical_path)

    def add_game(self, canonical_path: str, game: Game) -> int:
        """Store a new *game* and index it under *canonical_path*."""
        if canonical_path in self.path_to_gameid:
            raise ValueError(f"{canonical_path!r} already belongs to a game")
        game_id = len(self.games)
        self.games[game_id] = game
        self.path_to_gameid[canonical_path] = game_id
        return game_id

    def register_path(self, canonical_path: str, game_id: int) -> int:
        """Point *canonical_path* at *game_id* unless it is already indexed.

        Returns the game ID the path resolves to afterwards.
        """
        if game_id not in self.games:
            raise KeyError(game_id)
        return self.path_to_gameid.setdefault(canonical_path, game_id)

    # ------------------------------------------------------------------
    # Collections
    # ------------------------------------------------------------------

    def ensure_collection(self, name: str) -> list[int]:
        """Create the collection *name* if needed and return its child list."""
        if name not in self.collections:
            self.collections[name] = Collection(name)
        return self.collection_childs.setdefault(name, [])

    def add_to_collection(self, name: str, game_id: int) -> None:
        """Append *game_id* to collection *name*, once."""
        childs = self.ensure_collection(name)
        members = self._collection_members.setdefault(name, set())
        if game_id not in members:
            members.add(game_id)
            childs.append(game_id)

    def collection_games(self, name: str) -> list[Game]:
        return [self.games[gid] for gid in self.collection_childs.get(name, [])]
