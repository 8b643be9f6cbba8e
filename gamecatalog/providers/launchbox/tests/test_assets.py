"""Tests for matching LaunchBox media files to games."""

from pathlib import Path

import pytest

from gamecatalog.core.search_context import SearchContext
from gamecatalog.models.game import AssetType, Game
from gamecatalog.providers.launchbox.assets import (
    dash_to_colon,
    find_assets,
    find_assets_in,
    find_videos_in,
    iter_files,
    move_leading_article,
    strip_num_suffix,
    strip_parenthetical,
    video_title_candidates,
)
from gamecatalog.providers.launchbox.registry import Platform

PLATFORM = Platform(name="Nintendo GameCube", default_emu_id="dolphin", xml_path="/x.xml")


def _context(*titles: str) -> SearchContext:
    sctx = SearchContext()
    for i, title in enumerate(titles):
        game_id = sctx.add_game(f"/roms/{i}.iso", Game(title=title, files=[]))
        sctx.add_to_collection(PLATFORM.name, game_id)
    return sctx


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch()
    return path


# ── Heuristics ───────────────────────────────────────────────────────────

class TestHeuristics:
    @pytest.mark.parametrize("name, expected", [
        ("Super Metroid-01", "Super Metroid"),
        ("Super Metroid-12", "Super Metroid"),
        ("Super Metroid", "Super Metroid"),
        ("Mega Man X-3", "Mega Man X-3"),
        ("F-Zero-01", "F-Zero"),
    ])
    def test_strip_num_suffix(self, name, expected):
        assert strip_num_suffix(name) == expected

    @pytest.mark.parametrize("name, expected", [
        ("Metroid Prime (USA)", "Metroid Prime"),
        ("Metroid Prime (USA) (Rev 1)", "Metroid Prime (USA)"),
        ("Metroid Prime", "Metroid Prime"),
        ("(USA)", "(USA)"),
        ("Padded (EU) ", "Padded (EU)"),
    ])
    def test_strip_parenthetical(self, name, expected):
        assert strip_parenthetical(name) == expected

    def test_dash_to_colon(self):
        assert dash_to_colon("Zelda - A Link to the Past") == "Zelda: A Link to the Past"
        assert dash_to_colon("F-Zero") == "F-Zero"

    def test_move_leading_article(self):
        assert move_leading_article("Metroid Prime, The") == "The Metroid Prime"
        assert move_leading_article("The Metroid Prime") == "The Metroid Prime"
        assert move_leading_article("Theme Park") == "Theme Park"

    def test_video_candidates(self):
        assert video_title_candidates("Metroid Prime, The (USA)") == [
            "Metroid Prime, The",
            "The Metroid Prime",
        ]
        assert video_title_candidates("Zelda - Four Swords, The") == [
            "Zelda - Four Swords, The",
            "The Zelda: Four Swords",
        ]
        assert video_title_candidates("Pikmin (USA)") == ["Pikmin"]


# ── File matching ────────────────────────────────────────────────────────

class TestFindAssetsIn:
    def test_missing_directory_matches_nothing(self, tmp_path):
        sctx = _context("Pikmin")
        assert list(iter_files(tmp_path / "nope")) == []
        assert find_assets_in(
            tmp_path / "nope", AssetType.LOGO, True, {"Pikmin": 0}, sctx.games,
        ) == 0

    def test_first_file_per_type_wins(self, tmp_path):
        sctx = _context("Pikmin")
        _touch(tmp_path / "Pikmin-01.png")
        _touch(tmp_path / "Pikmin-02.png")

        attached = find_assets_in(tmp_path, AssetType.LOGO, True, {"Pikmin": 0}, sctx.games)

        assert attached == 1
        assert sctx.games[0].assets.get(AssetType.LOGO) == tmp_path / "Pikmin-01.png"

    def test_recurses_into_region_folders(self, tmp_path):
        sctx = _context("Pikmin")
        logo = _touch(tmp_path / "North America" / "Pikmin-01.png")

        find_assets_in(tmp_path, AssetType.LOGO, True, {"Pikmin": 0}, sctx.games)
        assert sctx.games[0].assets.get(AssetType.LOGO) == logo

    def test_without_num_suffix_the_full_name_is_used(self, tmp_path):
        sctx = _context("Pikmin", "Pikmin-01")
        _touch(tmp_path / "Pikmin-01.mp3")

        find_assets_in(
            tmp_path, AssetType.MUSIC, False, {"Pikmin": 0, "Pikmin-01": 1}, sctx.games,
        )
        assert not sctx.games[0].assets.has(AssetType.MUSIC)
        assert sctx.games[1].assets.has(AssetType.MUSIC)

    def test_unmatched_files_are_skipped(self, tmp_path):
        sctx = _context("Pikmin")
        _touch(tmp_path / "Pikmin 2-01.png")

        assert find_assets_in(tmp_path, AssetType.LOGO, True, {"Pikmin": 0}, sctx.games) == 0
        assert len(sctx.games[0].assets) == 0


class TestFindVideosIn:
    def test_article_fallback(self, tmp_path):
        sctx = _context("The Metroid Prime")
        video = _touch(tmp_path / "Metroid Prime, The (USA).mp4")

        find_videos_in(tmp_path, {"The Metroid Prime": 0}, sctx.games)
        assert sctx.games[0].assets.get(AssetType.VIDEOS) == video

    def test_colon_fallback(self, tmp_path):
        sctx = _context("Zelda: Four Swords")
        _touch(tmp_path / "Zelda - Four Swords.mp4")

        assert find_videos_in(tmp_path, {"Zelda: Four Swords": 0}, sctx.games) == 1

    def test_direct_match_is_preferred(self, tmp_path):
        sctx = _context("Metroid Prime, The", "The Metroid Prime")
        _touch(tmp_path / "Metroid Prime, The.mp4")

        title_map = {"Metroid Prime, The": 0, "The Metroid Prime": 1}
        find_videos_in(tmp_path, title_map, sctx.games)

        assert sctx.games[0].assets.has(AssetType.VIDEOS)
        assert not sctx.games[1].assets.has(AssetType.VIDEOS)

    def test_one_video_per_game(self, tmp_path):
        sctx = _context("Pikmin")
        first = _touch(tmp_path / "Pikmin (Europe).mp4")
        _touch(tmp_path / "Pikmin (USA).mp4")

        assert find_videos_in(tmp_path, {"Pikmin": 0}, sctx.games) == 1
        assert sctx.games[0].assets.get(AssetType.VIDEOS) == first

    def test_no_match_is_skipped(self, tmp_path):
        sctx = _context("Pikmin")
        _touch(tmp_path / "Luigi's Mansion (USA).mp4")

        assert find_videos_in(tmp_path, {"Pikmin": 0}, sctx.games) == 0


class TestFindAssets:
    def test_category_order_decides_between_directories(self, tmp_path):
        sctx = _context("Pikmin")
        images = tmp_path / "Images" / PLATFORM.name
        front = _touch(images / "Box - Front" / "Pikmin-01.jpg")
        _touch(images / "Box - Front - Reconstructed" / "Pikmin-01.png")

        find_assets(tmp_path, PLATFORM, sctx)
        assert sctx.games[0].assets.get(AssetType.BOX_FRONT) == front

    def test_later_category_fills_a_missing_type(self, tmp_path):
        sctx = _context("Pikmin")
        fanart = _touch(
            tmp_path / "Images" / PLATFORM.name / "Fanart - Box - Front" / "Pikmin-01.jpg"
        )

        find_assets(tmp_path, PLATFORM, sctx)
        assert sctx.games[0].assets.get(AssetType.BOX_FRONT) == fanart

    def test_images_music_and_videos(self, tmp_path):
        sctx = _context("Luigi's Mansion: Dark Moon")
        root = tmp_path
        box = _touch(root / "Images" / PLATFORM.name / "Box - Front" /
                     "Luigi_s Mansion_ Dark Moon-01.png")
        logo = _touch(root / "Images" / PLATFORM.name / "Clear Logo" /
                      "Luigi_s Mansion_ Dark Moon-01.png")
        music = _touch(root / "Music" / PLATFORM.name / "Luigi_s Mansion_ Dark Moon.mp3")
        video = _touch(root / "Videos" / PLATFORM.name /
                       "Luigi's Mansion - Dark Moon (USA).mp4")

        attached = find_assets(root, PLATFORM, sctx)

        assets = sctx.games[0].assets
        assert attached == 4
        assert assets.get(AssetType.BOX_FRONT) == box
        assert assets.get(AssetType.LOGO) == logo
        assert assets.get(AssetType.MUSIC) == music
        assert assets.get(AssetType.VIDEOS) == video

    def test_platform_without_games(self, tmp_path):
        assert find_assets(tmp_path, PLATFORM, SearchContext()) == 0

    def test_other_platforms_games_are_not_matched(self, tmp_path):
        sctx = _context("Pikmin")
        other = Platform(name="Wii", default_emu_id="dolphin", xml_path="/w.xml")
        sctx.add_to_collection(other.name, sctx.add_game("/roms/w.iso", Game(title="Wii Sports")))
        _touch(tmp_path / "Images" / PLATFORM.name / "Clear Logo" / "Wii Sports-01.png")

        assert find_assets(tmp_path, PLATFORM, sctx) == 0
