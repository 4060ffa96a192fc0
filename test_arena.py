"""
Tests for depth-versus-depth arena games and their ratings.
"""
import json
import os

import pytest

from src.arena import Arena, DepthRatings, MatchRecord
from src.config import get_default_config
from src.game import ReversiGame

import run_tournament


def _record(black_depth, white_depth, black_pieces, white_pieces):
    return MatchRecord(black_depth=black_depth, white_depth=white_depth,
                       black_pieces=black_pieces, white_pieces=white_pieces,
                       placements=black_pieces + white_pieces - 4)


def test_record_margins():
    record = _record(2, 5, 40, 24)

    assert record.margin == 16
    assert record.black_score == 1.0
    assert record.margin_for(2) == 16
    assert record.margin_for(5) == -16
    assert _record(1, 3, 32, 32).black_score == 0.5
    with pytest.raises(ValueError):
        record.margin_for(3)


def test_rating_update_equal_ratings():
    ratings = DepthRatings(k=32, initial_rating=1500.0)
    change = ratings.update(_record(3, 1, 40, 24))

    assert change == pytest.approx(16.0)
    assert ratings.rating(3) == pytest.approx(1516.0)
    assert ratings.rating(1) == pytest.approx(1484.0)
    assert ratings.games == {3: 1, 1: 1}
    assert [entry['depth'] for entry in ratings.standings()] == [3, 1]


def test_draw_between_equals_changes_nothing():
    ratings = DepthRatings()
    assert ratings.update(_record(1, 2, 32, 32)) == pytest.approx(0.0)
    assert ratings.rating(1) == pytest.approx(1500.0)
    assert ratings.rating(2) == pytest.approx(1500.0)


def test_ratings_save_and_load(tmp_path):
    ratings = DepthRatings(k=16)
    ratings.update(_record(1, 4, 10, 54))
    path = tmp_path / "nested" / "ratings.json"
    ratings.save(str(path))

    loaded = DepthRatings.load(str(path))
    assert loaded.k == 16
    assert loaded.ratings == pytest.approx(ratings.ratings)
    assert loaded.games == {1: 1, 4: 1}


def test_depths_are_validated():
    with pytest.raises(ValueError):
        Arena([0, 2])
    assert Arena([3, 1, 3]).depths == [1, 3]


def test_random_opening_is_seeded():
    first = Arena([1], opening_plies=3, seed=11).random_opening()
    second = Arena([1], opening_plies=3, seed=11).random_opening()

    assert len(first.get_placements()) == 3
    assert first.board == second.board
    assert first.current_player == second.current_player


def test_play_game_unknown_depth():
    arena = Arena([1])
    with pytest.raises(ValueError):
        arena.play_game(1, 2)


def test_play_game_from_position():
    arena = Arena([1, 2])
    record = arena.play_game(1, 2, game=ReversiGame())

    assert (record.black_depth, record.white_depth) == (1, 2)
    assert record.opening == []
    assert record.black_pieces + record.white_pieces == record.placements + 4
    # Same engines from the same position replay the same game
    assert arena.play_game(1, 2, game=ReversiGame()) == record


def test_tournament_needs_two_depths():
    with pytest.raises(ValueError):
        Arena([2, 2]).run_tournament(rounds=1)


def test_tournament_summary(tmp_path):
    arena = Arena([1, 2], opening_plies=2, seed=0)
    summary = arena.run_tournament(rounds=1)

    first, second = summary['games']
    assert (first['black_depth'], first['white_depth']) == (1, 2)
    assert (second['black_depth'], second['white_depth']) == (2, 1)
    assert first['opening'] == second['opening']
    assert len(first['opening']) == 2

    pair = summary['pairs']['d1-d2']
    assert pair['games'] == 2
    assert pair['deep_wins'] + pair['shallow_wins'] + pair['draws'] == 2
    expected_margins = [-first['margin'], second['margin']]
    assert pair['margins'] == expected_margins
    assert pair['mean_margin'] == pytest.approx(sum(expected_margins) / 2)

    # Rating changes are zero-sum
    assert sum(arena.ratings.ratings.values()) == pytest.approx(3000.0)
    assert len(summary['standings']) == 2
    assert len(arena.records) == 2

    path = tmp_path / "results.json"
    arena.save_results(str(path), summary)
    with open(path) as f:
        assert json.load(f)['pairs']['d1-d2']['games'] == 2


def test_verbose_defaults_to_config(tmp_path):
    config_path = tmp_path / "config.json"
    config = get_default_config()
    config.logging.verbose = True
    config.save(str(config_path))

    loaded = run_tournament.load_config(run_tournament.parse_args(["--config", str(config_path)]))
    assert loaded.logging.verbose is True

    missing = str(tmp_path / "missing.json")
    assert run_tournament.load_config(run_tournament.parse_args(["--config", missing])).logging.verbose is False
    loaded = run_tournament.load_config(run_tournament.parse_args(["--config", missing, "--verbose"]))
    assert loaded.logging.verbose is True


def test_tournament_script(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    run_tournament.main(["--config", "missing.json", "--depths", "1", "2", "--rounds", "1",
                         "--opening-plies", "1", "--output-dir", "out"])

    files = os.listdir(tmp_path / "out")
    assert "elo_ratings.json" in files
    assert any(name.startswith("tournament_") for name in files)
    assert DepthRatings.load(str(tmp_path / "out" / "elo_ratings.json")).games == {1: 2, 2: 2}
