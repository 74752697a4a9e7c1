# tests/test_engine.py
import copy

import pytest

from sungka.engine.core import (
    new_game, legal_actions, simulate, step, finalize, winner,
    terminal_score, heuristic_evaluate, total_stones, is_terminal_state,
)

def test_new_game_layout():
    s = new_game()
    assert s["pits"] == [[7] * 7, [7] * 7]
    assert s["stores"] == [0, 0]
    assert s["current_player"] == 0
    assert total_stones(s) == 98
    assert legal_actions(s) == list(range(7))

def test_legal_actions_skip_empty_pits(board):
    s = board([0, 3, 0, 1, 0, 0, 2], [1, 0, 0, 0, 0, 0, 0], player=0)
    assert legal_actions(s) == [1, 3, 6]
    assert legal_actions(s, 1) == [0]

def test_sowing_wraps_and_conserves_stones():
    s = new_game()
    res = simulate(s, 2)
    assert res.state["pits"][0] == [7, 7, 0, 8, 8, 8, 8]
    assert res.state["pits"][1] == [8, 8, 7, 7, 7, 7, 7]
    assert res.state["stores"] == [1, 0]
    assert res.next_player == 1
    assert res.state["current_player"] == 1
    assert not res.extra_turn
    assert not res.capture
    assert res.last_pit == (1, 1)
    assert total_stones(res.state) == 98

def test_player_one_skips_player_zero_store(board):
    s = board([0] * 7, [2, 0, 0, 0, 0, 0, 9], stores=(5, 0), player=1)
    res = simulate(s, 6)
    assert res.state["stores"] == [5, 1]
    assert res.state["pits"][0] == [1] * 7
    assert res.state["pits"][1] == [3, 0, 0, 0, 0, 0, 0]
    assert res.last_pit == (1, 0)
    assert res.next_player == 0

def test_long_sowing_skips_opponent_store(board):
    s = board([2, 0, 0, 0, 0, 0, 9], [0] * 7)
    res = simulate(s, 6)
    # own store, 7 opponent pits, opponent store skipped, back to own pit 0
    assert res.state["stores"] == [1, 0]
    assert res.state["pits"][1] == [1] * 7
    assert res.state["pits"][0] == [3, 0, 0, 0, 0, 0, 0]
    assert res.last_pit == (0, 0)
    assert not res.capture
    assert total_stones(res.state) == 11

def test_capture_takes_opposite_pit(board):
    s = board([1, 0, 2, 0, 0, 0, 0], [3, 4, 5, 6, 7, 8, 9])
    res = simulate(s, 0)
    assert res.capture
    assert res.captured == 8
    assert res.state["stores"] == [9, 0]
    assert res.state["pits"][0][1] == 0
    assert res.state["pits"][1][5] == 0
    assert res.next_player == 1
    assert total_stones(res.state) == total_stones(s)

def test_no_capture_when_opposite_empty(board):
    s = board([1, 0, 0, 0, 0, 0, 0], [3, 0, 0, 0, 0, 0, 0])
    res = simulate(s, 0)
    assert not res.capture
    assert res.captured == 0
    assert res.state["pits"][0] == [0, 1, 0, 0, 0, 0, 0]
    assert res.state["stores"] == [0, 0]

def test_no_capture_on_opponent_row(board):
    s = board([0, 0, 0, 0, 0, 0, 2], [0, 0, 0, 0, 0, 0, 4])
    res = simulate(s, 6)
    assert res.last_pit == (1, 0)
    assert res.state["pits"][1][0] == 1
    assert not res.capture
    assert res.state["stores"] == [1, 0]

def test_no_capture_on_non_empty_landing(board):
    s = board([1, 2, 0, 0, 0, 0, 0], [0, 0, 0, 0, 0, 6, 0])
    res = simulate(s, 0)
    assert res.state["pits"][0][1] == 3
    assert not res.capture

def test_full_lap_lands_in_emptied_start_pit(board):
    s = board([15, 0, 0, 0, 0, 0, 0], [1] * 7)
    res = simulate(s, 0)
    assert res.last_pit == (0, 0)
    assert res.capture
    assert res.captured == 2
    assert res.state["pits"][0] == [0, 1, 1, 1, 1, 1, 1]
    assert res.state["pits"][1] == [2, 2, 2, 2, 2, 2, 0]
    assert res.state["stores"] == [4, 0]
    assert total_stones(res.state) == 22

def test_extra_turn_when_hand_ends_in_own_store(board):
    s = board([0, 0, 0, 0, 3, 0, 0], [0, 0, 5, 0, 0, 0, 0])
    res = simulate(s, 4)
    assert res.extra_turn
    assert res.next_player == 0
    assert res.state["current_player"] == 0
    assert res.last_pit is None
    assert not res.capture
    assert res.state["pits"][0] == [0, 0, 0, 0, 0, 1, 1]
    assert res.state["stores"] == [1, 0]

def test_extra_turn_from_opening_pit_zero():
    res = simulate(new_game(), 0)
    assert res.extra_turn
    assert res.next_player == 0
    assert res.state["pits"][0] == [0, 8, 8, 8, 8, 8, 8]
    assert res.state["pits"][1] == [7] * 7

def test_extra_turn_for_player_one(board):
    s = board([4] * 7, [0, 0, 0, 0, 0, 2, 0], player=1)
    res = simulate(s, 5)
    assert res.extra_turn
    assert res.next_player == 1
    assert res.state["stores"] == [0, 1]

def test_simulate_does_not_mutate_input(board):
    s = board([1, 0, 2, 0, 0, 0, 0], [3, 4, 5, 6, 7, 8, 9], stores=(2, 3))
    before = copy.deepcopy(s)
    first = simulate(s, 0)
    second = simulate(s, 0)
    assert s == before
    assert first == second
    first.state["pits"][0][2] = 99
    first.state["stores"][0] = 99
    assert s == before
    assert second.state["pits"][0][2] == 2

@pytest.mark.parametrize("pit", range(7))
def test_every_opening_move_conserves_stones(pit):
    for player in (0, 1):
        s = new_game(first_player=player)
        res = simulate(s, pit)
        assert total_stones(res.state) == 98
        assert all(v >= 0 for row in res.state["pits"] for v in row)

def test_terminal_score_sweeps_non_empty_row(board):
    s = board([0] * 7, [1, 2, 3, 4, 0, 0, 0], stores=(5, 3))
    assert is_terminal_state(s)
    assert terminal_score(s, 0) == pytest.approx(5 - 13)
    assert terminal_score(s, 1) == pytest.approx(13 - 5)
    # projection only
    assert s["pits"][1] == [1, 2, 3, 4, 0, 0, 0]
    assert s["stores"] == [5, 3]

def test_terminal_score_other_side(board):
    s = board([2, 0, 0, 0, 0, 0, 4], [0] * 7, stores=(10, 20))
    assert terminal_score(s, 0) == pytest.approx(16 - 20)

def test_terminal_score_both_rows_empty(board):
    s = board([0] * 7, [0] * 7, stores=(40, 58))
    assert terminal_score(s, 0) == pytest.approx(-18)
    assert terminal_score(s, 1) == pytest.approx(18)

def test_terminal_score_none_mid_game():
    assert terminal_score(new_game(), 0) is None

def test_heuristic_weighs_store_and_row(board):
    s = board([5, 5, 5, 5, 0, 0, 0], [10, 0, 0, 0, 0, 0, 0], stores=(10, 4))
    assert heuristic_evaluate(s, 0) == pytest.approx(7.0)
    assert heuristic_evaluate(s, 1) == pytest.approx(-7.0)

def test_finalize_commits_sweep(board):
    s = board([0] * 7, [1, 2, 3, 0, 0, 0, 0], stores=(5, 3))
    f = finalize(s)
    assert f["pits"] == [[0] * 7, [0] * 7]
    assert f["stores"] == [5, 9]
    assert s["stores"] == [5, 3]
    assert winner(f) == 1

def test_winner_tie(board):
    assert winner(board([0] * 7, [0] * 7, stores=(49, 49))) is None

def test_step_ends_game_and_sweeps(board):
    s = board([0, 0, 0, 0, 0, 0, 1], [2, 0, 0, 0, 0, 0, 0], stores=(3, 4))
    ns, reward, done = step(s, 6)
    assert done
    assert ns["pits"] == [[0] * 7, [0] * 7]
    assert ns["stores"] == [4, 6]
    assert reward == pytest.approx(-2.0)

def test_step_mid_game_switches_player():
    ns, reward, done = step(new_game(), 2)
    assert not done
    assert reward == 0.0
    assert ns["current_player"] == 1

def test_step_keeps_player_on_extra_turn():
    ns, _, done = step(new_game(), 0)
    assert not done
    assert ns["current_player"] == 0
