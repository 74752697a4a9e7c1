# Alpha-beta minimax (STATE-BASED), used by the "hard" tier
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Dict, Optional
from sungka.engine.core import (
    legal_actions, simulate, terminal_score, heuristic_evaluate,
)

HARD_DEPTH = 6

@dataclass
class SearchStats:
    """Node counter threaded through a single search by the caller."""
    nodes: int = 0

# ----------------------------- alpha-beta core ------------------------------

def search(
    state: Dict,
    mover: int,
    depth: int,
    perspective: int,
    alpha: float = -math.inf,
    beta: float = math.inf,
    stats: Optional[SearchStats] = None,
) -> float:
    """
    Value of `state` with `mover` to act, seen from `perspective`.
    Every ply (extra turns included) consumes one unit of depth.
    """
    if stats is not None:
        stats.nodes += 1

    term = terminal_score(state, perspective)
    if term is not None:
        return term

    if depth <= 0:
        return heuristic_evaluate(state, perspective)

    moves = legal_actions(state, mover)
    if not moves:
        return heuristic_evaluate(state, perspective)

    if mover == perspective:
        value = -math.inf
        for mv in moves:
            res = simulate(state, mv, mover)
            score = search(res.state, res.next_player, depth - 1, perspective, alpha, beta, stats)
            value = max(value, score)
            alpha = max(alpha, value)
            if alpha >= beta:
                break
        return value
    else:
        value = math.inf
        for mv in moves:
            res = simulate(state, mv, mover)
            score = search(res.state, res.next_player, depth - 1, perspective, alpha, beta, stats)
            value = min(value, score)
            beta = min(beta, value)
            if alpha >= beta:
                break
        return value

# ------------------------------- public API ---------------------------------

def choose_move(state: Dict, player: Optional[int] = None, depth: int = HARD_DEPTH) -> Optional[int]:
    """
    Best pit for `player` (defaults to the state's current player), or None
    when that player has no legal move. The move itself uses one ply of
    `depth`; ties go to the larger pit index.
    """
    me = state["current_player"] if player is None else player
    moves = legal_actions(state, me)
    if not moves:
        return None

    best_score, best_move = -math.inf, moves[0]
    for mv in moves:
        res = simulate(state, mv, me)
        score = search(res.state, res.next_player, depth - 1, me)
        if score > best_score:
            best_score, best_move = score, mv
        elif score == best_score and mv > best_move:
            best_move = mv
    return int(best_move)
