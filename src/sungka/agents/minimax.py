# Simple Minimax (STATE-BASED, no alpha-beta)
# Exhaustive reference for the pruned search in sungka.agents.alpha_beta.
from __future__ import annotations
import math
from typing import Dict, Optional
from sungka.engine.core import (
    legal_actions, simulate, terminal_score, heuristic_evaluate,
)
from sungka.agents.alpha_beta import SearchStats

def search(
    state: Dict,
    mover: int,
    depth: int,
    perspective: int,
    stats: Optional[SearchStats] = None,
) -> float:
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

    scores = []
    for mv in moves:
        res = simulate(state, mv, mover)
        scores.append(search(res.state, res.next_player, depth - 1, perspective, stats))
    return max(scores) if mover == perspective else min(scores)

def choose_move(state: Dict, player: Optional[int] = None, depth: int = 6) -> Optional[int]:
    """Same selection rule as the alpha-beta agent, without pruning."""
    me = state["current_player"] if player is None else player
    moves = legal_actions(state, me)
    if not moves:
        return None
    best_score, best_move = -math.inf, moves[0]
    for mv in moves:
        res = simulate(state, mv, me)
        score = search(res.state, res.next_player, depth - 1, me)
        if score > best_score or (score == best_score and mv > best_move):
            best_score, best_move = score, mv
    return int(best_move)
