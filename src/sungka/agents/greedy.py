# One-ply greedy policy (STATE-BASED), used by the "medium" tier
from __future__ import annotations
from typing import Dict, List, Optional, Tuple
import numpy as np
from sungka.engine.core import legal_actions, simulate

def classify_moves(state: Dict, player: int) -> Tuple[List[int], List[int]]:
    """
    Simulate each legal move once and split them into
    (moves granting an extra turn, moves making a capture).
    """
    extra_turn, captures = [], []
    for mv in legal_actions(state, player):
        res = simulate(state, mv, player)
        if res.next_player == player:
            extra_turn.append(mv)
        elif res.capture:
            captures.append(mv)
    return extra_turn, captures

def choose_move(state: Dict, player: Optional[int] = None,
                rng: Optional[np.random.Generator] = None) -> Optional[int]:
    """Random extra-turn move if any, else a random capture, else any random move."""
    me = state["current_player"] if player is None else player
    moves = legal_actions(state, me)
    if not moves:
        return None
    rng = rng if rng is not None else np.random.default_rng()

    extra_turn, captures = classify_moves(state, me)
    pool = extra_turn or captures or moves
    return int(rng.choice(pool))
