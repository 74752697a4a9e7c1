# src/sungka/io/registry.py
import logging
import os
from typing import Dict, Optional

import numpy as np

from sungka.engine.core import legal_actions
from sungka.agents import alpha_beta, greedy, random_agent

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------
NO_MOVE = -1
DEFAULT_HARD_DEPTH = alpha_beta.HARD_DEPTH
DIFFICULTIES = ("easy", "medium", "hard")

def hard_depth_from_env(default: int = DEFAULT_HARD_DEPTH) -> int:
    raw = os.getenv("SUNGKA_HARD_DEPTH")
    if raw is None or raw == "":
        return default
    try:
        depth = int(raw)
    except ValueError:
        log.warning("SUNGKA_HARD_DEPTH=%r is not an integer, using %d", raw, default)
        return default
    if depth < 1:
        log.warning("SUNGKA_HARD_DEPTH=%d must be positive, using %d", depth, default)
        return default
    return depth

HARD_DEPTH = hard_depth_from_env()

# ---------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------
def normalize_difficulty(difficulty: Optional[str]) -> str:
    level = (difficulty or "").strip().lower()
    if level not in DIFFICULTIES:
        log.debug("Unknown difficulty %r, falling back to easy", difficulty)
        return "easy"
    return level

def choose_move(
    state: Dict,
    player: Optional[int] = None,
    difficulty: Optional[str] = "easy",
    depth: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
) -> int:
    """
    Pick a pit for `player` (defaults to state['current_player']) using the
    policy for `difficulty`. Returns NO_MOVE when that player's row is empty.
    """
    me = state["current_player"] if player is None else player
    if not legal_actions(state, me):
        return NO_MOVE

    level = normalize_difficulty(difficulty)
    if level == "hard":
        move = alpha_beta.choose_move(state, me, depth=HARD_DEPTH if depth is None else depth)
    elif level == "medium":
        move = greedy.choose_move(state, me, rng=rng)
    else:
        move = random_agent.choose_move(state, me, rng=rng)

    log.debug("player=%d difficulty=%s move=%s", me, level, move)
    return NO_MOVE if move is None else int(move)
