# Sungka core engine (state-based public API)
# State shape:
# {
#   "pits": [[int]*7, [int]*7],   # row 0 = player 0, row 1 = player 1
#   "stores": [int, int],         # stores[0] = player 0 store, stores[1] = player 1 store
#   "current_player": 0 | 1       # whose turn it is
# }
# Pit 6 of a row sits next to that row's own store, pit 0 next to the opponent's.

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

NUM_PITS = 7
INITIAL_STONES = 7
HEURISTIC_ROW_WEIGHT = 0.1

# ---------------------------------------------------------------------
# Board state helpers
# ---------------------------------------------------------------------

def new_game(stones: int = INITIAL_STONES, first_player: int = 0) -> Dict:
    return {
        "pits":   [[stones] * NUM_PITS, [stones] * NUM_PITS],
        "stores": [0, 0],
        "current_player": first_player,
    }

def clone_state(state: Dict) -> Dict:
    """Structural copy: rows and stores never alias the source lists."""
    return {
        "pits":   [list(state["pits"][0]), list(state["pits"][1])],
        "stores": list(state["stores"]),
        "current_player": state["current_player"],
    }

def total_stones(state: Dict) -> int:
    return sum(state["pits"][0]) + sum(state["pits"][1]) + sum(state["stores"])

def legal_actions(state: Dict, player: Optional[int] = None) -> List[int]:
    row = state["current_player"] if player is None else player
    return [i for i in range(NUM_PITS) if state["pits"][row][i] > 0]

def is_terminal_state(state: Dict) -> bool:
    return sum(state["pits"][0]) == 0 or sum(state["pits"][1]) == 0

# ---------------------------------------------------------------------
# Move simulation
# ---------------------------------------------------------------------

@dataclass
class SimulationResult:
    state: Dict
    next_player: int
    extra_turn: bool = False
    capture: bool = False
    captured: int = 0
    last_pit: Optional[Tuple[int, int]] = None   # (row, index); None if the hand ended in the store

def simulate(state: Dict, pit: int, player: Optional[int] = None) -> SimulationResult:
    """
    Sow the stones of `pit` for `player` (defaults to state['current_player']).

    The caller guarantees the move is legal (own row, non-empty pit). The input
    state is never touched; the returned state is a fresh copy whose
    'current_player' is already set to the next mover.
    """
    mover = state["current_player"] if player is None else player
    new_state = clone_state(state)
    pits, stores = new_state["pits"], new_state["stores"]

    stones = pits[mover][pit]
    pits[mover][pit] = 0

    row, idx = mover, pit
    last_pit = None
    extra_turn = False

    while stones > 0:
        idx += 1
        if idx == NUM_PITS:
            # row boundary: only the mover's own store is ever credited
            if row == mover:
                stores[mover] += 1
                stones -= 1
                if stones == 0:
                    extra_turn = True
                    break
            row, idx = 1 - row, -1
            continue
        pits[row][idx] += 1
        stones -= 1
        last_pit = (row, idx)

    if extra_turn:
        last_pit = None

    capture, captured = False, 0
    if not extra_turn and last_pit is not None:
        land_row, land_idx = last_pit
        if land_row == mover and pits[mover][land_idx] == 1:
            opposite = NUM_PITS - 1 - land_idx
            captured = pits[1 - mover][opposite]
            if captured > 0:
                stores[mover] += captured + 1
                pits[mover][land_idx] = 0
                pits[1 - mover][opposite] = 0
                capture = True

    next_player = mover if extra_turn else 1 - mover
    new_state["current_player"] = next_player
    return SimulationResult(
        state=new_state,
        next_player=next_player,
        extra_turn=extra_turn,
        capture=capture,
        captured=captured,
        last_pit=last_pit,
    )

# ---------------------------------------------------------------------
# Evaluation
# ---------------------------------------------------------------------

def _swept_stores(state: Dict) -> List[int]:
    stores = list(state["stores"])
    for side in (0, 1):
        stores[side] += sum(state["pits"][side])
    return stores

def terminal_score(state: Dict, perspective: int) -> Optional[float]:
    """
    Final store difference (perspective minus opponent) if the game is over,
    else None. Remaining stones are swept into their owner's store for the
    score only; the state itself is left as is.
    """
    if not is_terminal_state(state):
        return None
    stores = _swept_stores(state)
    return float(stores[perspective] - stores[1 - perspective])

def heuristic_evaluate(state: Dict, perspective: int) -> float:
    """Banked difference plus a small bonus for stones still on one's own side."""
    me, opp = perspective, 1 - perspective
    score = state["stores"][me] - state["stores"][opp]
    score += (sum(state["pits"][me]) - sum(state["pits"][opp])) * HEURISTIC_ROW_WEIGHT
    return float(score)

# ---------------------------------------------------------------------
# Game driver (authoritative end-of-game handling)
# ---------------------------------------------------------------------

def finalize(state: Dict) -> Dict:
    """Game over: commit the sweep of every row into its store and zero all pits."""
    final = clone_state(state)
    final["stores"] = _swept_stores(state)
    final["pits"] = [[0] * NUM_PITS, [0] * NUM_PITS]
    return final

def winner(state: Dict) -> Optional[int]:
    stores = _swept_stores(state)
    if stores[0] == stores[1]:
        return None
    return 0 if stores[0] > stores[1] else 1

def step(state: Dict, action: int) -> Tuple[Dict, float, bool]:
    """
    Apply one move for state['current_player'] from pit index `action`.
    Returns: (next_state, reward, done)
      - reward: 0.0 for non-terminal; at terminal, final store difference from mover's perspective.
    """
    mover = state["current_player"]
    result = simulate(state, action, mover)
    next_state = result.state

    if is_terminal_state(next_state):
        next_state = finalize(next_state)
        reward = float(next_state["stores"][mover] - next_state["stores"][1 - mover])
        return next_state, reward, True

    if not legal_actions(next_state):
        next_state["current_player"] = 1 - next_state["current_player"]
    return next_state, 0.0, False
