# Uniform random policy (STATE-BASED), used by the "easy" tier
from __future__ import annotations
from typing import Dict, Optional
import numpy as np
from sungka.engine.core import legal_actions

def choose_move(state: Dict, player: Optional[int] = None,
                rng: Optional[np.random.Generator] = None) -> Optional[int]:
    moves = legal_actions(state, player)
    if not moves:
        return None
    rng = rng if rng is not None else np.random.default_rng()
    return int(rng.choice(moves))
