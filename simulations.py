import sys
import pathlib
import time
from itertools import product
from concurrent.futures import ProcessPoolExecutor

import numpy as np
import pandas as pd
import psutil
from tqdm import tqdm

SRC = pathlib.Path(__file__).resolve().parent / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from sungka.engine.core import new_game, step, is_terminal_state, finalize
from sungka.io.registry import choose_move, NO_MOVE

SIM_HARD_DEPTH = 4   # full depth makes a 100-game sweep very slow

strategies = [
    {"name": "Easy", "difficulty": "easy"},
    {"name": "Medium", "difficulty": "medium"},
    {"name": "Hard", "difficulty": "hard"},
]

def play_game(player1_strategy, player2_strategy, rng=None, depth=SIM_HARD_DEPTH):
    """Play one game between two strategies; player 0 uses `player1_strategy`."""
    rng = rng if rng is not None else np.random.default_rng()
    start_time = time.time()
    state = new_game()
    moves_count = 0

    while not is_terminal_state(state):
        player = state["current_player"]
        strat = player1_strategy if player == 0 else player2_strategy
        move = choose_move(state, player, strat["difficulty"], depth=depth, rng=rng)
        if move == NO_MOVE:
            state = dict(state, current_player=1 - player)
            continue
        state, _, _ = step(state, move)
        moves_count += 1

    state = finalize(state)
    p1_score, p2_score = state["stores"]
    return {
        "player1": player1_strategy["name"],
        "player2": player2_strategy["name"],
        "p1_score": p1_score,
        "p2_score": p2_score,
        "winner": "Draw" if p1_score == p2_score else ("Player1" if p1_score > p2_score else "Player2"),
        "moves": moves_count,
        "time": time.time() - start_time,
    }

def run_simulations_for_pair(pair, num_games, seed=None):
    player1_strat, player2_strat = pair
    rng = np.random.default_rng(seed)
    results = []
    for _ in tqdm(range(num_games), desc=f"{player1_strat['name']} vs {player2_strat['name']}", leave=False):
        result = play_game(player1_strat, player2_strat, rng=rng)
        results.append({
            "Player1_Strategy": result["player1"],
            "Player2_Strategy": result["player2"],
            "Player1_Score": result["p1_score"],
            "Player2_Score": result["p2_score"],
            "Winner": result["winner"],
            "Moves": result["moves"],
            "Time_Seconds": round(result["time"], 3),
        })
    return results

def run_comprehensive_simulations(num_games=100):
    """Every ordered pair of strategies plays `num_games` games."""
    results = []
    combinations = list(product(strategies, strategies))

    if psutil.virtual_memory().percent > 90:
        raise MemoryError("High memory at simulation start")

    with tqdm(total=len(combinations), desc="Overall Progress") as overall_progress:
        with ProcessPoolExecutor() as executor:
            futures = []
            for seed, pair in enumerate(combinations):
                future = executor.submit(run_simulations_for_pair, pair, num_games, seed)
                future.add_done_callback(lambda _: overall_progress.update(1))
                futures.append(future)

            for future in futures:
                try:
                    results.extend(future.result())
                except Exception as e:
                    print(f"Error in worker: {e}")
                    continue

    return results

if __name__ == "__main__":
    simulation_results = run_comprehensive_simulations(num_games=100)
    df = pd.DataFrame(simulation_results)
    df.to_csv("sungka_simulations.csv", index=False)

    print("\nSummary Statistics:")
    print(df.groupby(['Player1_Strategy', 'Player2_Strategy'])['Winner']
            .value_counts(normalize=True)
            .unstack()
            .fillna(0))
