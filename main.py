import sys
import numpy as np
from canvas import ConsoleCanvas
from numba_game import numba_game
from sequential_game import print_grid, sequential_game
from world import World

ROWS, COLS = 96, 96
GENERATIONS = 50


def _parse_argv(argv):
    rows = ROWS
    cols = COLS
    gens = GENERATIONS
    seed = None
    delay = 0.0
    render = False
    mode = None
    i = 1
    while i < len(argv):
        a = argv[i]
        if a == "-r" and i + 1 < len(argv):
            rows = int(argv[i + 1]); i += 2
        elif a == "-c" and i + 1 < len(argv):
            cols = int(argv[i + 1]); i += 2
        elif a == "-g" and i + 1 < len(argv):
            gens = int(argv[i + 1]); i += 2
        elif a == "-s" and i + 1 < len(argv):
            seed = int(argv[i + 1]); i += 2
        elif a == "-d" and i + 1 < len(argv):
            delay = float(argv[i + 1]); i += 2
        elif a == "-m" and i + 1 < len(argv):
            mode = int(argv[i + 1]); i += 2
        elif a == "-v":
            render = True; i += 1
        else:
            i += 1
    return rows, cols, gens, seed, delay, render, mode


def game(argv=None):
    rows, cols, gens, seed, delay, render, game_num = _parse_argv(
        sys.argv if argv is None else argv)
    if seed is None:
        seed = int(np.random.SeedSequence().generate_state(1, np.uint64)[0])
    print(f"Seed: {seed}")

    try:
        if game_num is None:
            print("Choose game type:\n[1] - incremental\n[2] - incremental "
                  "vs numba full rescan")
            game_num = int(input("Provide game number:"))

        rng = np.random.default_rng(seed)
        world = World.random(cols, rows, rng)
        canvas = ConsoleCanvas(cols, rows)
        world.paint(canvas)

        match game_num:
            case 1:
                if render:
                    print_grid(world.alive_grid())
                sequential_game(world, canvas, gens, render=render,
                                delay=delay)
            case 2:
                numba_game(world, gens)
            case _:
                print(f"{game_num} is not a valid number, choose between ["
                      f"1-2]")
    except Exception as e:
        print(f"Game failed. Reason: {e}")


if __name__ == "__main__":
    game()
