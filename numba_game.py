from time import perf_counter
import numpy as np
from numba import njit

from canvas import ConsoleCanvas


@njit
def step(grid_old, grid_new):
    rows, cols = grid_old.shape

    for r in range(rows):
        for c in range(cols):
            # Count neighbours (up to 8, fewer on the edges)
            live_neighbors = 0
            for dr in (-1, 0, 1):
                for dc in (-1, 0, 1):
                    if dr == 0 and dc == 0:
                        continue  # omit cell itself
                    rr = r + dr
                    cc = c + dc
                    if rr < 0 or rr >= rows or cc < 0 or cc >= cols:
                        continue  # bounded grid, no wrapping
                    live_neighbors += grid_old[rr, cc]

            if grid_old[r, c] == 1:
                grid_new[r, c] = 1 if live_neighbors == 2 or live_neighbors == 3 else 0
            else:
                grid_new[r, c] = 1 if live_neighbors == 3 else 0
    return grid_new


def numba_game(world, steps=100):
    """
    Run the full-rescan step and the incremental world side by side.
    Prints average step times and the speedup, returns True if both
    end on the same grid.
    """
    grid_old = world.alive_grid().astype(np.int32)
    grid_new = np.zeros_like(grid_old)
    canvas = ConsoleCanvas(world.width, world.height)
    world.paint(canvas)

    # first call compiles, keep it out of the timings
    step(grid_old.copy(), grid_new)

    num_of_iterations = 0
    rescan_time = 0
    incremental_time = 0
    while num_of_iterations < steps:
        st = perf_counter()
        grid_new = step(grid_old, grid_new)
        grid_old, grid_new = grid_new, grid_old
        end = perf_counter()
        rescan_time += (end - st)

        st = perf_counter()
        world.advance_generation(canvas)
        end = perf_counter()
        incremental_time += (end - st)
        num_of_iterations += 1

    if num_of_iterations:
        print(f"\nAverage execution time of the step: "
              f"{rescan_time / num_of_iterations:.8f} seconds for "
              f"full rescan\nAverage execution time of the step: "
              f"{incremental_time / num_of_iterations:.8f} seconds for "
              f"incremental update")
        if incremental_time > 0:
            print("Speedup  :", rescan_time / incremental_time)

    same = bool(np.array_equal(grid_old, world.alive_grid()))
    print(f"Final grids {'match' if same else 'DIFFER'} after "
          f"{num_of_iterations} steps")
    return same
