from time import perf_counter, sleep
import os


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def print_grid(grid):
    clear_screen()
    for row in grid:
        print(''.join('█' if cell else ' ' for cell in row))
    print('-' * grid.shape[1])


def _print_times(total_time, num_of_iterations):
    if num_of_iterations == 0:
        return
    print(f"\nAverage execution time of the step: "
          f"{total_time / num_of_iterations:.8f} seconds")
    print(f"Total time for {num_of_iterations} steps: {total_time:.8f} seconds")


def sequential_game(world, canvas, steps=100, render=False, delay=0.0):
    """Advance `world` `steps` times, drawing changes onto `canvas`."""
    num_of_iterations = 0
    total_time = 0  # Time only counts execution of: world.advance_generation

    try:
        while num_of_iterations < steps:
            st = perf_counter()
            world.advance_generation(canvas)
            end = perf_counter()
            total_time += (end - st)
            num_of_iterations += 1
            if render:
                clear_screen()
                print(f"Generation: {num_of_iterations}")
                canvas.render()
            if delay:
                sleep(delay)
        _print_times(total_time, num_of_iterations)
    except KeyboardInterrupt:
        print("\nSequential_game finished by KeyboardInterrupt.")
        _print_times(total_time, num_of_iterations)

    print(f"Total generations: {num_of_iterations}")
    return num_of_iterations
