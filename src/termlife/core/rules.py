"""Conway's B3/S23 transition rule."""

import numpy as np

# Live cells survive with 2-3 neighbors, dead cells are born with exactly 3
SURVIVE = (2, 3)
BIRTH = (3,)


def transition_rule(currently_alive: bool, live_neighbor_count: int) -> bool:
    """Return the next state of a single cell.

    Args:
        currently_alive: Current cell state
        live_neighbor_count: Number of live Moore neighbors (0-8)

    Returns:
        True if the cell is alive in the next generation
    """
    if currently_alive:
        return live_neighbor_count in SURVIVE
    return live_neighbor_count in BIRTH


def apply_rule(cells: np.ndarray, neighbor_counts: np.ndarray) -> np.ndarray:
    """Vectorized form of transition_rule over a whole generation.

    Args:
        cells: Boolean array of current states
        neighbor_counts: Integer array of the same shape

    Returns:
        New boolean array with the next states
    """
    birth = ~cells & np.isin(neighbor_counts, BIRTH)
    survive = cells & np.isin(neighbor_counts, SURVIVE)
    return birth | survive
