"""Conway's Game of Life simulation session."""

from typing import Deque, Dict, Tuple
from collections import deque
import numpy as np

from .grid import Grid

MAX_TRACKED_STATES = 1000


class GameOfLife:
    """Drives a grid forward one generation at a time.

    Implements the classic rules:
    - Live cell with 2-3 neighbors survives
    - Dead cell with exactly 3 neighbors becomes alive
    - All other cells die or stay dead

    Each step computes the successor grid in full and then replaces the
    current grid, so the current generation is never seen half-updated.
    """

    def __init__(self, grid: Grid) -> None:
        """Initialize the game with a grid.

        Args:
            grid: The starting generation
        """
        self.grid = grid
        self._generation = 0
        self._population_history: Deque[int] = deque(maxlen=100)
        self._seen_states: Dict[bytes, int] = {}
        self._state_history: Deque[bytes] = deque()
        self._cycle_detected = False
        self._cycle_length = 0
        self._cycle_start_generation = 0

        self._update_population_history()

    @property
    def generation(self) -> int:
        """Current generation number."""
        return self._generation

    @property
    def population(self) -> int:
        """Current number of living cells."""
        return self.grid.population

    @property
    def population_history(self) -> list:
        """History of population counts."""
        return list(self._population_history)

    @property
    def cycle_detected(self) -> bool:
        return self._cycle_detected

    @property
    def cycle_length(self) -> int:
        """Length of detected cycle (0 if no cycle)."""
        return self._cycle_length

    @property
    def cycle_start_generation(self) -> int:
        """Generation where cycle started (0 if no cycle)."""
        return self._cycle_start_generation

    def step(self) -> None:
        """Advance the simulation by one generation."""
        self._record_state()

        successor = self.grid.next_generation()
        self.grid = successor

        self._generation += 1
        self._update_population_history()

        # A cycle closes as soon as the new state matches an earlier one
        self._check_for_cycle()

    def run(self, generations: int) -> None:
        """Advance a fixed number of generations."""
        for _ in range(generations):
            self.step()

    def run_until_stable(self, max_generations: int = 10000) -> Tuple[int, str]:
        """Run simulation until it becomes stable or cycles.

        Args:
            max_generations: Maximum generations to run

        Returns:
            Tuple of (final_generation, reason) where reason is one of:
            'cycle', 'extinction', 'max_generations'
        """
        for _ in range(max_generations):
            self.step()

            if self._cycle_detected:
                return self._generation, "cycle"

            if self.population == 0:
                return self._generation, "extinction"

        return self._generation, "max_generations"

    def _update_population_history(self) -> None:
        self._population_history.append(self.population)

    def _record_state(self) -> None:
        if self._cycle_detected:
            return

        state = self.grid.cells.tobytes()
        if state in self._seen_states:
            return
        self._seen_states[state] = self._generation
        self._state_history.append(state)

        # Only cycles shorter than the window are detected
        if len(self._state_history) > MAX_TRACKED_STATES:
            del self._seen_states[self._state_history.popleft()]

    def _check_for_cycle(self) -> None:
        if self._cycle_detected:
            return

        first_occurrence = self._seen_states.get(self.grid.cells.tobytes())
        if first_occurrence is not None:
            self._cycle_detected = True
            self._cycle_length = self._generation - first_occurrence
            self._cycle_start_generation = first_occurrence
            # No longer needed once the cycle is known
            self._seen_states.clear()
            self._state_history.clear()

    def get_population_change_rate(self, window_size: int = 10) -> float:
        """Average population change per generation over the recent window."""
        recent_history = list(self._population_history)[-window_size:]
        if len(recent_history) < 2:
            return 0.0

        return float(np.mean(np.diff(recent_history)))

    def get_statistics(self) -> Dict:
        """Get simulation statistics.

        Returns:
            Dictionary with various statistics
        """
        bbox = self.grid.get_bounding_box()

        stats = {
            "generation": self._generation,
            "population": self.population,
            "population_change_rate": self.get_population_change_rate(),
            "population_history": list(self._population_history),
            "cycle_detected": self._cycle_detected,
            "cycle_length": self._cycle_length,
            "cycle_start_generation": self._cycle_start_generation,
            "grid_size": self.grid.shape,
            "population_density": self.population / (self.grid.width * self.grid.height),
        }

        if bbox:
            stats["bounding_box"] = bbox
            box_height = bbox[2] - bbox[0] + 1
            box_width = bbox[3] - bbox[1] + 1
            stats["bounding_box_size"] = (box_height, box_width)
        else:
            stats["bounding_box"] = None
            stats["bounding_box_size"] = (0, 0)

        return stats
