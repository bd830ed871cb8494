"""Survival and spawn rules for the Game of Life."""

from dataclasses import dataclass

from .exceptions import ContradictoryRulesError


@dataclass(frozen=True)
class GameRules:
    """Inclusive neighbor-count bounds for survival and spawning.

    The defaults are Conway's rules: a live cell with 2-3 neighbors
    survives, a dead cell with exactly 3 neighbors becomes alive.

    The predicates use bitwise operators so they also work element-wise
    on numpy arrays of neighbor counts.
    """

    min_survive: int = 2
    max_survive: int = 3
    min_spawn: int = 3
    max_spawn: int = 3

    def __post_init__(self) -> None:
        if self.max_survive < self.min_survive:
            raise ContradictoryRulesError(
                f"Rules are contradictory: max_survive ({self.max_survive}) < min_survive ({self.min_survive})"
            )
        if self.max_spawn < self.min_spawn:
            raise ContradictoryRulesError(
                f"Rules are contradictory: max_spawn ({self.max_spawn}) < min_spawn ({self.min_spawn})"
            )

    def cell_should_die(self, neighbors_count):
        """Check if a living cell should die.

        Args:
            neighbors_count: Number of living neighbors (int or numpy array)

        Returns:
            True if the cell should die
        """
        return (neighbors_count < self.min_survive) | (neighbors_count > self.max_survive)

    def cell_should_spawn(self, neighbors_count):
        """Check if a dead cell should become alive.

        Args:
            neighbors_count: Number of living neighbors (int or numpy array)

        Returns:
            True if a cell should spawn
        """
        return (neighbors_count >= self.min_spawn) & (neighbors_count <= self.max_spawn)
