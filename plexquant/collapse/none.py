"""Identity collapse."""

from plexquant.collapse.base import CollapseStrategy
from plexquant.core.matrix import QuantMatrix


class NoCollapse(CollapseStrategy):
    """Keep one column per physical channel."""

    @property
    def name(self) -> str:
        return "None"

    def collapse(self, matrix: QuantMatrix) -> QuantMatrix:
        return matrix.copy()
