from dataclasses import dataclass, field
from typing import List, Tuple

@dataclass(slots=True)
class FallingColumn:
    """The three-cell column currently under player control.

    ``row`` is the lowest (leading) cell; ``colors[i]`` sits at ``row - i``.
    Cells above row 0 are tracked but not drawn.
    """
    row: int
    col: int
    colors: List[str] = field(default_factory=list)

    def cells(self) -> List[Tuple[int, int, str]]:
        return [(self.row - i, self.col, color) for i, color in enumerate(self.colors)]
