from dataclasses import dataclass
from typing import Dict, List, Tuple

@dataclass(slots=True)
class TileTypes:
    """Canonical colour definitions stored on a single entity.

    Lives alongside TileTypeRegistry (tag); every palette colour can spawn.
    """
    types: Dict[str, Tuple[int, int, int]]

    def background_for(self, type_name: str) -> Tuple[int, int, int]:
        return self.types[type_name]

    def spawnable_types(self) -> List[str]:
        return list(self.types.keys())
