from dataclasses import dataclass

@dataclass(slots=True)
class TileType:
    """Per-cell colour assignment.

    Stores only the colour name. Occupied/empty state is handled by ActiveSwitch.
    RGB lookup resides in the singleton entity with TileTypeRegistry + TileTypes.
    """
    type_name: str = ""
