from dataclasses import dataclass

@dataclass(slots=True)
class ActiveSwitch:
    """Per-cell occupancy flag.

    active: True if the cell holds a settled colour; False if empty.
    The colour itself lives in a separate TileType component.
    """
    active: bool = False
