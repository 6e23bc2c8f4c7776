from dataclasses import dataclass

@dataclass(slots=True)
class TileTypeRegistry:
    """Empty tag component marking the single entity that stores the colour palette.

    The same entity also has a TileTypes component mapping colour name -> RGB.
    """
    pass
