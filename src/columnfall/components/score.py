from dataclasses import dataclass

@dataclass
class Score:
    current: int = 0
    high: int = 0

    def add(self, points: int) -> None:
        if points < 0:
            raise ValueError("score only increases within a session")
        self.current += points
