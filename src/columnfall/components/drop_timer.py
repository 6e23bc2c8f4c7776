from dataclasses import dataclass

@dataclass(slots=True)
class DropTimer:
    """The session's single drop timer.

    Ticks only accumulate while ``armed``; disarming discards the partial interval.
    """
    interval: float
    elapsed: float = 0.0
    armed: bool = False

    def arm(self) -> None:
        self.armed = True
        self.elapsed = 0.0

    def disarm(self) -> None:
        self.armed = False
        self.elapsed = 0.0

    def advance(self, dt: float) -> int:
        """Accumulate ``dt`` and return how many whole intervals fired."""
        if not self.armed or self.interval <= 0:
            return 0
        self.elapsed += dt
        fired = 0
        while self.elapsed >= self.interval:
            self.elapsed -= self.interval
            fired += 1
        return fired
