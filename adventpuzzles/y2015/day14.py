"""2015 day 14: Reindeer Olympics."""

from dataclasses import dataclass

NAME = "Reindeer Olympics"

RACE_SECONDS = 2503


@dataclass(frozen=True)
class Reindeer:
    """A reindeer that flies in bursts and then has to rest."""

    name: str
    speed: int
    fly_time: int
    rest_time: int

    def distance(self, seconds: int) -> int:
        """Return how far the reindeer has flown after the given seconds."""
        full_cycles, remainder = divmod(seconds, self.fly_time + self.rest_time)
        flying = full_cycles * self.fly_time + min(remainder, self.fly_time)
        return flying * self.speed


def parse_reindeer(line: str) -> Reindeer:
    """Parse a line such as 'Comet can fly 14 km/s for 10 seconds, ...'."""
    tokens = line.strip().rstrip(".").split(" ")
    if len(tokens) < 14:
        raise ValueError(f"malformed reindeer description {line!r}")
    return Reindeer(tokens[0], int(tokens[3]), int(tokens[6]), int(tokens[13]))


def _herd(text: str) -> list[Reindeer]:
    herd = [parse_reindeer(line) for line in text.splitlines() if line.strip()]
    if not herd:
        raise ValueError("no reindeer given")
    return herd


def race_distance(text: str, seconds: int) -> int:
    """Return the distance covered by the leader after the given seconds."""
    return max(deer.distance(seconds) for deer in _herd(text))


def race_points(text: str, seconds: int) -> int:
    """Return the winning score when every leader earns a point each second."""
    herd = _herd(text)
    points = [0] * len(herd)
    for second in range(1, seconds + 1):
        distances = [deer.distance(second) for deer in herd]
        lead = max(distances)
        points = [p + (d == lead) for p, d in zip(points, distances)]
    return max(points)


def part1(text: str) -> int:
    """Return the winning distance after the full race."""
    return race_distance(text, RACE_SECONDS)


def part2(text: str) -> int:
    """Return the winning score after the full race."""
    return race_points(text, RACE_SECONDS)