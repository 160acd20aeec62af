"""2023 day 15: Lens Library."""

NAME = "Lens Library"

_BOXES = 256


def holiday_hash(text: str) -> int:
    """Return the HASH value of a string."""
    value = 0
    for char in text:
        value = (value + ord(char)) * 17 % _BOXES
    return value


def _steps(text: str) -> list[str]:
    return text.strip().split(",")


def part1(text: str) -> int:
    """Sum the hashes of all steps."""
    return sum(holiday_hash(step) for step in _steps(text))


def part2(text: str) -> int:
    """Return the focusing power after arranging all lenses."""
    boxes: list[dict[str, int]] = [{} for _ in range(_BOXES)]
    for step in _steps(text):
        if "-" in step:
            label = step[:-1]
            boxes[holiday_hash(label)].pop(label, None)
        else:
            label, sep, focal = step.partition("=")
            if not sep:
                raise ValueError(f"malformed step {step!r}")
            boxes[holiday_hash(label)][label] = int(focal)
    return sum(
        box_number * slot * focal
        for box_number, box in enumerate(boxes, start=1)
        for slot, focal in enumerate(box.values(), start=1)
    )