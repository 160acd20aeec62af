"""2015 day 19: Medicine for Rudolph."""

NAME = "Medicine for Rudolph"


def _parse(text: str) -> tuple[list[tuple[str, str]], str]:
    replacements_text, sep, molecule = text.partition("\n\n")
    if not sep:
        raise ValueError("expected replacements and molecule separated by a blank line")
    replacements = []
    for line in replacements_text.splitlines():
        pattern, arrow, substitute = line.partition(" => ")
        if not arrow:
            raise ValueError(f"malformed replacement {line!r}")
        replacements.append((pattern, substitute))
    return replacements, molecule.strip()


def count_distinct(text: str) -> int:
    """Count the distinct molecules reachable by one replacement."""
    replacements, molecule = _parse(text)
    results: set[str] = set()
    for pattern, substitute in replacements:
        index = molecule.find(pattern)
        while index != -1:
            results.add(molecule[:index] + substitute + molecule[index + len(pattern) :])
            index = molecule.find(pattern, index + 1)
    return len(results)


def fewest_steps(text: str) -> int:
    """Greedily reduce the molecule back to 'e', counting the steps."""
    replacements, molecule = _parse(text)
    reverse = {substitute: pattern for pattern, substitute in replacements}
    ordered = sorted(reverse, key=len, reverse=True)
    steps = 0
    while molecule != "e":
        substitute = next((s for s in ordered if s in molecule), None)
        if substitute is None:
            raise ValueError(f"cannot reduce molecule {molecule!r}")
        molecule = molecule.replace(substitute, reverse[substitute], 1)
        steps += 1
    return steps


def part1(text: str) -> int:
    """Return the number of distinct molecules after one replacement."""
    return count_distinct(text)


def part2(text: str) -> int:
    """Return the steps needed to build the molecule from 'e'."""
    return fewest_steps(text)