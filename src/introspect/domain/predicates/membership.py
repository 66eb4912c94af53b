"""Multi-valued membership: all/any over a single-value test."""

from collections.abc import Callable, Iterable


def match_members[T](
    targets: tuple[T, ...],
    test: Callable[[T], bool],
    *,
    match_all: bool,
) -> bool:
    """Apply single-value test to every target.

    Args:
        targets: Values to test
        test: Single-value membership test
        match_all: True = every target must pass, False = at least one

    Returns:
        Combined result. Empty targets never match.
    """
    if not targets:
        return False
    if match_all:
        return all(test(t) for t in targets)
    return any(test(t) for t in targets)


def as_targets(values: Iterable[str], arg: str) -> tuple[str, ...]:
    """Capture list argument as tuple. FAIL-FIRST.

    Args:
        values: Target values supplied by caller
        arg: Argument name for error messages

    Returns:
        Targets as tuple

    Raises:
        TypeError: If values is None, a bare string, or contains None
    """
    if values is None:
        raise TypeError(f"{arg} must not be None")
    if isinstance(values, str):
        raise TypeError(f"{arg} must be a list of strings, not a string")
    targets = tuple(values)
    for value in targets:
        if value is None:
            raise TypeError(f"{arg} must not contain None")
    return targets
