def zero_if_none(value: int | None) -> int:
    """Counter value with ``None`` read as 0."""
    return 0 if value is None else value


def non_negative_count(value: int | None) -> int:
    """Counter value with ``None`` read as 0 and negatives clamped to 0."""
    if value is None:
        return 0
    return max(0, value)
