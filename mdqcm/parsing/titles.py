"""Point-value extraction from question titles."""

import re

SCORE_PATTERN = re.compile(r"\[([0-9]+)\]\s*$")

DEFAULT_SCORE = 1


def split_score(title: str) -> tuple[str, int]:
    """Split a trailing ``[n]`` point value off a question title.

    ``"2+2? [3]"`` gives ``("2+2?", 3)``; a title without a bracketed
    integer keeps its text and gets the default score of 1.
    """
    title = title.strip()
    match = SCORE_PATTERN.search(title)
    if match is None:
        return title, DEFAULT_SCORE
    return title[: match.start()].strip(), int(match.group(1))
