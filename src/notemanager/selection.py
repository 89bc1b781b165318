"""Fuzzy matching of notes against a pattern typed by the user.

A pattern matches a path if all of its characters appear in the path in the same order, though not
necessarily next to each other. For example, ``tdy`` matches ``notes/today.md``. Matching is case-insensitive
unless the pattern contains an uppercase letter.

Matches are scored so that characters at the start of words, and runs of consecutive characters, count for
more than characters scattered through the middle of words. The score only affects :func:`rank`;
:func:`select` keeps every match in its original order.
"""

from typing import Callable, List, Optional, Sequence

SCORE_MATCH = 16
SCORE_GAP_START = -3
SCORE_GAP_EXTENSION = -1

BONUS_BOUNDARY = SCORE_MATCH // 2
BONUS_NON_WORD = SCORE_MATCH // 2
BONUS_CAMEL = BONUS_BOUNDARY - 1
BONUS_CONSECUTIVE = -(SCORE_GAP_START + SCORE_GAP_EXTENSION)
BONUS_FIRST_CHAR_MULTIPLIER = 2

Scorer = Callable[[str, str], Optional[int]]


def _char_bonus(prev: str, char: str) -> int:
    if not char.isalnum():
        return BONUS_NON_WORD
    if not prev or not prev.isalnum():
        return BONUS_BOUNDARY
    if (prev.islower() and char.isupper()) or (not prev.isdigit() and char.isdigit()):
        return BONUS_CAMEL
    return 0


def score(candidate: str, pattern: str) -> Optional[int]:
    """Returns how well pattern matches candidate (higher is better), or None if it does not match at all.

    An empty pattern matches everything with a score of 0.
    """
    if not pattern:
        return 0
    if any(c.isupper() for c in pattern):
        text = list(candidate)
    else:
        text = [c.lower() for c in candidate]
    if len(pattern) > len(text):
        return None
    bonuses = [_char_bonus(candidate[j - 1] if j else '', candidate[j]) for j in range(len(candidate))]

    # prev[j] is the best score for the pattern so far with its last character matched at text[j].
    prev = [SCORE_MATCH + bonuses[j] * BONUS_FIRST_CHAR_MULTIPLIER if c == pattern[0] else None
            for j, c in enumerate(text)]
    for pchar in pattern[1:]:
        row = [None] * len(text)
        gapped = None
        for j, c in enumerate(text):
            options = []
            if gapped is not None:
                options.append(gapped)
            if j and prev[j - 1] is not None:
                options.append(prev[j - 1] + BONUS_CONSECUTIVE)
            if c == pchar and options:
                row[j] = max(options) + SCORE_MATCH + bonuses[j]
            # best score reachable at j + 1 after skipping at least one character
            extended = [gapped + SCORE_GAP_EXTENSION] if gapped is not None else []
            if j and prev[j - 1] is not None:
                extended.append(prev[j - 1] + SCORE_GAP_START)
            gapped = max(extended) if extended else None
        prev = row
    best = [s for s in prev if s is not None]
    return max(best) if best else None


def select(candidates: Sequence[str], pattern: str, scorer: Scorer = score) -> List[str]:
    """Returns the candidates that match pattern, in their original order."""
    return [c for c in candidates if scorer(c, pattern) is not None]


def rank(candidates: Sequence[str], pattern: str, scorer: Scorer = score) -> List[str]:
    """Returns the candidates that match pattern, best match first.

    Candidates with equal scores keep their original order.
    """
    scored = [(scorer(c, pattern), c) for c in candidates]
    matched = [(s, c) for s, c in scored if s is not None]
    matched.sort(key=lambda sc: -sc[0])
    return [c for _, c in matched]
