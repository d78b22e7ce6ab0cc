from collections import namedtuple
from typing import Dict, Iterable, List, Optional, Tuple

from ryder.errors import ValidationError
from ryder.models import DEFAULT_HOLES, HOLE_VARIANTS

OUTCOME_A = 'A'
OUTCOME_B = 'B'
OUTCOME_HALVED = 'AS'
OUTCOME_UNPLAYED = ''
OUTCOMES = (OUTCOME_A, OUTCOME_B, OUTCOME_HALVED)

ALL_SQUARE = 'A/S'

MatchScore = namedtuple('MatchScore', ['wins_a', 'wins_b', 'text', 'played', 'remaining'])


def hole_range(holes: Optional[str]) -> Tuple[int, int]:
    """First and last hole for a variant; unknown variants read as a full round."""
    return HOLE_VARIANTS.get(holes or DEFAULT_HOLES, HOLE_VARIANTS[DEFAULT_HOLES])


def hole_count(holes: Optional[str]) -> int:
    first, last = hole_range(holes)
    return last - first + 1


def score_match(hole_results: Dict[int, str], holes: Optional[str] = DEFAULT_HOLES,
                team_a_name: str = 'A', team_b_name: str = 'B') -> MatchScore:
    """Tally hole wins for both sides and build the leaderboard text.

    Halved and unplayed holes count for neither side. Holes outside the
    match's variant (left over from a reconfiguration) are ignored.
    """
    first, last = hole_range(holes)
    wins_a = wins_b = played = 0
    for hole, outcome in hole_results.items():
        if not first <= hole <= last or outcome not in OUTCOMES:
            continue
        played += 1
        if outcome == OUTCOME_A:
            wins_a += 1
        elif outcome == OUTCOME_B:
            wins_b += 1

    if wins_a > wins_b:
        text = f"{team_a_name} {wins_a - wins_b} Up"
    elif wins_b > wins_a:
        text = f"{team_b_name} {wins_b - wins_a} Up"
    else:
        text = ALL_SQUARE
    return MatchScore(wins_a, wins_b, text, played, (last - first + 1) - played)


def points(wins_a: int, wins_b: int) -> Tuple[float, float]:
    """Match points for (A, B): the majority takes 1, a tie splits 0.5/0.5."""
    if wins_a > wins_b:
        return 1.0, 0.0
    if wins_b > wins_a:
        return 0.0, 1.0
    return 0.5, 0.5


def parse_hole_submission(codes: Iterable, holes: Optional[str]) -> Dict[int, str]:
    """Validate a submitted hole sheet and map it onto hole numbers.

    ``codes`` is ordered from the first hole of the variant and must hold
    exactly one entry per hole. Empty entries are unplayed and not stored.
    """
    if holes not in HOLE_VARIANTS:
        raise ValidationError(f"Unknown hole variant '{holes}'")
    if isinstance(codes, (str, bytes)) or not isinstance(codes, (list, tuple)):
        raise ValidationError('holes must be a list of outcome codes')
    first, last = hole_range(holes)
    expected = last - first + 1
    if len(codes) != expected:
        raise ValidationError(f"Expected {expected} hole results for a '{holes}' match, got {len(codes)}")

    results = {}
    for offset, code in enumerate(codes):
        if code is None:
            continue
        if not isinstance(code, str):
            raise ValidationError(f"Invalid outcome for hole {first + offset}: {code!r}")
        code = code.strip().upper()
        if code == OUTCOME_UNPLAYED:
            continue
        if code not in OUTCOMES:
            raise ValidationError(f"Invalid outcome for hole {first + offset}: {code!r}")
        results[first + offset] = code
    return results


def hole_sheet(hole_results: Dict[int, str], holes: Optional[str]) -> List[str]:
    """Ordered outcome list for the variant, '' where a hole is unplayed."""
    first, last = hole_range(holes)
    return [hole_results.get(h, OUTCOME_UNPLAYED) for h in range(first, last + 1)]
