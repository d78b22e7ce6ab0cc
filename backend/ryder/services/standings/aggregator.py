import logging
from typing import Callable, Dict, Iterable, List

from ryder.errors import PersistenceError
from ryder.models import STATUS_COMPLETED, STATUS_RUNNING, STATUSES
from .scoring import hole_sheet, points, score_match
from .status import normalize_status

log = logging.getLogger(__name__)


def aggregate(teams: Iterable[dict], matches: Iterable[dict],
              hole_results_for: Callable[[int], Dict[int, str]], logger=None) -> dict:
    """Roll every match up into team standings.

    Completed matches award finalized points, which are also part of the
    projection. Running matches only add to the projection, using the
    current (possibly partial) tally. Prepared matches award nothing.

    A match whose hole results cannot be read contributes no points but is
    still listed in its status bucket.
    """
    logger = logger or log
    teams = [dict(t) for t in teams]
    finalized: Dict[int, float] = {t['id']: 0.0 for t in teams}
    projected: Dict[int, float] = {t['id']: 0.0 for t in teams}
    grouped: Dict[str, List[dict]] = {status: [] for status in STATUSES}

    for match in matches:
        status = normalize_status(match.get('status'))
        ta, tb = match.get('team_a_id'), match.get('team_b_id')
        record = dict(match, status=status, score_a=0, score_b=0, score_text=None,
                      points_a=0.0, points_b=0.0, remaining=None, hole_results=[])
        grouped[status].append(record)

        try:
            results = hole_results_for(match['id'])
        except PersistenceError as exc:
            logger.warning(f"[standings-skip] match={match['id']} excluded from points: {exc}")
            continue

        score = score_match(results, match.get('holes'),
                            match.get('team_a_name', 'A'), match.get('team_b_name', 'B'))
        record.update(score_a=score.wins_a, score_b=score.wins_b, score_text=score.text,
                      remaining=score.remaining, hole_results=hole_sheet(results, match.get('holes')))

        if status not in (STATUS_COMPLETED, STATUS_RUNNING):
            continue
        pa, pb = points(score.wins_a, score.wins_b)
        record.update(points_a=pa, points_b=pb)
        projected[ta] = projected.get(ta, 0.0) + pa
        projected[tb] = projected.get(tb, 0.0) + pb
        if status == STATUS_COMPLETED:
            finalized[ta] = finalized.get(ta, 0.0) + pa
            finalized[tb] = finalized.get(tb, 0.0) + pb

    for team in teams:
        team['score'] = finalized.get(team['id'], 0.0)

    return {
        'teams': teams,
        'matches': grouped,
        'projectedScores': projected,
    }


def build_snapshot(store, logger=None) -> dict:
    """Standings snapshot from a store's current rows."""
    return aggregate(store.list_teams(), store.list_matches(), store.hole_results, logger=logger)
