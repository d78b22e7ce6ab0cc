"""Standings domain services: match scoring, status and aggregation.

Pure logic imported by the HTTP routes. Nothing here touches the session
directly; reads and writes go through the store passed in.
"""

from .aggregator import aggregate, build_snapshot
from .scoring import hole_sheet, parse_hole_submission, points, score_match
from .status import normalize_status, set_status

__all__ = [
    'aggregate',
    'build_snapshot',
    'hole_sheet',
    'normalize_status',
    'parse_hole_submission',
    'points',
    'score_match',
    'set_status',
]
