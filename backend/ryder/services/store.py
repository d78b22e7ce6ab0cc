"""Data access for the standings engine.

Services take a store instead of reaching for ``db.session`` so they can be
driven from tests with an in-memory fake exposing the same methods.
"""

from typing import Dict, List

from sqlalchemy.exc import SQLAlchemyError

from ryder import db
from ryder.errors import NotFoundError, PersistenceError
from ryder.models import SIDE_A, SIDE_B, HoleResult, Match, Team


class SqlStore:
    """Store backed by the Flask-SQLAlchemy session."""

    def list_teams(self) -> List[dict]:
        return [t.to_dict() for t in Team.query.order_by(Team.name).all()]

    def list_matches(self) -> List[dict]:
        matches = Match.query.order_by(Match.start_time, Match.id).all()
        return [self._match_record(m) for m in matches]

    def get_match(self, match_id: int) -> Match:
        match = db.session.get(Match, match_id)
        if match is None:
            raise NotFoundError(f"Match {match_id} not found")
        return match

    def hole_results(self, match_id: int) -> Dict[int, str]:
        try:
            rows = HoleResult.query.filter_by(match_id=match_id).all()
        except SQLAlchemyError as exc:
            db.session.rollback()
            raise PersistenceError(f"Could not load hole results for match {match_id}") from exc
        return {r.hole: r.result for r in rows}

    def replace_hole_results(self, match_id: int, results: Dict[int, str]) -> None:
        """Swap the stored hole results for ``results`` in one transaction."""
        try:
            HoleResult.query.filter_by(match_id=match_id).delete()
            for hole, outcome in sorted(results.items()):
                db.session.add(HoleResult(match_id=match_id, hole=hole, result=outcome))
            db.session.commit()
        except SQLAlchemyError as exc:
            db.session.rollback()
            raise PersistenceError(f"Could not save hole results for match {match_id}") from exc

    def set_status(self, match_id: int, status: str) -> None:
        match = self.get_match(match_id)
        try:
            match.status = status
            db.session.commit()
        except SQLAlchemyError as exc:
            db.session.rollback()
            raise PersistenceError(f"Could not update status for match {match_id}") from exc

    @staticmethod
    def _match_record(match: Match) -> dict:
        def players(side):
            return [{'id': p.id, 'name': p.name, 'hcp': p.hcp} for p in match.players_on(side)]

        team_a, team_b = match.team_a, match.team_b
        return {
            'id': match.id,
            'team_a_id': match.team_a_id,
            'team_b_id': match.team_b_id,
            'team_a_name': team_a.name if team_a else '',
            'team_b_name': team_b.name if team_b else '',
            'team_a_color': (team_a.color or '') if team_a else '',
            'team_b_color': (team_b.color or '') if team_b else '',
            'format': match.format,
            'holes': match.holes,
            'status': match.status,
            'start_time': match.start_time or '',
            'players_a': players(SIDE_A),
            'players_b': players(SIDE_B),
        }


store = SqlStore()
