from flask import Blueprint, current_app, jsonify, request

from ryder import db
from ryder.api import json_body, require_int, require_str
from ryder.errors import NotFoundError, ValidationError
from ryder.models import (
    FORMAT_ALIASES, FORMATS, HOLE_VARIANTS, SIDE_A, SIDE_B,
    STATUS_PREPARED, Match, MatchPlayer, Player, Team,
)
from ryder.services.live import notifier
from ryder.services.standings import hole_sheet, parse_hole_submission, set_status
from ryder.services.store import store

matches = Blueprint('matches', __name__)


def _team_or_400(value, field):
    team = db.session.get(Team, require_int(value, field))
    if team is None:
        raise ValidationError(f'{field} refers to an unknown team')
    return team


def _format(value):
    if not isinstance(value, str):
        raise ValidationError('format must be a string')
    fmt = FORMAT_ALIASES.get(value, value)
    if fmt not in FORMATS:
        raise ValidationError(f"Unknown format {value!r}; expected one of {', '.join(FORMATS)}")
    return fmt


def _holes(value):
    holes = str(value) if value is not None else '18'
    if holes not in HOLE_VARIANTS:
        raise ValidationError(f"Unknown holes {value!r}; expected one of {', '.join(HOLE_VARIANTS)}")
    return holes


def _player_ids(data, key):
    ids = data.get(key) or []
    if not isinstance(ids, list):
        raise ValidationError(f'{key} must be a list of player ids')
    ids = [require_int(pid, key) for pid in ids]
    known = {p.id for p in Player.query.filter(Player.id.in_(ids)).all()} if ids else set()
    missing = [pid for pid in ids if pid not in known]
    if missing:
        raise ValidationError(f'{key} contains unknown players: {missing}')
    return ids


def _apply_lineup(match, players_a, players_b):
    if set(players_a) & set(players_b):
        raise ValidationError('A player cannot play on both sides of a match')
    match.match_players = (
        [MatchPlayer(player_id=pid, team_side=SIDE_A) for pid in players_a]
        + [MatchPlayer(player_id=pid, team_side=SIDE_B) for pid in players_b]
    )


def _match_or_404(match_id):
    match = db.session.get(Match, match_id)
    if match is None:
        raise NotFoundError(f'Match {match_id} not found')
    return match


@matches.route('/match/add', methods=['POST'])
@matches.route('/matches', methods=['POST'])
def add_match():
    data = json_body()
    team_a = _team_or_400(data.get('team_a'), 'team_a')
    team_b = _team_or_400(data.get('team_b'), 'team_b')
    if team_a.id == team_b.id:
        raise ValidationError('A match needs two different teams')
    match = Match(
        team_a_id=team_a.id,
        team_b_id=team_b.id,
        format=_format(require_str(data.get('format'), 'format') or 'singles'),
        holes=_holes(data.get('holes')),
        status=STATUS_PREPARED,
        start_time=require_str(data.get('start_time'), 'start_time'),
    )
    _apply_lineup(match, _player_ids(data, 'players_a'), _player_ids(data, 'players_b'))
    db.session.add(match)
    db.session.commit()
    current_app.logger.info(f"[match-add] match={match.id} {team_a.name} v {team_b.name} holes={match.holes}")
    notifier.notify('match-add')
    return jsonify(match.to_dict()), 201


@matches.route('/match/edit', methods=['POST'])
def edit_match():
    data = json_body()
    match = _match_or_404(require_int(data.get('id'), 'id'))
    if 'team_a' in data:
        match.team_a_id = _team_or_400(data['team_a'], 'team_a').id
    if 'team_b' in data:
        match.team_b_id = _team_or_400(data['team_b'], 'team_b').id
    if match.team_a_id == match.team_b_id:
        raise ValidationError('A match needs two different teams')
    if 'format' in data:
        match.format = _format(data['format'])
    if 'holes' in data:
        # Stored results outside the new range stay in place; scoring ignores them
        match.holes = _holes(data['holes'])
    if 'start_time' in data:
        match.start_time = require_str(data.get('start_time'), 'start_time')
    if 'players_a' in data or 'players_b' in data:
        _apply_lineup(
            match,
            _player_ids(data, 'players_a') if 'players_a' in data else [p.id for p in match.players_on(SIDE_A)],
            _player_ids(data, 'players_b') if 'players_b' in data else [p.id for p in match.players_on(SIDE_B)],
        )
    db.session.commit()
    notifier.notify('match-edit')
    return jsonify(match.to_dict())


@matches.route('/match/remove', methods=['POST', 'DELETE'])
def remove_match():
    match_id = require_int(request.args.get('id'), 'id')
    db.session.delete(_match_or_404(match_id))
    db.session.commit()
    current_app.logger.info(f"[match-remove] match={match_id}")
    notifier.notify('match-remove')
    return '', 204


@matches.route('/match/list', methods=['GET'])
def list_matches():
    rows = Match.query.order_by(Match.start_time, Match.id).all()
    return jsonify({'matches': [m.to_dict() for m in rows]})


@matches.route('/match', methods=['GET'])
def get_match():
    match = _match_or_404(require_int(request.args.get('id'), 'id'))
    return jsonify({'match': match.to_dict()})


@matches.route('/match/holescore', methods=['POST'])
def save_hole_results():
    """Replace a match's hole results with the submitted sheet.

    ``holes`` is ordered from the first hole of the match's variant and has
    one entry per hole: "A", "B", "AS" or "" for unplayed.
    """
    data = json_body()
    match_id = require_int(data.get('match_id'), 'match_id')
    match = store.get_match(match_id)
    results = parse_hole_submission(data.get('holes'), match.holes)
    store.replace_hole_results(match_id, results)
    current_app.logger.info(f"[holes-saved] match={match_id} holes={len(results)}")
    notifier.notify('holescore')
    return '', 204


@matches.route('/match/holescore', methods=['GET'])
def load_hole_results():
    match_id = require_int(request.args.get('match_id'), 'match_id')
    match = store.get_match(match_id)
    return jsonify({'holes': hole_sheet(store.hole_results(match_id), match.holes)})


@matches.route('/match/status', methods=['POST'])
def set_match_status():
    data = json_body()
    match_id = require_int(data.get('match_id'), 'match_id')
    status = set_status(store, match_id, data.get('status'),
                        strict=current_app.config.get('STRICT_STATUS_TRANSITIONS', False))
    current_app.logger.info(f"[status] match={match_id} status={status}")
    notifier.notify('status')
    return '', 204
