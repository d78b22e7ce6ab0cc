from flask import Blueprint, current_app, jsonify, request
from sqlalchemy import or_

from ryder import db
from ryder.api import json_body, require_int, require_str
from ryder.errors import ConflictError, NotFoundError, ValidationError
from ryder.models import Match, Player, Team
from ryder.services.live import notifier

teams = Blueprint('teams', __name__)


def _team_or_404(team_id):
    team = db.session.get(Team, team_id)
    if team is None:
        raise NotFoundError(f'Team {team_id} not found')
    return team


def _name(data):
    name = require_str(data.get('name'), 'name')
    if not name:
        raise ValidationError('Team name is required')
    return name


@teams.route('/team/add', methods=['POST'])
def add_team():
    data = json_body()
    team = Team(name=_name(data), color=require_str(data.get('color'), 'color'))
    db.session.add(team)
    db.session.commit()
    current_app.logger.info(f"[team-add] team={team.id} name={team.name}")
    notifier.notify('team-add')
    return jsonify(team.to_dict()), 201


@teams.route('/team/edit', methods=['POST'])
def edit_team():
    data = json_body()
    team = _team_or_404(require_int(data.get('id'), 'id'))
    team.name = _name(data)
    team.color = require_str(data.get('color'), 'color')
    db.session.commit()
    notifier.notify('team-edit')
    return jsonify(team.to_dict())


@teams.route('/team/remove', methods=['POST', 'DELETE'])
def remove_team():
    team_id = require_int(request.args.get('id'), 'id')
    team = _team_or_404(team_id)
    in_use = Match.query.filter(or_(Match.team_a_id == team_id, Match.team_b_id == team_id)).count()
    if in_use:
        raise ConflictError(f'Team {team_id} still plays in {in_use} match(es)')
    for player in team.players:
        player.team_id = None
    db.session.delete(team)
    db.session.commit()
    current_app.logger.info(f"[team-remove] team={team_id}")
    notifier.notify('team-remove')
    return '', 204


@teams.route('/team/list', methods=['GET'])
def list_teams():
    return jsonify({'teams': [t.to_dict() for t in Team.query.order_by(Team.name).all()]})


@teams.route('/team/assign', methods=['POST'])
def assign_players():
    """Make ``player_ids`` the full roster of a team."""
    data = json_body()
    team = _team_or_404(require_int(data.get('team_id'), 'team_id'))
    ids = data.get('player_ids') or []
    if not isinstance(ids, list):
        raise ValidationError('player_ids must be a list')
    ids = {require_int(pid, 'player_ids') for pid in ids}
    players = Player.query.filter(Player.id.in_(ids)).all() if ids else []
    if len(players) != len(ids):
        raise ValidationError('player_ids contains unknown players')
    for player in list(team.players):
        if player.id not in ids:
            player.team_id = None
    for player in players:
        player.team_id = team.id
    db.session.commit()
    notifier.notify('team-assign')
    return '', 204


@teams.route('/team/players', methods=['GET'])
def list_team_players():
    team = _team_or_404(require_int(request.args.get('team_id'), 'team_id'))
    roster = Player.query.filter_by(team_id=team.id).order_by(Player.name).all()
    return jsonify({'players': [p.to_dict() for p in roster]})
