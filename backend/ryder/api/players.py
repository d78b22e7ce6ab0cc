from flask import Blueprint, current_app, jsonify, request

from ryder import db
from ryder.api import json_body, optional_float, require_int, require_str
from ryder.errors import NotFoundError, ValidationError
from ryder.models import MatchPlayer, Player, Team
from ryder.services.live import notifier

players = Blueprint('players', __name__)


def _player_fields(data):
    name = require_str(data.get('name'), 'name')
    if not name:
        raise ValidationError('Player name is required')
    team_id = data.get('team_id')
    if team_id is not None:
        team_id = require_int(team_id, 'team_id')
        if db.session.get(Team, team_id) is None:
            raise ValidationError(f'team_id {team_id} refers to an unknown team')
    return {
        'name': name,
        'email': require_str(data.get('email'), 'email'),
        'hcp': optional_float(data.get('hcp'), 'hcp'),
        'team_id': team_id,
    }


@players.route('/player/add', methods=['POST'])
def add_player():
    player = Player(**_player_fields(json_body()))
    db.session.add(player)
    db.session.commit()
    current_app.logger.info(f"[player-add] player={player.id} team={player.team_id}")
    notifier.notify('player-add')
    return jsonify(player.to_dict()), 201


@players.route('/player/edit', methods=['POST'])
def edit_player():
    data = json_body()
    player = db.session.get(Player, require_int(data.get('id'), 'id'))
    if player is None:
        raise NotFoundError('Player not found')
    for field, value in _player_fields(data).items():
        setattr(player, field, value)
    db.session.commit()
    notifier.notify('player-edit')
    return jsonify(player.to_dict())


@players.route('/player/remove', methods=['POST', 'DELETE'])
def remove_player():
    player_id = require_int(request.args.get('id'), 'id')
    player = db.session.get(Player, player_id)
    if player is None:
        raise NotFoundError('Player not found')
    MatchPlayer.query.filter_by(player_id=player_id).delete()
    db.session.delete(player)
    db.session.commit()
    current_app.logger.info(f"[player-remove] player={player_id}")
    notifier.notify('player-remove')
    return '', 204


@players.route('/player/list', methods=['GET'])
def list_players():
    roster = Player.query.order_by(Player.hcp, Player.name).all()
    return jsonify({'players': [p.to_dict() for p in roster]})
