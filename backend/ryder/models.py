from ryder import db

# Match lifecycle
STATUS_PREPARED = 'prepared'
STATUS_RUNNING = 'running'
STATUS_COMPLETED = 'completed'
STATUSES = (STATUS_PREPARED, STATUS_RUNNING, STATUS_COMPLETED)

FORMATS = ('singles', 'scramble', 'foursome')
FORMAT_ALIASES = {'texas_scramble': 'scramble'}

# Hole-count variant -> (first hole, last hole)
HOLE_VARIANTS = {
    '18': (1, 18),
    'front9': (1, 9),
    'back9': (10, 18),
}
DEFAULT_HOLES = '18'

SIDE_A = 'A'
SIDE_B = 'B'


class Team(db.Model):
    __tablename__ = 'team'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(64), nullable=False)
    color = db.Column(db.String(32), nullable=False, default='')
    players = db.relationship('Player', back_populates='team')

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'color': self.color or '',
        }


class Player(db.Model):
    __tablename__ = 'player'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(64), nullable=False)
    email = db.Column(db.String(120), nullable=True)
    hcp = db.Column(db.Float, nullable=True)
    team_id = db.Column(db.Integer, db.ForeignKey('team.id'), nullable=True)
    team = db.relationship('Team', back_populates='players')

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email or '',
            'hcp': self.hcp,
            'team_id': self.team_id,
            'team_name': self.team.name if self.team else '',
        }


class Match(db.Model):
    __tablename__ = 'match'
    id = db.Column(db.Integer, primary_key=True)
    team_a_id = db.Column(db.Integer, db.ForeignKey('team.id'), nullable=False)
    team_b_id = db.Column(db.Integer, db.ForeignKey('team.id'), nullable=False)
    format = db.Column(db.String(32), nullable=False, default='singles')
    status = db.Column(db.String(32), nullable=False, default=STATUS_PREPARED)
    holes = db.Column(db.String(16), nullable=False, default=DEFAULT_HOLES)
    start_time = db.Column(db.String(32), nullable=True)

    team_a = db.relationship('Team', foreign_keys=[team_a_id])
    team_b = db.relationship('Team', foreign_keys=[team_b_id])
    match_players = db.relationship('MatchPlayer', backref='match', cascade='all, delete-orphan')
    hole_results = db.relationship('HoleResult', backref='match', cascade='all, delete-orphan')

    def players_on(self, side):
        return [mp.player for mp in self.match_players if mp.team_side == side and mp.player]

    def to_dict(self):
        def side(team, players):
            return {
                'id': team.id if team else None,
                'name': team.name if team else '',
                'color': (team.color or '') if team else '',
                'players': [{'id': p.id, 'name': p.name, 'hcp': p.hcp} for p in players],
            }

        return {
            'id': self.id,
            'format': self.format,
            'holes': self.holes or DEFAULT_HOLES,
            'status': self.status,
            'start_time': self.start_time or '',
            'team_a': side(self.team_a, self.players_on(SIDE_A)),
            'team_b': side(self.team_b, self.players_on(SIDE_B)),
        }


class MatchPlayer(db.Model):
    __tablename__ = 'match_player'
    match_id = db.Column(db.Integer, db.ForeignKey('match.id'), primary_key=True)
    player_id = db.Column(db.Integer, db.ForeignKey('player.id'), primary_key=True)
    team_side = db.Column(db.String(1), nullable=False)  # 'A' or 'B'
    player = db.relationship('Player')


class HoleResult(db.Model):
    __tablename__ = 'hole_result'
    match_id = db.Column(db.Integer, db.ForeignKey('match.id'), primary_key=True)
    hole = db.Column(db.Integer, primary_key=True)
    result = db.Column(db.String(2), nullable=False)
