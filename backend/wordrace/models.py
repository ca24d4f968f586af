from wordrace import db, bcrypt
from flask_login import UserMixin
import uuid

class User(UserMixin, db.Model):
    __tablename__ = 'user'
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(64), unique=True, nullable=False, index=True)
    password_hash = db.Column(db.String(256), nullable=False)

    def set_password(self, password):
        self.password_hash = bcrypt.generate_password_hash(password).decode('utf-8')

    def check_password(self, password):
        if not password:
            return False
        return bcrypt.check_password_hash(self.password_hash, password)

    def to_dict(self):
        return {
            'id': self.id,
            'username': self.username,
        }

def generate_document_id():
    """Opaque id for a new match or guess, allocated by the store."""
    return uuid.uuid4().hex

class Match(db.Model):
    __tablename__ = 'match'
    id = db.Column(db.String(32), primary_key=True, default=generate_document_id)
    host_id = db.Column(db.String(64), nullable=False)
    status = db.Column(db.String(16), nullable=False, default='waiting') # waiting, finished
    created_at = db.Column(db.DateTime, nullable=False, server_default=db.func.now())
    current_word = db.Column(db.String(64), nullable=False)
    time_left = db.Column(db.Integer, nullable=False, default=60)
    winner_id = db.Column(db.String(64), nullable=True)

    def to_dict(self):
        data = {
            'id': self.id,
            'hostId': self.host_id,
            'status': self.status,
            'createdAt': self.created_at.isoformat() if self.created_at else None,
            'currentWord': self.current_word,
            'timeLeft': self.time_left,
        }
        if self.winner_id is not None:
            data['winnerId'] = self.winner_id
        return data

class Guess(db.Model):
    __tablename__ = 'guess'
    id = db.Column(db.String(32), primary_key=True, default=generate_document_id)
    # Parent key only; a guess may outlive or predate its match like a child document
    match_id = db.Column(db.String(32), nullable=False, index=True)
    guess = db.Column(db.String(256), nullable=False)
    player_id = db.Column(db.String(64), nullable=False)

    @property
    def path(self):
        return f"matches/{self.match_id}/guesses/{self.id}"

    def to_dict(self):
        return {
            'id': self.id,
            'guess': self.guess,
            'playerId': self.player_id,
        }
