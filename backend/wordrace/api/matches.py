from flask import Blueprint, jsonify, request, current_app
from flask_login import login_required, current_user
from wordrace import db
from wordrace.models import Match, Guess
from wordrace.services.matches.creator import create_match as svc_create_match
from wordrace.triggers import dispatch_document_created


matches = Blueprint('matches', __name__)


@matches.route('/create', methods=['POST'])
def create_match():
    # Identity check happens in the service so nothing is written without it
    host_id = current_user.get_id() if current_user.is_authenticated else None
    match_id = svc_create_match(host_id)
    return jsonify({'matchId': match_id}), 201


@matches.route('/<string:match_id>', methods=['GET'])
def get_match(match_id):
    match = db.get_or_404(Match, match_id)
    return jsonify(match.to_dict())


@matches.route('/<string:match_id>/guesses', methods=['POST'])
@login_required
def submit_guess(match_id):
    data = request.get_json(silent=True) or {}
    text = data.get('guess')
    if not isinstance(text, str) or not text.strip():
        return jsonify({'error': 'Guess is required'}), 400

    new_guess = Guess(match_id=match_id, guess=text, player_id=current_user.get_id())
    db.session.add(new_guess)
    db.session.flush()
    path, payload = new_guess.path, new_guess.to_dict()
    db.session.commit()

    # Evaluation is a side effect of the append; the caller gets no verdict
    dispatch_document_created(current_app._get_current_object(), path, payload)
    return jsonify({'guessId': payload['id']}), 201
