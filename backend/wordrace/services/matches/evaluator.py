from typing import Any, Dict

from flask import current_app

from wordrace import db, socketio
from wordrace.models import Match


def normalize_guess(text: str) -> str:
    # str.strip whitespace set: U+FEFF is kept, U+001C-U+001F are removed
    return text.upper().strip()


def evaluate_guess(guess: Dict[str, Any], params: Dict[str, str]) -> bool:
    """Check a newly created guess against its match's current word.

    ``guess`` is the created record's data (``guess``, ``playerId``) and
    ``params`` the path parameters (``matchId``). A correct guess marks the
    match finished with the guesser as winner. Returns True when the match
    row was written.

    With MATCH_FINISH_ONCE the update is guarded on ``status = 'waiting'``
    in a single UPDATE statement, so concurrent correct guesses cannot
    overwrite the first winner. Without it the update is unconditional and
    the last write wins.
    """
    match_id = params['matchId']
    player_id = guess.get('playerId')
    match = db.session.get(Match, match_id)
    current_word = match.current_word if match else None
    if current_word is None:
        current_app.logger.warning(f"[guess-orphan] match={match_id} player={player_id} no match or word")
        return False

    if normalize_guess(guess['guess']) != current_word:
        current_app.logger.info(f"[guess-miss] match={match_id} player={player_id}")
        return False

    query = Match.query.filter_by(id=match_id)
    if current_app.config.get('MATCH_FINISH_ONCE', True):
        query = query.filter_by(status='waiting')
    updated = query.update(
        {'status': 'finished', 'winner_id': player_id},
        synchronize_session=False,
    )
    db.session.commit()

    if not updated:
        current_app.logger.info(f"[guess-stale] match={match_id} player={player_id} already finished")
        return False

    current_app.logger.info(f"[guess-correct] match={match_id} winner={player_id}")
    socketio.emit('state_update', {'match_id': match_id}, to=f"match:{match_id}", namespace='/ws')
    return True
