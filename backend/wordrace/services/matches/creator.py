import random
from typing import Optional

from flask import current_app

from wordrace import db
from wordrace.errors import Unauthenticated
from wordrace.models import Match


def pick_word() -> str:
    """Choose the target word for a new match.

    Uses MATCH_WORDS (comma-separated) when configured, otherwise the
    fixed MATCH_PLACEHOLDER_WORD. Words are stored trimmed and uppercased
    so they compare equal to a normalized guess.
    """
    cfg = current_app.config
    words = [w.strip().upper() for w in (cfg.get('MATCH_WORDS') or '').split(',') if w.strip()]
    if words:
        return random.choice(words)
    return (cfg.get('MATCH_PLACEHOLDER_WORD') or 'FLUTTER').strip().upper()


def create_match(host_id: Optional[str]) -> str:
    """Create a waiting match hosted by ``host_id`` and return its id.

    Raises Unauthenticated without writing anything when there is no
    caller identity. Every call creates a new record.
    """
    if not host_id:
        raise Unauthenticated('User must be logged in')

    match = Match(
        host_id=host_id,
        status='waiting',
        current_word=pick_word(),
        time_left=int(current_app.config.get('MATCH_TIME_LIMIT_SEC', 60)),
    )
    db.session.add(match)
    db.session.commit()
    current_app.logger.info(f"[match-create] match={match.id} host={host_id}")
    return match.id
