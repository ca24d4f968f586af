"""Created-document triggers.

Handlers subscribe to a path pattern such as
``matches/{matchId}/guesses/{guessId}``; whenever a record is appended at a
matching path they are called with the record data and the path params.
"""
import re
from typing import Any, Callable, Dict, List, Pattern, Tuple

from wordrace import socketio

TriggerHandler = Callable[[Dict[str, Any], Dict[str, str]], Any]

_created_triggers: List[Tuple[str, Pattern[str], TriggerHandler]] = []

GUESS_PATH = 'matches/{matchId}/guesses/{guessId}'


def _compile_pattern(pattern: str) -> Pattern[str]:
    parts = []
    for segment in pattern.strip('/').split('/'):
        m = re.fullmatch(r'\{(\w+)\}', segment)
        parts.append(f"(?P<{m.group(1)}>[^/]+)" if m else re.escape(segment))
    return re.compile('/'.join(parts))


def on_document_created(pattern: str):
    """Register the decorated function for records created under ``pattern``."""
    def decorator(handler: TriggerHandler) -> TriggerHandler:
        if not any(p == pattern and h is handler for p, _, h in _created_triggers):
            _created_triggers.append((pattern, _compile_pattern(pattern), handler))
        return handler
    return decorator


def fire_document_created(path: str, data: Dict[str, Any]) -> int:
    """Call every handler whose pattern matches ``path``; returns how many ran."""
    fired = 0
    for _, regex, handler in list(_created_triggers):
        m = regex.fullmatch(path.strip('/'))
        if not m:
            continue
        handler(dict(data), m.groupdict())
        fired += 1
    return fired


def dispatch_document_created(app, path: str, data: Dict[str, Any]) -> None:
    """Deliver a created-document event without waiting for the handlers.

    Runs inline in TESTING mode (unless ENABLE_ASYNC_TRIGGERS_IN_TESTS) so
    tests can assert on the outcome right after the request.
    """
    def _worker(event_path: str, event_data: Dict[str, Any]):
        with app.app_context():
            try:
                fired = fire_document_created(event_path, event_data)
            except Exception:
                app.logger.exception(f"[trigger-error] path={event_path}")
                raise
            app.logger.info(f"[trigger-fire] path={event_path} handlers={fired}")

    if app.config.get('TESTING') and not app.config.get('ENABLE_ASYNC_TRIGGERS_IN_TESTS'):
        _worker(path, data)
    else:
        socketio.start_background_task(_worker, path, data)


def register_document_triggers() -> None:
    from wordrace.services.matches.evaluator import evaluate_guess
    on_document_created(GUESS_PATH)(evaluate_guess)
