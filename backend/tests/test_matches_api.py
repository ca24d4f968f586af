import pytest

from wordrace.models import Match


def _create(c):
    res = c.post('/api/matches/create')
    assert res.status_code == 201
    return res.get_json()['matchId']


def test_create_match_requires_login(flask_app, client):
    res = client.post('/api/matches/create')
    assert res.status_code == 401
    assert res.get_json() == {
        'error': {'status': 'UNAUTHENTICATED', 'message': 'User must be logged in'}
    }
    with flask_app.app_context():
        assert Match.query.count() == 0


def test_create_match_defaults(login_client):
    host = login_client('host')
    match_id = _create(host)
    state = host.get(f'/api/matches/{match_id}').get_json()
    assert state['id'] == match_id
    assert state['hostId'] == host.user_id
    assert state['status'] == 'waiting'
    assert state['currentWord'] == 'FLUTTER'
    assert state['timeLeft'] == 60
    assert state['createdAt']
    assert 'winnerId' not in state


def test_each_create_makes_a_new_match(flask_app, login_client):
    host = login_client('host')
    first = _create(host)
    second = _create(host)
    assert first != second
    with flask_app.app_context():
        assert Match.query.count() == 2


def test_get_unknown_match_is_404(client):
    assert client.get('/api/matches/does-not-exist').status_code == 404


@pytest.mark.parametrize('text', ['flutter', ' Flutter ', 'FLUTTER'])
def test_correct_guess_finishes_match(login_client, text):
    host = login_client('host')
    player = login_client('player')
    match_id = _create(host)

    res = player.post(f'/api/matches/{match_id}/guesses', json={'guess': text})
    assert res.status_code == 201
    assert res.get_json()['guessId']

    state = player.get(f'/api/matches/{match_id}').get_json()
    assert state['status'] == 'finished'
    assert state['winnerId'] == player.user_id


def test_wrong_guess_leaves_match_waiting(login_client):
    host = login_client('host')
    player = login_client('player')
    match_id = _create(host)

    res = player.post(f'/api/matches/{match_id}/guesses', json={'guess': 'FLUTTR'})
    assert res.status_code == 201

    state = player.get(f'/api/matches/{match_id}').get_json()
    assert state['status'] == 'waiting'
    assert 'winnerId' not in state


def test_guess_requires_login(login_client, client):
    match_id = _create(login_client('host'))
    res = client.post(f'/api/matches/{match_id}/guesses', json={'guess': 'FLUTTER'})
    assert res.status_code == 401
    assert res.get_json()['error']['status'] == 'UNAUTHENTICATED'


def test_guess_requires_text(login_client):
    host = login_client('host')
    match_id = _create(host)
    res = host.post(f'/api/matches/{match_id}/guesses', json={'guess': '   '})
    assert res.status_code == 400
    assert res.get_json() == {'error': 'Guess is required'}


def test_guess_on_missing_match_is_stored_without_update(flask_app, login_client):
    player = login_client('player')
    res = player.post('/api/matches/nope/guesses', json={'guess': 'FLUTTER'})
    assert res.status_code == 201
    with flask_app.app_context():
        assert Match.query.count() == 0
    assert player.get('/api/matches/nope').status_code == 404


def test_first_correct_guess_wins(login_client):
    host = login_client('host')
    p1 = login_client('p1')
    p2 = login_client('p2')
    match_id = _create(host)

    p1.post(f'/api/matches/{match_id}/guesses', json={'guess': 'flutter'})
    p2.post(f'/api/matches/{match_id}/guesses', json={'guess': 'FLUTTER'})

    state = host.get(f'/api/matches/{match_id}').get_json()
    assert state['status'] == 'finished'
    assert state['winnerId'] == p1.user_id


def test_unguarded_update_lets_last_correct_guess_win(flask_app, login_client):
    flask_app.config['MATCH_FINISH_ONCE'] = False
    host = login_client('host')
    p1 = login_client('p1')
    p2 = login_client('p2')
    match_id = _create(host)

    p1.post(f'/api/matches/{match_id}/guesses', json={'guess': 'flutter'})
    p2.post(f'/api/matches/{match_id}/guesses', json={'guess': 'FLUTTER'})

    state = host.get(f'/api/matches/{match_id}').get_json()
    assert state['status'] == 'finished'
    assert state['winnerId'] == p2.user_id


def test_logout_revokes_identity(login_client):
    host = login_client('host')
    assert host.get('/me').get_json()['username'] == 'host'
    assert host.get('/logout').status_code == 200
    assert host.post('/api/matches/create').status_code == 401
