from board.auth.dependencies import authorize
from conftest import register_and_login


def test_health_check(client) -> None:
    response = client.get('/health')

    assert response.status_code == 200
    assert response.json() == {'status': 'Server is healthy'}


def test_register_then_duplicate_returns_400(client) -> None:
    first = client.post('/api/register', json={'username': 'alice', 'password': 'pw123'})
    second = client.post('/api/register', json={'username': 'alice', 'password': 'pw999'})

    assert first.status_code == 200
    assert first.json() == {'message': 'User created'}
    assert second.status_code == 400
    assert second.json() == {'message': 'Username already exists'}


def test_register_missing_fields_returns_400(client) -> None:
    response = client.post('/api/register', json={'username': 'alice'})

    assert response.status_code == 400
    assert response.json() == {'message': 'Missing fields'}


def test_register_with_non_json_body_returns_400(client) -> None:
    response = client.post('/api/register', content='username=alice', headers={'Content-Type': 'text/plain'})

    assert response.status_code == 400


def test_login_returns_token_and_public_user(client) -> None:
    client.post('/api/register', json={'username': 'alice', 'password': 'pw123'})

    response = client.post('/api/login', json={'username': 'alice', 'password': 'pw123'})

    body = response.json()
    assert response.status_code == 200
    assert body['user'] == {'username': 'alice'}
    assert set(body) == {'token', 'user'}
    assert authorize(body['token']) == 'alice'


def test_login_unknown_user_returns_400(client) -> None:
    response = client.post('/api/login', json={'username': 'ghost', 'password': 'pw123'})

    assert response.status_code == 400
    assert response.json() == {'message': 'User not found'}


def test_login_wrong_password_returns_403(client) -> None:
    client.post('/api/register', json={'username': 'alice', 'password': 'pw123'})

    response = client.post('/api/login', json={'username': 'alice', 'password': 'pw1234'})

    assert response.status_code == 403
    assert response.json() == {'message': 'Invalid password'}


def test_me_returns_username_for_valid_token(client) -> None:
    headers = register_and_login(client, 'alice', 'pw123')

    response = client.get('/api/me', headers=headers)

    assert response.status_code == 200
    assert response.json() == {'username': 'alice'}


def test_me_without_token_returns_401(client) -> None:
    assert client.get('/api/me').status_code == 401


def test_me_with_bad_token_returns_403(client) -> None:
    response = client.get('/api/me', headers={'Authorization': 'Bearer nope'})

    assert response.status_code == 403
    assert response.json() == {'message': 'Invalid token'}
