from fastapi.testclient import TestClient

from backend.auth import jwt_handler


def login(client, user: str = 'admin', password: str = 'secret'):
    return client.post('/api/auth/login', json={'user': user, 'password': password})


def test_login_sets_secure_cross_site_cookie(client) -> None:
    response = login(client)

    assert response.status_code == 200
    assert response.json() == {'user': 'admin', 'message': 'Login successful'}
    set_cookie = response.headers['set-cookie'].lower()
    assert set_cookie.startswith('token=')
    assert 'secure' in set_cookie
    assert 'samesite=none' in set_cookie


def test_login_rejects_wrong_password(client) -> None:
    response = login(client, password='wrong')

    assert response.status_code == 400
    assert response.json() == {'detail': 'Incorrect password'}
    assert 'set-cookie' not in response.headers


def test_login_rejects_unknown_user(client) -> None:
    response = login(client, user='ghost')

    assert response.status_code == 400
    assert response.json() == {'detail': 'User not found'}


def test_login_requires_user_and_password(client) -> None:
    response = client.post('/api/auth/login', json={'user': '', 'password': ''})

    assert response.status_code == 400
    assert len(response.json()['detail']) == 2


def test_verify_accepts_session_cookie_from_login(client) -> None:
    login(client)

    response = client.get('/api/auth/verify')

    assert response.status_code == 200
    assert response.json() == {'user': 'admin', 'message': 'Token is valid'}


def test_verify_accepts_bearer_token(app, auth_headers) -> None:
    response = TestClient(app, base_url='https://testserver').get('/api/auth/verify', headers=auth_headers)

    assert response.status_code == 200
    assert response.json()['user'] == 'admin'


def test_verify_without_token_returns_401(client) -> None:
    response = client.get('/api/auth/verify')

    assert response.status_code == 401
    assert response.json() == {'detail': 'Token not found'}


def test_verify_with_expired_token_returns_401(client) -> None:
    token = jwt_handler.create_access_token(subject='admin', expires_minutes=-5)

    response = client.get('/api/auth/verify', headers={'Authorization': f'Bearer {token}'})

    assert response.status_code == 401
    assert response.json() == {'detail': 'Invalid token'}


def test_logout_clears_cookie(client) -> None:
    login(client)

    response = client.post('/api/auth/logout')

    assert response.status_code == 200
    assert response.content == b''
    set_cookie = response.headers['set-cookie'].lower()
    assert set_cookie.startswith('token=')
    assert 'max-age=0' in set_cookie
    assert client.get('/api/auth/verify').status_code == 401


def test_logout_requires_session(client) -> None:
    assert client.post('/api/auth/logout').status_code == 401
