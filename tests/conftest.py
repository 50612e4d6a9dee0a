import json

import pytest
from fastapi.testclient import TestClient

from backend.main import create_app

ADMIN_USER = 'admin'
ADMIN_PASSWORD = 'secret'


@pytest.fixture
def data_dir(tmp_path):
    directory = tmp_path / 'input'
    directory.mkdir()
    (directory / 'Admin.json').write_text(
        json.dumps([{'user': ADMIN_USER, 'password': ADMIN_PASSWORD}], indent=2),
        encoding='utf-8',
    )
    return directory


@pytest.fixture
def export_dir(tmp_path):
    return tmp_path / 'exports'


@pytest.fixture
def app(data_dir, export_dir):
    return create_app(data_dir=data_dir, export_dir=export_dir)


@pytest.fixture
def client(app):
    # Session cookies are marked Secure, so the client must talk https.
    return TestClient(app, base_url='https://testserver')


@pytest.fixture
def auth_headers(app):
    _, token = app.state.auth_gate.login(ADMIN_USER, ADMIN_PASSWORD)
    return {'Authorization': f'Bearer {token}'}
