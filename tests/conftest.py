"""Shared fixtures for the roster manager test suite."""
from urllib.parse import quote

import pytest

import config
from app import create_app
from database import db
from models.team import Member, Team
from services.roster_store import Roster


@pytest.fixture
def app():
    app = create_app(config.TestingConfig)
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def roster():
    return Roster([
        Team('banana', 'Fruit', [Member('Zed', '40', 'M'), Member('amy', '22', 'F')]),
        Team('Apple', 'Orchard'),
        Team('cherry', 'Picking'),
    ])


@pytest.fixture
def create_team(client):
    def _create(name='Chess Club', activity='Chess'):
        return client.post('/teams', data={'teamName': name, 'teamActivity': activity})
    return _create


@pytest.fixture
def add_member(client):
    def _add(team_name, name='Al', age='30', sex='M'):
        return client.post(
            f'/teams/{quote(team_name)}/members/new',
            data={'memberName': name, 'memberAge': age, 'memberSex': sex},
        )
    return _add


@pytest.fixture
def session_teams(client):
    """Read the roster stored in the client's server-side session."""
    def _read():
        with client.session_transaction() as sess:
            return sess.get('teams', [])
    return _read
