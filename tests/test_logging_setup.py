"""Tests for structured logging and request-line logging."""
import json
import logging

from services.logging_setup import JsonFormatter


def test_json_formatter_payload():
    record = logging.LogRecord('roster', logging.INFO, __file__, 1, 'Team created: %s', ('Chess',), None)
    payload = json.loads(JsonFormatter().format(record))

    assert payload['level'] == 'INFO'
    assert payload['logger'] == 'roster'
    assert payload['message'] == 'Team created: Chess'
    assert 'exception' not in payload


def test_request_line_logged(client, caplog):
    with caplog.at_level(logging.INFO, logger='roster.access'):
        client.get('/teams?sort=name')

    lines = [r.getMessage() for r in caplog.records if r.name == 'roster.access']
    assert len(lines) == 1
    assert '"GET /teams?sort=name HTTP/1.1" 200' in lines[0]


def test_mutations_logged(client, create_team, caplog):
    with caplog.at_level(logging.INFO, logger='routes.teams'):
        create_team(name='Chess Club')

    assert 'Team created: Chess Club' in caplog.text
