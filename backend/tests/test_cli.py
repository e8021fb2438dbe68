from unittest import mock

import redis


def test_create_board_command(flask_app, store):
    runner = flask_app.test_cli_runner()
    result = runner.invoke(args=['create-board', 'Weekly Cup', 'DSC'])
    assert result.exit_code == 0
    assert 'Created board weekly-cup (DSC)' in result.output
    token = store.get('board:weekly-cup:token')
    assert f'Token: {token}' in result.output


def test_create_board_command_conflict(flask_app):
    runner = flask_app.test_cli_runner()
    assert runner.invoke(args=['create-board', 'cup', 'ASC']).exit_code == 0
    result = runner.invoke(args=['create-board', 'CUP', 'DSC'])
    assert result.exit_code != 0
    assert 'Board already exists' in result.output


def test_create_board_command_rejects_order(flask_app):
    result = flask_app.test_cli_runner().invoke(args=['create-board', 'cup', 'UP'])
    assert result.exit_code != 0


def test_ping_store_command(flask_app, make_app):
    result = flask_app.test_cli_runner().invoke(args=['ping-store'])
    assert 'Redis is reachable' in result.output

    broken = mock.MagicMock()
    broken.ping.side_effect = redis.exceptions.ConnectionError('refused')
    result = make_app(broken).test_cli_runner().invoke(args=['ping-store'])
    assert result.exit_code != 0
    assert 'Could not connect to Redis' in result.output


def test_create_board_command_rejects_empty_name(flask_app, store):
    result = flask_app.test_cli_runner().invoke(args=['create-board', '', 'ASC'])
    assert result.exit_code != 0
    assert 'A board name is required' in result.output
    assert store.keys('board:*') == []
