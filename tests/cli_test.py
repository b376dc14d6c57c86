import json
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from pkgident.__main__ import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def no_logging_setup():
    # Keep the global structlog config untouched so capture_logs works elsewhere
    with patch('pkgident.__main__.setup_logging') as mock_setup:
        yield mock_setup


@pytest.fixture
def records_file(tmp_path):
    path = tmp_path / 'records.jsonl'
    rows = [
        {'name': 'Foo_Bar', 'version': '1.0', 'ecosystem': 'PyPI', 'extractor': 'python/wheelegg'},
        {
            'name': 'foo', 'version': '1.2-1', 'ecosystem': 'Debian:12', 'extractor': 'os/dpkg',
            'metadata': {'kind': 'dpkg', 'package_name': 'foo', 'source_name': 'foo-src'},
        },
        {'name': 'go', 'version': '1.19', 'ecosystem': 'Go', 'extractor': 'go/binary'},
    ]
    path.write_text(''.join(json.dumps(r) + '\n' for r in rows))
    return path


def test_resolve_json(records_file):
    result = runner.invoke(app, ['resolve', str(records_file), '--json', '--workers', '2'])
    assert result.exit_code == 0

    lines = [json.loads(line) for line in result.output.splitlines() if line.startswith('{"name"')]
    assert [(p['name'], p['version']) for p in lines] == [
        ('foo-bar', '1.0'),
        ('foo-src', '1.2-1'),
        ('stdlib', '1.19.99'),
    ]
    assert lines[1]['os_package_name'] == 'foo'
    assert lines[1]['source_type'] == 'os'
    assert lines[2]['source_type'] == 'artifact'


def test_resolve_table(records_file):
    result = runner.invoke(app, ['resolve', str(records_file)])
    assert result.exit_code == 0
    assert 'stdlib' in result.output
    assert '3 resolved' in result.output


def test_resolve_missing_file(tmp_path):
    result = runner.invoke(app, ['resolve', str(tmp_path / 'missing.jsonl')])
    assert result.exit_code == 2
    assert 'Input Error' in result.output
    assert 'does not exist' in result.output


def test_resolve_directory(tmp_path):
    result = runner.invoke(app, ['resolve', str(tmp_path)])
    assert result.exit_code == 2
    assert 'Not a file' in result.output


def test_resolve_unreadable_file(records_file):
    with patch('pkgident.commands.resolve.load_records') as mock_load:
        mock_load.side_effect = PermissionError(13, 'Permission denied', str(records_file))
        result = runner.invoke(app, ['resolve', str(records_file)])
    assert result.exit_code == 2
    assert 'Cannot read input' in result.output


def test_resolve_unexpected_error(records_file):
    with patch('pkgident.commands.resolve.ScanService') as mock_service:
        mock_service.return_value.resolve_records.side_effect = RuntimeError('worker crashed')
        result = runner.invoke(app, ['resolve', str(records_file)])
    assert result.exit_code == 1
    assert 'Unexpected Error' in result.output
    assert 'worker crashed' in result.output


def test_classify():
    result = runner.invoke(app, ['classify', '--name', 'os/dpkg', '--name', 'custom/lock'])
    assert result.exit_code == 0
    assert 'os/dpkg' in result.output
    assert 'project' in result.output


def test_classify_all_builtin():
    result = runner.invoke(app, ['classify'])
    assert result.exit_code == 0
    assert 'sbom/spdx' in result.output
    assert 'vcs/gitrepo' in result.output


def test_debug_flag_sets_level(records_file, no_logging_setup):
    runner.invoke(app, ['--debug', 'classify'])
    no_logging_setup.assert_called_once()
    assert no_logging_setup.call_args.kwargs['level'] == 'DEBUG'
