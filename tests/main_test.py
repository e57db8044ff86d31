import sys
import os
import json
import pytest
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
import main


@pytest.fixture(autouse=True)
def isolated_cache(tmp_path, monkeypatch):
    monkeypatch.setenv('CSSMATCH_CACHE_DB_PATH', str(tmp_path / 'cache.sqlite3'))
    monkeypatch.delenv('CSSMATCH_REDIS_URL', raising=False)
    monkeypatch.delenv('CSSMATCH_PATTERNS_DIR', raising=False)


def test_match_prints_json(capsys):
    assert main.main(['make this blue']) == 0
    data = json.loads(capsys.readouterr().out)
    assert data['css'] == {'color': '#0073aa'}
    assert data['confidence'] == 100
    assert data['recommendation'] == 'pattern'

def test_match_with_context_and_threshold(capsys):
    main.main(['--no-cache', '--threshold', '99', '--context', '<button class="btn">', 'shadow please'])
    data = json.loads(capsys.readouterr().out)
    assert data['context'] == {'tag_name': 'button', 'class_list': ['btn']}
    assert data['source'] == 'pattern_matcher'
    assert data['recommendation'] == 'needs_ai_fallback'

def test_stats(capsys):
    assert main.main(['--stats']) == 0
    data = json.loads(capsys.readouterr().out)
    assert data['total'] == 369
    assert data['categories']['colors'] == 87

def test_clear_cache(capsys):
    main.main(['make this blue'])
    capsys.readouterr()
    main.main(['--clear-cache'])
    assert capsys.readouterr().out.strip() == 'Cleared 1 cached results'

def test_prompt_required():
    with pytest.raises(SystemExit):
        main.main([])

def test_invalid_threshold_rejected():
    with pytest.raises(SystemExit):
        main.main(['--threshold', '150', 'blue'])

def test_unknown_log_level_rejected(monkeypatch):
    monkeypatch.setenv('CSSMATCH_LOG_LEVEL', 'verbose')
    with pytest.raises(SystemExit):
        main.main(['blue'])
