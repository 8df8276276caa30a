"""Tests for rgb_tool.core.env — .env loading, walk-up logic and settings."""

import logging
import os
from pathlib import Path

import pytest
from rgb_tool.core.env import Settings, _find_dotenv, _parse_dotenv, load_env, load_settings


class TestParseDotenv:
    def test_simple_key_value(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('RGB_TOOL_FORMAT=json\n')
        assert _parse_dotenv(f) == {'RGB_TOOL_FORMAT': 'json'}

    def test_quoted_values(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('A="two words"\nB=\'single\'\n')
        assert _parse_dotenv(f) == {'A': 'two words', 'B': 'single'}

    def test_comments_blank_and_bare_lines_ignored(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('# comment\n\nNOEQUALS\nFOO=bar\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}

    def test_export_prefix(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('export RGB_TOOL_LOG_LEVEL=DEBUG\n')
        assert _parse_dotenv(f) == {'RGB_TOOL_LOG_LEVEL': 'DEBUG'}


class TestFindDotenv:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert _find_dotenv(tmp_path) == dotenv

    def test_finds_in_parent(self, tmp_path: Path) -> None:
        subdir = tmp_path / 'sub'
        subdir.mkdir()
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert _find_dotenv(subdir) == dotenv

    def test_stops_at_git_dir(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        (repo / 'src').mkdir(parents=True)
        (repo / '.git').mkdir()
        (tmp_path / '.env').write_text('X=1\n')
        assert _find_dotenv(repo / 'src') is None

    def test_stops_at_git_file(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        (repo / 'src').mkdir(parents=True)
        (repo / '.git').write_text('gitdir: ../somewhere\n')
        (tmp_path / '.env').write_text('X=1\n')
        assert _find_dotenv(repo / 'src') is None

    def test_env_beside_git_is_found(self, tmp_path: Path) -> None:
        (tmp_path / '.git').mkdir()
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert _find_dotenv(tmp_path) == dotenv


class TestLoadEnv:
    def test_sets_missing_vars(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('TEST_RGB_KEY', 'placeholder')
        monkeypatch.delenv('TEST_RGB_KEY')
        (tmp_path / '.env').write_text('TEST_RGB_KEY=fromfile\n')
        monkeypatch.chdir(tmp_path)
        load_env()
        assert os.environ.get('TEST_RGB_KEY') == 'fromfile'

    def test_does_not_overwrite_existing(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('TEST_RGB_KEY2', 'original')
        (tmp_path / '.env').write_text('TEST_RGB_KEY2=fromfile\n')
        monkeypatch.chdir(tmp_path)
        load_env()
        assert os.environ.get('TEST_RGB_KEY2') == 'original'

    def test_explicit_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('TEST_RGB_KEY3', 'placeholder')
        monkeypatch.delenv('TEST_RGB_KEY3')
        dotenv = tmp_path / 'custom.env'
        dotenv.write_text('TEST_RGB_KEY3=custom\n')
        assert load_env(env_file=str(dotenv)) == dotenv
        assert os.environ.get('TEST_RGB_KEY3') == 'custom'

    def test_missing_explicit_file(self, tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger='rgb_tool.core.env'):
            assert load_env(env_file=str(tmp_path / 'nope.env')) is None
        assert 'not found' in caplog.text

    def test_returns_none_when_no_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / '.git').mkdir()
        monkeypatch.chdir(tmp_path)
        assert load_env() is None


class TestLoadSettings:
    def test_defaults(self) -> None:
        assert load_settings({}) == Settings()
        assert Settings().log_level == 'WARNING'
        assert Settings().output_format == 'text'
        assert Settings().swatch_size == 64

    def test_reads_values(self) -> None:
        env = {'RGB_TOOL_LOG_LEVEL': 'debug', 'RGB_TOOL_FORMAT': 'JSON', 'RGB_TOOL_SWATCH_SIZE': '16'}
        assert load_settings(env) == Settings(log_level='DEBUG', output_format='json', swatch_size=16)

    def test_bad_values_fall_back(self, caplog: pytest.LogCaptureFixture) -> None:
        env = {'RGB_TOOL_LOG_LEVEL': 'LOUD', 'RGB_TOOL_FORMAT': 'xml', 'RGB_TOOL_SWATCH_SIZE': 'big'}
        with caplog.at_level(logging.WARNING, logger='rgb_tool.core.env'):
            assert load_settings(env) == Settings()
        assert len(caplog.records) == 3

    def test_non_positive_size_falls_back(self) -> None:
        assert load_settings({'RGB_TOOL_SWATCH_SIZE': '0'}).swatch_size == 64

    def test_reads_os_environ_by_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('RGB_TOOL_FORMAT', 'json')
        assert load_settings().output_format == 'json'
