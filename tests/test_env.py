"""Tests for swatch_grid.core.env — .env loading and settings."""

import os
from pathlib import Path

import pytest
from swatch_grid.core.env import Settings, _find_dotenv, _parse_dotenv, load_env, load_settings


class TestParseDotenv:
    def test_simple_key_value(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('SWATCH_GRID_OUT=sheet.png\n')
        assert _parse_dotenv(f) == {'SWATCH_GRID_OUT': 'sheet.png'}

    def test_quoted_values(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('FONT="/fonts/Inter Regular.ttf"\nDELIM=\'.\'\n')
        assert _parse_dotenv(f) == {'FONT': '/fonts/Inter Regular.ttf', 'DELIM': '.'}

    def test_comments_and_blank_lines_ignored(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('# comment\n\nFOO=bar\n\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}

    def test_line_without_equals_ignored(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('NOEQUALS\nFOO=bar\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}

    def test_export_prefix(self, tmp_path: Path) -> None:
        f = tmp_path / '.env'
        f.write_text('export FOO=bar\n')
        assert _parse_dotenv(f) == {'FOO': 'bar'}


class TestFindDotenv:
    def test_finds_in_parent(self, tmp_path: Path) -> None:
        subdir = tmp_path / 'sub'
        subdir.mkdir()
        dotenv = tmp_path / '.env'
        dotenv.write_text('X=1\n')
        assert _find_dotenv(subdir) == dotenv

    def test_stops_at_git_dir(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        repo.mkdir()
        (tmp_path / '.env').write_text('X=1\n')
        (repo / '.git').mkdir()
        subdir = repo / 'src'
        subdir.mkdir()
        assert _find_dotenv(subdir) is None

    def test_stops_at_git_file(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        repo.mkdir()
        (tmp_path / '.env').write_text('X=1\n')
        (repo / '.git').write_text('gitdir: ../somewhere\n')
        assert _find_dotenv(repo) is None


class TestLoadEnv:
    def test_sets_missing_vars(self, tmp_path: Path, clean_env: pytest.MonkeyPatch) -> None:
        (tmp_path / '.env').write_text('SWATCH_GRID_RENDERER=text\n')
        clean_env.chdir(tmp_path)
        assert load_env() == tmp_path / '.env'
        assert os.environ.get('SWATCH_GRID_RENDERER') == 'text'

    def test_does_not_overwrite_existing(self, tmp_path: Path, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv('SWATCH_GRID_RENDERER', 'json')
        (tmp_path / '.env').write_text('SWATCH_GRID_RENDERER=text\n')
        clean_env.chdir(tmp_path)
        load_env()
        assert os.environ.get('SWATCH_GRID_RENDERER') == 'json'

    def test_explicit_env_file(self, tmp_path: Path, clean_env: pytest.MonkeyPatch) -> None:
        f = tmp_path / 'custom.env'
        f.write_text('SWATCH_GRID_OUT=custom.png\n')
        assert load_env(env_file=str(f)) == f
        assert os.environ.get('SWATCH_GRID_OUT') == 'custom.png'

    def test_explicit_missing_file(self, tmp_path: Path) -> None:
        assert load_env(env_file=str(tmp_path / 'nope.env')) is None

    def test_returns_none_when_no_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / '.git').mkdir()
        monkeypatch.chdir(tmp_path)
        assert load_env() is None


class TestSettings:
    def test_defaults(self, clean_env: pytest.MonkeyPatch) -> None:
        settings = load_settings()
        assert settings == Settings()
        assert settings.source == 'styles.json'
        assert settings.renderer == 'image'
        assert settings.out is None
        assert settings.delimiter == '/'
        assert settings.font is None

    def test_from_environment(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv('SWATCH_GRID_SOURCE', 'tokens.json')
        clean_env.setenv('SWATCH_GRID_DELIMITER', '.')
        clean_env.setenv('SWATCH_GRID_FONT', '/fonts/Inter.ttf')
        settings = load_settings()
        assert settings.source == 'tokens.json'
        assert settings.delimiter == '.'
        assert settings.font == '/fonts/Inter.ttf'

    def test_empty_variable_ignored(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv('SWATCH_GRID_DELIMITER', '')
        assert load_settings().delimiter == '/'

    def test_override_skips_none(self) -> None:
        settings = Settings(renderer='text').override(renderer=None, out='grid.txt')
        assert settings.renderer == 'text'
        assert settings.out == 'grid.txt'
