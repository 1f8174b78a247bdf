"""Environment and .env configuration for swatch-grid.

Load order (first wins):
  1. Existing OS environment variables — never overwrite.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised keys:
  SWATCH_GRID_SOURCE     JSON file of colour styles   (default styles.json)
  SWATCH_GRID_RENDERER   output renderer name          (default image)
  SWATCH_GRID_OUT        output path                   (default: per renderer)
  SWATCH_GRID_DELIMITER  name hierarchy delimiter      (default /)
  SWATCH_GRID_FONT       TrueType font for labels      (default: Pillow's built-in)
"""

import os
from dataclasses import dataclass, replace
from pathlib import Path

PREFIX = 'SWATCH_GRID_'


@dataclass(frozen=True)
class Settings:
    source: str = 'styles.json'
    renderer: str = 'image'
    out: str | None = None
    delimiter: str = '/'
    font: str | None = None

    def override(self, **values: str | None) -> 'Settings':
        """Copy with every non-None value applied."""
        return replace(self, **{k: v for k, v in values.items() if v is not None})


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or file (worktree)
        if (current / '.git').exists():
            return None
        parent = current.parent
        if parent == current:
            return None
        current = parent


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines. Quotes around values are stripped, # lines skipped."""
    result: dict[str, str] = {}
    for line in path.read_text(encoding='utf-8').splitlines():
        line = line.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        if line.startswith('export '):
            line = line[len('export ') :]
        key, _, raw_value = line.partition('=')
        key = key.strip()
        if key:
            result[key] = raw_value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def load_settings() -> Settings:
    """Read SWATCH_GRID_* variables from the environment."""
    values = {}
    for name in ('source', 'renderer', 'out', 'delimiter', 'font'):
        raw = os.environ.get(PREFIX + name.upper())
        if raw:
            values[name] = raw
    return Settings().override(**values)
