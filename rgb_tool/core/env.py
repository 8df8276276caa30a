"""Environment and .env configuration for rgb-tool.

Load order (first wins):
  1. Existing OS environment variables — never overwrite.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file walking up from cwd, stopping at .git (file or dir).

Recognised settings:
  RGB_TOOL_LOG_LEVEL    logging level name (default WARNING)
  RGB_TOOL_FORMAT       'text' or 'json' (default text)
  RGB_TOOL_SWATCH_SIZE  pixel size of one swatch block (default 64)
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

FORMATS = ('text', 'json')


@dataclass(frozen=True)
class Settings:
    log_level: str = 'WARNING'
    output_format: str = 'text'
    swatch_size: int = 64


def _find_dotenv(start: Path) -> Path | None:
    """Walk up from start, return first .env found, stop at .git boundary."""
    for directory in (start.resolve(), *start.resolve().parents):
        candidate = directory / '.env'
        if candidate.is_file():
            return candidate
        # .git can be a dir (normal clone) or file (worktree)
        if (directory / '.git').exists():
            return None
    return None


def _parse_dotenv(path: Path) -> dict[str, str]:
    """Parse KEY=value lines. Quotes around the value are dropped."""
    result: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key.startswith('export '):
            key = key[len('export ') :].strip()
        if key:
            result[key] = value.strip().strip('"').strip("'")
    return result


def load_env(env_file: str | None = None) -> Path | None:
    """Load .env into os.environ for keys not already set.

    Returns the path that was loaded, or None if no .env was found/used.
    """
    if env_file:
        path: Path | None = Path(env_file)
        if not path.is_file():
            logger.warning('env file not found: %s', env_file)
            return None
    else:
        path = _find_dotenv(Path.cwd())
        if path is None:
            return None

    for key, value in _parse_dotenv(path).items():
        os.environ.setdefault(key, value)
    return path


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """Build Settings from the environment, ignoring malformed values."""
    env = os.environ if environ is None else environ
    defaults = Settings()

    level = env.get('RGB_TOOL_LOG_LEVEL', defaults.log_level).upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning('ignoring unknown RGB_TOOL_LOG_LEVEL %r', level)
        level = defaults.log_level

    fmt = env.get('RGB_TOOL_FORMAT', defaults.output_format).lower()
    if fmt not in FORMATS:
        logger.warning('ignoring unknown RGB_TOOL_FORMAT %r', fmt)
        fmt = defaults.output_format

    size = defaults.swatch_size
    raw_size = env.get('RGB_TOOL_SWATCH_SIZE')
    if raw_size is not None:
        try:
            size = int(raw_size)
        except ValueError:
            logger.warning('ignoring non-integer RGB_TOOL_SWATCH_SIZE %r', raw_size)
        if size <= 0:
            logger.warning('ignoring non-positive RGB_TOOL_SWATCH_SIZE %r', raw_size)
            size = defaults.swatch_size

    return Settings(log_level=level, output_format=fmt, swatch_size=size)
