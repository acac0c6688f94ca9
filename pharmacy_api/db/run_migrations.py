"""
Programmatic Alembic migration runner.

The pharmacy schema is provisioned at deployment time; the service itself does
not alter tables while handling requests. This runner works without an
alembic.ini by pointing Alembic at this package's migrations directory.

Usage examples:
    python -m pharmacy_api.db.run_migrations upgrade head
    python -m pharmacy_api.db.run_migrations downgrade base
    python -m pharmacy_api.db.run_migrations current
"""

import sys
from pathlib import Path
from typing import Callable, Dict, List

from alembic import command
from alembic.config import Config

from pharmacy_api.db.config import get_settings

_COMMANDS: Dict[str, Callable[..., None]] = {
    "upgrade": command.upgrade,
    "downgrade": command.downgrade,
    "current": command.current,
    "history": command.history,
    "heads": command.heads,
}

_DEFAULT_ARGS: Dict[str, List[str]] = {
    "upgrade": ["head"],
    "downgrade": ["-1"],
}


# PUBLIC_INTERFACE
def build_config() -> Config:
    """Build an Alembic Config bound to the bundled migrations and the configured database."""
    cfg = Config()
    script_location = Path(__file__).resolve().parent / "migrations"
    cfg.set_main_option("script_location", str(script_location))
    cfg.set_main_option("sqlalchemy.url", get_settings().sync_database_url)
    return cfg


# PUBLIC_INTERFACE
def main(argv: List[str] | None = None) -> None:
    """Run an Alembic command with programmatic configuration."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        raise SystemExit("No Alembic arguments provided. Example: upgrade head")

    cmd, other = args[0], args[1:]
    handler = _COMMANDS.get(cmd)
    if handler is None:
        raise SystemExit(f"Unsupported Alembic command: {cmd}")

    handler(build_config(), *(other or _DEFAULT_ARGS.get(cmd, [])))


if __name__ == "__main__":
    main()
