"""Database settings builder.

Resolution order:

1. ``DATABASE_URL`` (parsed by *dj-database-url*), if set.
2. MySQL from ``DB_HOST`` / ``DB_PORT`` / ``DB_USER`` / ``DB_PASS`` /
   ``DB_NAME`` when ``DB_HOST`` is set.
3. A local SQLite file.

Django's connection handler owns the connections; ``CONN_MAX_AGE`` bounds
how long each worker keeps one open.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import dj_database_url
from decouple import config


def database_config(base_dir: Path) -> Dict[str, Any]:
    conn_max_age = config("DB_CONN_MAX_AGE", default=60, cast=int)

    url = config("DATABASE_URL", default="")
    if url:
        return dj_database_url.parse(
            url, conn_max_age=conn_max_age, conn_health_checks=True
        )

    host = config("DB_HOST", default="")
    if host:
        return {
            "ENGINE": "django.db.backends.mysql",
            "HOST": host,
            "PORT": config("DB_PORT", default="3306"),
            "USER": config("DB_USER", default="root"),
            "PASSWORD": config("DB_PASS", default=""),
            "NAME": config("DB_NAME", default="portal_pji_project"),
            "CONN_MAX_AGE": conn_max_age,
            "CONN_HEALTH_CHECKS": True,
            "OPTIONS": {"charset": "utf8mb4"},
        }

    return {
        "ENGINE": "django.db.backends.sqlite3",
        "NAME": base_dir / "db.sqlite3",
        "CONN_MAX_AGE": conn_max_age,
    }
