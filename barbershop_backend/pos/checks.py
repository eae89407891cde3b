"""
PATH: pos/checks.py

HELD-SALE BACKEND CHECKS

Held sales must outlive a worker restart and be visible to every worker that
serves a terminal. Used two ways:
- prod settings refuse to start on a bad combination
- `manage.py check --deploy` reports it (pos.E001)
"""

from __future__ import annotations

from typing import Mapping, Optional

from django.conf import settings
from django.core import checks

# Caches that live inside one worker process (or do not store at all).
PROCESS_LOCAL_CACHES = (
    "django.core.cache.backends.locmem.LocMemCache",
    "django.core.cache.backends.dummy.DummyCache",
)


def held_sales_backend_problem(backend: str, caches: Mapping, alias: str = "default") -> Optional[str]:
    backend = (backend or "").strip().lower()

    if backend == "memory":
        return "POS_HELD_SALES_BACKEND=memory loses held sales on restart."

    if backend == "cache":
        config = caches.get(alias)
        if not config:
            return f"POS_HELD_SALES_BACKEND=cache needs CACHES[{alias!r}]."
        if config.get("BACKEND") in PROCESS_LOCAL_CACHES:
            return (
                f"POS_HELD_SALES_BACKEND=cache needs a shared persistent cache; "
                f"CACHES[{alias!r}] is {config.get('BACKEND')}. Set CACHE_URL or use the file backend."
            )

    return None


@checks.register(checks.Tags.caches, deploy=True)
def check_held_sales_backend(app_configs=None, **kwargs):
    problem = held_sales_backend_problem(
        getattr(settings, "POS_HELD_SALES_BACKEND", "file"),
        getattr(settings, "CACHES", {}),
        getattr(settings, "POS_HELD_SALES_CACHE_ALIAS", "default"),
    )
    if problem is None:
        return []
    return [checks.Error(problem, id="pos.E001")]
