"""Konfiguracja goreorder — wartości domyślne ze zmiennych środowiskowych."""

from __future__ import annotations

import os

from reordering import DEFAULT_CONSTRUCTOR_PREFIX, SelectionPolicy

ENV_CONSTRUCTOR_PREFIX = "GOREORDER_CONSTRUCTOR_PREFIX"


def default_constructor_prefix() -> str:
    return os.getenv(ENV_CONSTRUCTOR_PREFIX, DEFAULT_CONSTRUCTOR_PREFIX)


def get_policy(constructor_prefix: str | None = None) -> SelectionPolicy:
    """Flaga --constructor-prefix ma pierwszeństwo przed zmienną środowiskową."""
    if constructor_prefix is None:
        constructor_prefix = default_constructor_prefix()
    return SelectionPolicy(constructor_prefix=constructor_prefix)
