"""Derived credential table published from the stored API keys."""

from __future__ import annotations

import logging
import os
from typing import Dict, Iterable, Mapping, MutableMapping, Optional, Set

from ..domain.models import ApiKeyRecord, env_var_name

logger = logging.getLogger(__name__)


class CredentialRegistry:
    """
    In-process table of ``<SERVICE>_API_KEY`` values.

    Components that need a third-party secret receive this object instead of
    reading ``os.environ``. When an ``environ`` mapping is given, every publish
    is mirrored into it, so scripts that still read the process environment keep
    working.
    """

    def __init__(
        self,
        environ: Optional[MutableMapping[str, str]] = None,
        fallback: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._values: Dict[str, str] = {}
        self._environ = environ
        self._fallback = fallback if fallback is not None else os.environ
        self._exported: Set[str] = set()

    def publish(self, records: Iterable[ApiKeyRecord]) -> Mapping[str, str]:
        values: Dict[str, str] = {}
        for record in records:
            values[env_var_name(record.service)] = record.key
        self._values = values
        if self._environ is not None:
            self._export(values)
        return dict(values)

    def _export(self, values: Mapping[str, str]) -> None:
        for name in self._exported - set(values):
            self._environ.pop(name, None)
            logger.debug("Removed %s from the process environment", name)
        exported = set()
        for name, value in values.items():
            try:
                self._environ[name] = value
            except ValueError as exc:
                logger.warning("Skipping %r, it cannot be set in the process environment: %s", name, exc)
                continue
            exported.add(name)
        self._exported = exported

    def get(self, name: str) -> Optional[str]:
        return self._values.get(name)

    def resolve(self, service: str) -> Optional[str]:
        """Secret for ``service``, falling back to the ambient environment."""
        name = env_var_name(service)
        value = self._values.get(name)
        if value:
            return value
        return self._fallback.get(name) or None

    def as_dict(self) -> Dict[str, str]:
        return dict(self._values)

    def __contains__(self, name: object) -> bool:
        return name in self._values

    def __len__(self) -> int:
        return len(self._values)
