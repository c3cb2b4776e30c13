"""Post-success signals emitted by form submissions."""

from __future__ import annotations

from dataclasses import dataclass
from dataclasses import field
from typing import Protocol
import logging

logger = logging.getLogger(__name__)


class FormSignals(Protocol):
    """Port for cache invalidation and navigation after a successful submission."""

    def invalidate(self, path: str) -> None:
        ...

    def navigate(self, path: str) -> None:
        ...


@dataclass
class RequestSignals:
    """Collect signals raised while handling one request.

    Routes turn ``redirect_to`` into a ``303 See Other`` response and expose
    ``invalidated`` so downstream caches can drop the affected views.
    """

    invalidated: list[str] = field(default_factory=list)
    redirect_to: str | None = None

    def invalidate(self, path: str) -> None:
        logger.info("Invalidating view %s", path, extra={"path": path})
        self.invalidated.append(path)

    def navigate(self, path: str) -> None:
        self.redirect_to = path
