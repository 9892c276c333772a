"""BaseService, the foundation for viu services."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from viu_shared.config.settings import ViuSettings


class BaseService:
    """Holds the resolved settings every service reads its policy from."""

    def __init__(self, settings: ViuSettings) -> None:
        self._settings = settings
