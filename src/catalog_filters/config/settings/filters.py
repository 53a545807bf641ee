"""Config settings – FiltersSettings for the filters build pass."""
from __future__ import annotations

import dataclasses
import enum
from typing import ClassVar

from catalog_filters.config.settings.base import Settings
from catalog_filters.config.validation import InvalidSettingValueError


class ErrorPolicy(str, enum.Enum):
    """What the orchestrator does when a facet builder's searcher call fails."""

    FAIL_FAST = "fail_fast"
    SKIP = "skip"


@dataclasses.dataclass
class FiltersSettings(Settings):
    """Tunables of one deployment.

    ``default_short_list_size`` caps the number of values surfaced by default
    per facet. ``error_policy`` is ``fail_fast`` or ``skip``. ``max_workers``
    above one runs facet builders on a thread pool.
    """

    _prefix: ClassVar[str] = "FILTERS"

    default_short_list_size: int = 10
    error_policy: str = ErrorPolicy.FAIL_FAST.value
    max_workers: int = 1

    def _validate(self) -> None:
        self._require_positive_int("default_short_list_size")
        self._require_positive_int("max_workers")
        try:
            self.error_policy = ErrorPolicy(self.error_policy).value
        except ValueError as exc:
            raise InvalidSettingValueError(
                "error_policy",
                self.error_policy,
                f"expected one of {[p.value for p in ErrorPolicy]}",
            ) from exc

    @property
    def policy(self) -> ErrorPolicy:
        return ErrorPolicy(self.error_policy)


__all__ = ["ErrorPolicy", "FiltersSettings"]
