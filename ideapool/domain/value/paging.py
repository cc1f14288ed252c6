"""Idea listing options."""

import math
from typing import Any

from ideapool.domain.error import ErrorKind, IdeaError
from ideapool.domain.value.common import ValueObject


class IdeaPageQuery(ValueObject):
    """Which slice of a user's ranked ideas to return.

    Exactly one mode applies:
    - cursor mode (``last`` set): ideas scoring strictly below ``last``
    - offset mode: the 1-based ``page`` of the ranking
    """

    last: float | None = None
    page: int = 1

    @property
    def is_cursor(self) -> bool:
        return self.last is not None

    @classmethod
    def from_options(cls, last: Any = None, page: Any = None) -> "IdeaPageQuery":
        """Validate raw listing options.

        ``last`` takes precedence: when it is given ``page`` is ignored
        and not validated.

        Raises:
            IdeaError: INVALID_LAST_SCORE or INVALID_PAGE_NUMBER
        """
        if last is not None:
            if (
                isinstance(last, bool)
                or not isinstance(last, (int, float))
                or not math.isfinite(last)
                or last < 0
            ):
                raise IdeaError(ErrorKind.INVALID_LAST_SCORE)
            return cls(last=float(last))

        if page is None:
            return cls()
        return cls(page=_validate_page(page))

    @classmethod
    def from_query(cls, last: str | None, page: str | None) -> "IdeaPageQuery":
        """Build from raw query-string values.

        Empty values count as absent. Anything else is parsed as a number,
        and text that is not numeric becomes NaN so it fails validation.
        """
        return cls.from_options(last=_parse_number(last), page=_parse_number(page))


def _validate_page(page: Any) -> int:
    if isinstance(page, bool) or not isinstance(page, (int, float)):
        raise IdeaError(ErrorKind.INVALID_PAGE_NUMBER)
    if isinstance(page, float):
        if not page.is_integer():
            raise IdeaError(ErrorKind.INVALID_PAGE_NUMBER)
        page = int(page)
    if page <= 0:
        raise IdeaError(ErrorKind.INVALID_PAGE_NUMBER)
    return page


def _parse_number(raw: str | None) -> int | float | None:
    if raw is None or not raw.strip():
        return None
    text = raw.strip()
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return math.nan
