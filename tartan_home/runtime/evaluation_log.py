"""Append-only audit log for evaluation decisions."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .contracts import DecisionRecord

_LOGGER = logging.getLogger(__name__)


class EvaluationLog:
    """Caller-owned sink of decision records.

    Records are only ever appended. Passing the same instance to several
    evaluations accumulates their decisions; that choice belongs to the caller.
    """

    def __init__(self) -> None:
        self._records: list[DecisionRecord] = []

    @property
    def records(self) -> tuple[DecisionRecord, ...]:
        return tuple(self._records)

    def append(self, record: DecisionRecord) -> None:
        self._records.append(record)
        if record.is_error:
            _LOGGER.warning("[%s] %s", record.policy, record.message)
        else:
            _LOGGER.debug("[%s] %s", record.policy, record.message)

    def extend(self, records: Iterable[DecisionRecord]) -> None:
        for record in records:
            self.append(record)

    def messages(self) -> list[str]:
        return [record.message for record in self._records]

    def errors(self) -> list[DecisionRecord]:
        return [record for record in self._records if record.is_error]

    def as_text(self) -> str:
        return "\n".join(self.messages())

    def __contains__(self, phrase: object) -> bool:
        if not isinstance(phrase, str):
            return False
        return any(phrase in record.message for record in self._records)

    def __iter__(self) -> Iterator[DecisionRecord]:
        return iter(self.records)

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"EvaluationLog(records={len(self._records)})"
