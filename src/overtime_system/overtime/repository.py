from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import OvertimeDraft, OvertimeRecord


class OvertimeRepository(Protocol):
    def get_by_id(self, record_id: str) -> Optional[OvertimeRecord]:
        raise NotImplementedError

    def list_all(self) -> Sequence[OvertimeRecord]:
        """All records, newest date first."""
        raise NotImplementedError

    def create(self, draft: OvertimeDraft) -> str:
        raise NotImplementedError

    def update(self, record_id: str, draft: OvertimeDraft) -> bool:
        raise NotImplementedError

    def delete(self, record_id: str) -> bool:
        raise NotImplementedError
