"""Report Repository Interface."""

from typing import List

from producthunt.domain.repositories.base import BaseRepository
from producthunt.domain.models.report import Report


class ReportRepository(BaseRepository[Report]):

    def list_recent(self) -> List[Report]:
        """All reports, newest first."""
        ...

    def list_by_product(self, product_id: int) -> List[Report]:
        ...
