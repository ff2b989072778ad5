"""Review Repository Interface."""

from typing import List

from producthunt.domain.repositories.base import BaseRepository
from producthunt.domain.models.review import Review


class ReviewRepository(BaseRepository[Review]):

    def list_by_product(self, product_id: int) -> List[Review]:
        ...
