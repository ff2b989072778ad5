"""
Product Repository Interface.
Defines specific data access operations for Products, votes and reports.
"""

from typing import Any, Dict, List, Optional

from producthunt.domain.repositories.base import BaseRepository
from producthunt.domain.models.product import Product
from producthunt.domain.models.report import Report
from producthunt.domain.schemas.product import ProductFilter


class ProductRepository(BaseRepository[Product]):
    """Interface for Product-specific operations."""

    def get_with_filters(self, filters: ProductFilter) -> Dict[str, Any]:
        """Get products with filtering and pagination, newest first."""
        ...

    def count_by_owner(self, owner_email: str) -> int:
        """Count products submitted by an owner."""
        ...

    def list_by_owner(self, owner_email: str) -> List[Product]:
        """List products submitted by an owner."""
        ...

    def list_rising(self, min_votes: int) -> List[Product]:
        """List products with at least ``min_votes`` votes."""
        ...

    def list_featured(self) -> List[Product]:
        """List accepted products flagged as featured."""
        ...

    def list_reported(self) -> List[Product]:
        """List products with at least one report."""
        ...

    def add_vote(self, product_id: int, voter: str) -> Optional[int]:
        """Record a vote and bump the counter in one transaction.

        Returns the new vote count, or None if ``voter`` already voted.
        """
        ...

    def add_report(self, product_id: int, reporter: str, reason: Optional[str]) -> Optional[Report]:
        """Insert a report row and bump the counter in one transaction.

        Returns the report, or None if ``reporter`` already reported.
        """
        ...

    def count_by_status(self, status: str) -> int:
        """Count products with a given moderation status."""
        ...

    def total_votes(self) -> int:
        """Sum of votes across all products."""
        ...

    def most_voted(self) -> Optional[Product]:
        """Product with the highest vote count."""
        ...
