"""SQLAlchemy Implementation of Report Repository."""

from typing import List

from sqlalchemy import select

from producthunt.domain.models.report import Report
from producthunt.domain.repositories.report_repository import ReportRepository
from producthunt.infrastructure.repositories.base_repository import SQLAlchemyRepository


class SQLAlchemyReportRepository(SQLAlchemyRepository[Report], ReportRepository):

    def list_recent(self) -> List[Report]:
        stmt = select(Report).order_by(Report.created_at.desc(), Report.id.desc())
        return list(self.db.scalars(stmt))

    def list_by_product(self, product_id: int) -> List[Report]:
        stmt = select(Report).where(Report.product_id == product_id).order_by(Report.id)
        return list(self.db.scalars(stmt))
