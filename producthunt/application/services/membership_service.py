"""Membership service — purchase, lookup and removal of memberships."""

from datetime import datetime, timedelta
from typing import List, Optional

import pytz
import structlog

from producthunt.config import Settings
from producthunt.core.exceptions import EntityNotFoundException
from producthunt.domain.models.membership import Membership
from producthunt.domain.repositories.membership_repository import MembershipRepository
from producthunt.domain.schemas.membership import MembershipCreate

logger = structlog.get_logger(__name__)


def purchase_membership(repo: MembershipRepository, settings: Settings, data: MembershipCreate) -> Membership:
    """Record a membership purchase. Payment is not verified."""
    purchased_at = datetime.now(pytz.timezone(settings.TIMEZONE))
    membership = repo.create(
        {
            "user_email": data.user_email,
            "is_active": data.is_active,
            "purchased_at": purchased_at,
            "expires_at": purchased_at + timedelta(days=settings.MEMBERSHIP_DURATION_DAYS),
        }
    )
    logger.info("Membership purchased", user_email=data.user_email, membership_id=membership.id)
    return membership


def list_memberships(repo: MembershipRepository) -> List[Membership]:
    return repo.list_all()


def get_membership(repo: MembershipRepository, membership_id: int) -> Membership:
    membership = repo.get_by_id(membership_id)
    if membership is None:
        raise EntityNotFoundException("Membership not found", {"id": membership_id})
    return membership


def get_membership_status(repo: MembershipRepository, email: str) -> Optional[Membership]:
    """Active membership for an email, or the latest one if none is active."""
    return repo.get_active_for_email(email) or repo.get_latest_for_email(email)


def delete_membership(repo: MembershipRepository, membership_id: int) -> None:
    if repo.delete(membership_id) is None:
        raise EntityNotFoundException("Membership not found to delete", {"id": membership_id})
    logger.info("Membership deleted", membership_id=membership_id)
