"""Membership API routes."""

from fastapi import APIRouter, Depends, status

from producthunt.config import Settings
from producthunt.application.services.membership_service import (
    delete_membership,
    get_membership,
    get_membership_status,
    list_memberships,
    purchase_membership,
)
from producthunt.domain.repositories.membership_repository import MembershipRepository
from producthunt.domain.schemas.membership import MembershipCreate, MembershipRead
from producthunt.interfaces.deps import get_app_settings, get_membership_repository

router = APIRouter(prefix="/memberships", tags=["Memberships"])


@router.get("", response_model=list[MembershipRead])
def all_memberships(repo: MembershipRepository = Depends(get_membership_repository)):
    return [MembershipRead.model_validate(m) for m in list_memberships(repo)]


@router.post("", status_code=status.HTTP_201_CREATED)
def create_membership(
    body: MembershipCreate,
    repo: MembershipRepository = Depends(get_membership_repository),
    settings: Settings = Depends(get_app_settings),
):
    membership = purchase_membership(repo, settings, body)
    return {
        "message": "Membership created successfully",
        "membershipId": membership.id,
        "membership": MembershipRead.model_validate(membership),
    }


@router.get("/status/{email}")
def membership_status(email: str, repo: MembershipRepository = Depends(get_membership_repository)):
    membership = get_membership_status(repo, email)
    return {
        "email": email,
        "isMember": bool(membership and membership.is_active),
        "membership": MembershipRead.model_validate(membership) if membership else None,
    }


@router.get("/{membership_id}", response_model=MembershipRead)
def membership_detail(membership_id: int, repo: MembershipRepository = Depends(get_membership_repository)):
    return MembershipRead.model_validate(get_membership(repo, membership_id))


@router.delete("/{membership_id}")
def remove_membership(membership_id: int, repo: MembershipRepository = Depends(get_membership_repository)):
    delete_membership(repo, membership_id)
    return {"message": "Membership deleted successfully"}
