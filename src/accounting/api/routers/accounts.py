"""Account endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from accounting.api.deps import get_account_service
from accounting.api.schemas.account import (
    AccountCreate,
    AccountUpdate,
    AccountResponse,
    AccountListResponse,
)
from accounting.core.exceptions import NotFoundError
from accounting.domain.models import Account, AccountType
from accounting.services import AccountService

router = APIRouter(prefix="/accounts", tags=["accounts"])


def _to_list_response(accounts: list[Account]) -> AccountListResponse:
    return AccountListResponse(
        accounts=[AccountResponse.model_validate(a) for a in accounts],
        count=len(accounts),
    )


@router.get("/", response_model=AccountListResponse)
def list_accounts(
    type: Optional[AccountType] = Query(default=None, description="Filter by account type"),
    active_only: bool = Query(default=False),
    roots_only: bool = Query(default=False),
    service: AccountService = Depends(get_account_service),
):
    """List accounts ordered by code, optionally filtered."""
    if type is not None:
        accounts = service.find_by_type(type)
    elif roots_only:
        accounts = service.find_root_accounts()
    elif active_only:
        accounts = service.find_active()
    else:
        accounts = service.find_all()

    # Combined filters narrow the first query's result
    if roots_only:
        accounts = [a for a in accounts if a.is_root]
    if active_only:
        accounts = [a for a in accounts if a.active]
    return _to_list_response(accounts)


@router.post("/", response_model=AccountResponse, status_code=201)
def create_account(
    data: AccountCreate,
    service: AccountService = Depends(get_account_service),
):
    """Create a new account."""
    parent = service.get(data.parent_id) if data.parent_id is not None else None
    return service.create(
        code=data.code,
        name=data.name,
        account_type=data.type,
        parent=parent,
        description=data.description,
    )


@router.post("/initialize", response_model=AccountListResponse)
def initialize_chart(service: AccountService = Depends(get_account_service)):
    """Seed the default chart of accounts when the store is empty."""
    service.initialize_default_accounts()
    return _to_list_response(service.get_chart_of_accounts())


@router.get("/code/{code}", response_model=AccountResponse)
def get_account_by_code(
    code: str,
    service: AccountService = Depends(get_account_service),
):
    account = service.find_by_code(code)
    if account is None:
        raise NotFoundError("Account", code)
    return account


@router.get("/{account_id}", response_model=AccountResponse)
def get_account(
    account_id: int,
    service: AccountService = Depends(get_account_service),
):
    return service.get(account_id)


@router.get("/{account_id}/children", response_model=AccountListResponse)
def list_children(
    account_id: int,
    service: AccountService = Depends(get_account_service),
):
    """List the direct children of an account."""
    return _to_list_response(service.find_children(account_id))


@router.put("/{account_id}", response_model=AccountResponse)
def update_account(
    account_id: int,
    data: AccountUpdate,
    service: AccountService = Depends(get_account_service),
):
    """Edit an account. Only the fields present in the body change."""
    account = service.get(account_id)
    for field_name, value in data.model_dump(exclude_unset=True).items():
        setattr(account, field_name, value)
    return service.update(account)


@router.delete("/{account_id}", status_code=204)
def delete_account(
    account_id: int,
    service: AccountService = Depends(get_account_service),
):
    """Delete an account. Fails if it has children or a balance."""
    service.delete(account_id)
