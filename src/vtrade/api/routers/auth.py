"""Registration and login endpoints."""

from fastapi import APIRouter, Depends

from vtrade.api.deps import get_account_service, get_current_account_id
from vtrade.api.schemas import (
    AccountResponse,
    LoginRequest,
    RegisterRequest,
    TokenResponse,
)
from vtrade.core.security import create_access_token
from vtrade.domain.models import Account
from vtrade.services import AccountService

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _token_response(account: Account) -> TokenResponse:
    return TokenResponse(
        access_token=create_access_token(account.account_id, account.email),
        account=AccountResponse.model_validate(account),
    )


@router.post("/register", response_model=TokenResponse, status_code=201)
def register(
    data: RegisterRequest,
    accounts: AccountService = Depends(get_account_service),
) -> TokenResponse:
    """Create an account funded with the starting balance."""
    account = accounts.register(data.name, data.email, data.password)
    return _token_response(account)


@router.post("/login", response_model=TokenResponse)
def login(
    data: LoginRequest,
    accounts: AccountService = Depends(get_account_service),
) -> TokenResponse:
    account = accounts.authenticate(data.email, data.password)
    return _token_response(account)


@router.get("/me", response_model=AccountResponse)
def get_me(
    account_id: str = Depends(get_current_account_id),
    accounts: AccountService = Depends(get_account_service),
) -> AccountResponse:
    """Get the authenticated account with its current balance."""
    return AccountResponse.model_validate(accounts.get_account(account_id))
