from fastapi import APIRouter
from fastapi import Depends
from fastapi import status

from vanguardmoney.application.use_cases.user_login import user_login
from vanguardmoney.application.use_cases.user_profile import user_profile
from vanguardmoney.application.use_cases.user_register import user_register
from vanguardmoney.domain.ports.repositories.users import UserRepository
from vanguardmoney.domain.ports.security import AccessTokenManagerPort
from vanguardmoney.domain.ports.security import PasswordHasherPort
from vanguardmoney.domain.schemas.auth import AuthSession
from vanguardmoney.domain.schemas.auth import TokenVerification
from vanguardmoney.domain.schemas.user import UserPublic
from vanguardmoney.infrastructure.entrypoints.api.dependencies import get_access_token_manager
from vanguardmoney.infrastructure.entrypoints.api.dependencies import get_current_user
from vanguardmoney.infrastructure.entrypoints.api.dependencies import get_password_hasher
from vanguardmoney.infrastructure.entrypoints.api.dependencies import get_token_verification
from vanguardmoney.infrastructure.entrypoints.api.dependencies import get_user_repository
from vanguardmoney.infrastructure.entrypoints.api.schemas import LoginRequest
from vanguardmoney.infrastructure.entrypoints.api.schemas import RegisterRequest

router = APIRouter()


@router.post("/register", name="auth_register", status_code=status.HTTP_201_CREATED)
async def register(
    payload: RegisterRequest,
    user_repository: UserRepository = Depends(get_user_repository),
    password_hasher: PasswordHasherPort = Depends(get_password_hasher),
    access_token_manager: AccessTokenManagerPort = Depends(get_access_token_manager),
) -> AuthSession:
    return await user_register(
        email=payload.email,
        password=payload.password,
        first_name=payload.first_name,
        last_name=payload.last_name,
        user_repository=user_repository,
        password_hasher=password_hasher,
        access_token_manager=access_token_manager,
    )


@router.post("/login", name="auth_login")
async def login(
    payload: LoginRequest,
    user_repository: UserRepository = Depends(get_user_repository),
    password_hasher: PasswordHasherPort = Depends(get_password_hasher),
    access_token_manager: AccessTokenManagerPort = Depends(get_access_token_manager),
) -> AuthSession:
    return await user_login(
        email=payload.email,
        password=payload.password,
        user_repository=user_repository,
        password_hasher=password_hasher,
        access_token_manager=access_token_manager,
    )


@router.post("/verify", name="auth_verify")
async def verify(verification: TokenVerification = Depends(get_token_verification)) -> TokenVerification:
    return verification


@router.get("/profile", name="auth_profile")
async def profile(
    current_user: UserPublic = Depends(get_current_user),
    user_repository: UserRepository = Depends(get_user_repository),
) -> UserPublic:
    return await user_profile(current_user.id, user_repository=user_repository)
