# slidr/routers/auth.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..crud.user import UserStore
from ..database.database import get_db
from ..schemas.auth import AuthResponse, SignInRequest, SignUpRequest
from ..services.auth import AuthService

router = APIRouter(prefix="/auth", tags=["auth"])


def get_auth_service(db: Session = Depends(get_db)) -> AuthService:
    return AuthService(UserStore(db))


@router.post("/signup", response_model=AuthResponse)
def signup(payload: SignUpRequest, service: AuthService = Depends(get_auth_service)):
    return service.signup(payload)


@router.post("/login", response_model=AuthResponse)
def login(payload: SignInRequest, service: AuthService = Depends(get_auth_service)):
    return service.login(payload)
