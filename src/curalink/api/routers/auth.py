"""Registration, login and profile lookup routes."""

from fastapi import APIRouter, Depends

from curalink.api.dependencies import get_auth_service
from curalink.models.model_user import LoginRequest, RegisterRequest, UserRecord, UserType
from curalink.services.auth import AuthService

router = APIRouter()


@router.post("/register", status_code=201)
def register(body: RegisterRequest, auth: AuthService = Depends(get_auth_service)):
    user = auth.register(body)
    return {"message": "Registered successfully", "user": UserRecord.model_validate(user)}


@router.post("/login")
def login(body: LoginRequest, auth: AuthService = Depends(get_auth_service)):
    token, user = auth.login(body.email, body.password)
    return {"message": "Login successful", "token": token, "user": user}


@router.get("/patient/{email}")
def get_patient(email: str, auth: AuthService = Depends(get_auth_service)):
    return UserRecord.model_validate(auth.get_by_email_typed(email, UserType.PATIENT))


@router.get("/researcher/{email}")
def get_researcher(email: str, auth: AuthService = Depends(get_auth_service)):
    return UserRecord.model_validate(
        auth.get_by_email_typed(email, UserType.RESEARCHER)
    )
