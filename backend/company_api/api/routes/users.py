from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import Response
from sqlalchemy.exc import IntegrityError

from company_api.api.deps import get_service
from company_api.core.errors import AuthenticationError, CreateTokenError, CreateUserError
from company_api.schemas.auth import UserCreateResponse, UserLoginResponse, UserRequest
from company_api.services.company_service import CompanyService

router = APIRouter()

HEADER_EXPIRES_AFTER = "X-Expires-After"


@router.post("/users", response_model=UserCreateResponse)
def create_user(payload: UserRequest, service: CompanyService = Depends(get_service)):
    try:
        user = service.create_user(payload)
    except CreateUserError as e:
        if isinstance(e.__cause__, IntegrityError):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User name already registered")
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))
    return {"id": user.id, "name": user.name}


@router.post("/login", response_model=UserLoginResponse)
def login(payload: UserRequest, response: Response, service: CompanyService = Depends(get_service)):
    """Check credentials and return a signed access token in ``hash``.

    Returns 401 if the user is unknown or the password is wrong.
    """
    try:
        user = service.login(payload)
    except AuthenticationError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    try:
        token, expires_at = service.issue_token(str(user.id))
    except CreateTokenError as e:
        raise HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e))

    response.headers[HEADER_EXPIRES_AFTER] = expires_at.astimezone().isoformat()
    return {"hash": token}
