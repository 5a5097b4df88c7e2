from fastapi import APIRouter, Depends, status

from filecdn.database import Catalog, get_catalog
from filecdn.schemas.user_schema import UserCreate, UserLogin, AuthTokenResponse
from filecdn.services import account_service

router = APIRouter()


@router.post("/register", summary="new user registration", response_model=AuthTokenResponse,
             description=
             """
                Creates a new user based on the data provided. The username and email address must be unique,
                and the password is stored in hashed form. Returns a bearer token for the new account.
             """,
             responses={
                 201: {"description": "User created"},
                 409: {"description": "User already exists"},
                 422: {"description": "Request body does not meet the requirements"},
             },
             status_code=status.HTTP_201_CREATED)
def register_user(user: UserCreate, catalog: Catalog = Depends(get_catalog)):
    token = account_service.register(catalog, user.username, str(user.email), user.password)
    return {"token": token}


@router.post("/login", response_model=AuthTokenResponse, summary="User login to account",
             description="""
                User logs into the account with username and password.
                Every successful login returns a fresh bearer token.
             """,
             responses={
                 401: {"description": "Invalid credentials"}
             })
def login_user(user: UserLogin, catalog: Catalog = Depends(get_catalog)):
    token = account_service.login(catalog, user.username, user.password)
    return {"token": token}
