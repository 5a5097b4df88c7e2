from pydantic import BaseModel, EmailStr, Field


class UserCreate(BaseModel):
    username: str = Field(..., min_length=1, examples=["alice"], description="Unique username of the user")
    email: EmailStr = Field(..., examples=["a@x.com"], description="Unique email of the user")
    password: str = Field(..., min_length=1, examples=["pw1"], description="Password for the user account")


class UserLogin(BaseModel):
    username: str = Field(..., examples=["alice"], description="Username chosen at registration")
    password: str = Field(..., examples=["pw1"], description="Password for the user account")


class AuthTokenResponse(BaseModel):
    token: str = Field(..., examples=["Qm3c9ZkYVJ2n7xTtG0aWcR8pLh4sE1uD"],
                       description="Opaque bearer token, send it as 'Authorization: Bearer <token>'")
