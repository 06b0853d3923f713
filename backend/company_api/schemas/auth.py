from pydantic import BaseModel, Field

class UserRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255, pattern=r"^[A-Za-z]+$")
    password: str = Field(min_length=1)

class UserCreateResponse(BaseModel):
    id: int
    name: str

class UserLoginResponse(BaseModel):
    hash: str
