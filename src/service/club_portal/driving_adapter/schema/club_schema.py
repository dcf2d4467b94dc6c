from pydantic import BaseModel, EmailStr, SecretStr


class ClubRegisterRequest(BaseModel):
    name: str
    email: EmailStr
    password: SecretStr

    class Config:
        json_schema_extra = {
            'example': {
                'name': 'Photography Club',
                'email': 'photo@campus.edu',
                'password': 'P@ssw0rd',
            }
        }


class ClubLoginRequest(BaseModel):
    email: EmailStr
    password: SecretStr


class ClubResponse(BaseModel):
    id: int
    name: str
    email: str


class ClubAuthResponse(BaseModel):
    message: str
    token: str
    club: ClubResponse


class ClubDashboardResponse(BaseModel):
    message: str
    club: ClubResponse
