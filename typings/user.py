from pydantic import BaseModel, field_validator


class UserCredential(BaseModel):
    email: str
    password: str


class UserSignup(UserCredential):
    @field_validator("password")
    @classmethod
    def password_fits_bcrypt(cls, value: str) -> str:
        # bcrypt only accepts up to 72 bytes
        if len(value.encode("utf-8")) > 72:
            raise ValueError("Password must be at most 72 bytes")
        return value
