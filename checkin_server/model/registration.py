from pydantic import BaseModel, Field


class RegistrationRequest(BaseModel):
    name: str = Field(min_length=2)
    email: str = Field(pattern=r"^[a-zA-Z0-9.+_-]+@[a-zA-Z0-9-]+(\.[a-zA-Z0-9-]+)*\.[a-zA-Z]{2,}$")
    phone: str = Field(min_length=10, pattern=r"^[0-9+\-\s()]+$")
    company: str = Field(min_length=2)
