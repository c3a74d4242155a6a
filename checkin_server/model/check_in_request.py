from typing import Optional

from pydantic import AliasChoices, BaseModel, Field

from .check_in import KnownAttendeeType
from .position import Position


class CheckInRequest(BaseModel):
    full_name: str = Field(min_length=1, validation_alias=AliasChoices("full_name", "fullName"))
    phone_number: str = Field(validation_alias=AliasChoices("phone_number", "phoneNumber"))
    industry: str
    attendee_type: KnownAttendeeType = Field(validation_alias=AliasChoices("attendee_type", "attendeeType"))
    invited_by: Optional[str] = Field(default=None, validation_alias=AliasChoices("invited_by", "invitedBy"))
    timestamp: Optional[str] = None

    location_supported: bool = Field(
        default=True, validation_alias=AliasChoices("location_supported", "locationSupported")
    )
    # What the browser geolocation call produced, if it was attempted.
    position: Optional[Position] = None
    location_error_code: Optional[int] = Field(
        default=None, validation_alias=AliasChoices("location_error_code", "locationErrorCode")
    )
    address: Optional[str] = None
