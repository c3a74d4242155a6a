from enum import Enum
from typing import Annotated, Optional

from pydantic import AliasChoices, BaseModel, BeforeValidator, Field


class AttendeeType(str, Enum):
    MEMBER = "Thành viên"
    INVITED_GUEST = "Khách mời"
    VISITING_GUEST = "Khách thăm"
    SPECIAL_GUEST = "Khách đặc biệt"

    @classmethod
    def parse(cls, value: "AttendeeType | str | None") -> Optional["AttendeeType"]:
        if isinstance(value, AttendeeType):
            return value
        if value is None:
            return None

        key = str(value).strip().casefold()
        for attendee_type in cls:
            if key in (attendee_type.value.casefold(), _ALIASES[attendee_type].casefold()):
                return attendee_type

        return None


_ALIASES: dict[AttendeeType, str] = {
    AttendeeType.MEMBER: "Member",
    AttendeeType.INVITED_GUEST: "Invited Guest",
    AttendeeType.VISITING_GUEST: "Visiting Guest",
    AttendeeType.SPECIAL_GUEST: "Special Guest",
}


def _parse_attendee_type(value):
    attendee_type = AttendeeType.parse(value)
    if attendee_type is None:
        raise ValueError(f"unknown attendee type: {value!r}")

    return attendee_type


KnownAttendeeType = Annotated[AttendeeType, BeforeValidator(_parse_attendee_type)]


class Location(BaseModel):
    latitude: float
    longitude: float
    address: Optional[str] = None


class CheckInEvent(BaseModel):
    full_name: str = Field(min_length=1, validation_alias=AliasChoices("full_name", "fullName"))
    phone_number: str = Field(validation_alias=AliasChoices("phone_number", "phoneNumber"))
    industry: str
    attendee_type: KnownAttendeeType = Field(validation_alias=AliasChoices("attendee_type", "attendeeType"))
    invited_by: Optional[str] = Field(default=None, validation_alias=AliasChoices("invited_by", "invitedBy"))
    location: Optional[Location] = None
    timestamp: str

    @property
    def inviter(self) -> Optional[str]:
        if self.invited_by is None or not self.invited_by.strip():
            return None

        return self.invited_by
