import pytest

from checkin_server.model.check_in import CheckInEvent
from checkin_server.model.config import ServiceConfig


class FakeResponse:
    def __init__(self, status_code: int = 200, payload=None, text: str = "") -> None:
        self.status_code = status_code
        self._payload = payload
        self.text = text

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self):
        if self._payload is None:
            raise ValueError("no json body")
        return self._payload


@pytest.fixture
def config() -> ServiceConfig:
    return ServiceConfig(
        bot_token="123456:test-token",
        member_chat_id="-100member",
        guest_chat_id="-100guest",
    )


@pytest.fixture
def member_event() -> CheckInEvent:
    return CheckInEvent(
        fullName="Nguyen Van A",
        phoneNumber="0901234567",
        industry="Tech",
        attendeeType="Member",
        invitedBy="",
        location={"latitude": 10.123, "longitude": 106.456, "address": "District 1, HCMC"},
        timestamp="2024-01-01T10:00:00Z",
    )
