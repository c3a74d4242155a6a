import logging
from enum import Enum
from typing import NamedTuple, Optional

from ..model.check_in import CheckInEvent
from ..model.config import ServiceConfig
from .destination_router import route_destination
from .http_service import HttpServiceManager
from .message_generator import MessageGenerator


class DispatchFailureReason(str, Enum):
    MISSING_TOKEN = "missing_token"
    MISSING_DESTINATION = "missing_destination"
    HTTP_ERROR = "http_error"
    PROVIDER_REJECTED = "provider_rejected"
    EXCEPTION = "exception"


class DispatchResult(NamedTuple):
    delivered: bool
    reason: Optional[DispatchFailureReason] = None


class NotificationDispatcher:

    def __init__(
        self,
        config: ServiceConfig,
        http_service: Optional[HttpServiceManager] = None,
    ):
        self._config = config
        self._http = http_service or HttpServiceManager(timeout=config.request_timeout)
        self.logger = logging.getLogger("uvicorn")
        self.logger.setLevel(logging.INFO)

    def dispatch(self, event: CheckInEvent) -> bool:
        return self.dispatch_with_reason(event).delivered

    def dispatch_with_reason(self, event: CheckInEvent) -> DispatchResult:
        try:
            return self._send(event)
        except Exception as e:
            self.logger.error(f"{event.full_name} -> Check-in notification failed. Error is {e}")
            return DispatchResult(False, DispatchFailureReason.EXCEPTION)

    def _send(self, event: CheckInEvent) -> DispatchResult:
        if not self._config.bot_token:
            self.logger.error("Telegram bot token is missing")
            return DispatchResult(False, DispatchFailureReason.MISSING_TOKEN)

        chat_id = route_destination(
            event.attendee_type, self._config.member_chat_id, self._config.guest_chat_id
        )
        if not chat_id:
            self.logger.error(f"No group id configured for attendee type : {event.attendee_type.value}")
            return DispatchResult(False, DispatchFailureReason.MISSING_DESTINATION)

        message = MessageGenerator.get_check_in_message(event)
        self.logger.info(f"Sending check-in of {event.full_name} to {chat_id}, message length : {len(message)}")

        response = self._http.post(
            self._build_url(),
            {"Content-Type": "application/json"},
            {"chat_id": chat_id, "text": message, "parse_mode": "HTML"},
        )

        if not response.ok:
            self.logger.error(f"Telegram API error : {response.status_code} - {response.text}")
            return DispatchResult(False, DispatchFailureReason.HTTP_ERROR)

        result = response.json()
        if not result.get("ok"):
            self.logger.error(f"Telegram API rejected the message : {result}")
            return DispatchResult(False, DispatchFailureReason.PROVIDER_REJECTED)

        self.logger.info(f"{event.full_name} -> Check-in notification is successful.")
        return DispatchResult(True)

    def _build_url(self) -> str:
        return f"{self._config.telegram_api_url}/bot{self._config.bot_token}/sendMessage"
