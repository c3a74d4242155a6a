import asyncio
import logging
import time
from typing import Callable, List, Optional, Protocol

from ..model.position import Position, PositionOptions


HIGH_ACCURACY_TIER = PositionOptions(enable_high_accuracy=True, timeout=8.0, maximum_age=60.0)
FALLBACK_TIER = PositionOptions(enable_high_accuracy=False, timeout=15.0, maximum_age=300.0)
# seconds a device clock may run ahead of ours
MAX_CLOCK_SKEW = 5.0


class LocationError(Exception):
    code: int = 0
    name: str = "unknown"
    message: str = "Không thể lấy vị trí"

    def __init__(self, detail: Optional[str] = None) -> None:
        super().__init__(detail or self.message)


class LocationUnsupportedError(LocationError):
    name = "unsupported"
    message = "Trình duyệt không hỗ trợ định vị GPS"


class LocationPermissionDeniedError(LocationError):
    code = 1
    name = "permission_denied"
    message = "Người dùng từ chối quyền truy cập vị trí"


class LocationPositionUnavailableError(LocationError):
    code = 2
    name = "position_unavailable"
    message = "Thông tin vị trí không khả dụng"


class LocationTimeoutError(LocationError):
    code = 3
    name = "timeout"
    message = "Hết thời gian chờ lấy vị trí"


class LocationUnknownError(LocationError):
    pass


_ERRORS_BY_CODE = {
    LocationPermissionDeniedError.code: LocationPermissionDeniedError,
    LocationPositionUnavailableError.code: LocationPositionUnavailableError,
    LocationTimeoutError.code: LocationTimeoutError,
}


def location_error_from_code(code: int) -> LocationError:
    return _ERRORS_BY_CODE.get(code, LocationUnknownError)()


class GeolocationProvider(Protocol):
    async def get_current_position(self, options: PositionOptions) -> Position:
        ...


class ReportedPositionProvider:
    """Serves the fix (or the error code) a browser reported with its request.

    The fix is checked against each request's options the way the device
    would: too old for ``maximum_age`` or too coarse for a high accuracy
    request counts as unavailable.
    """

    def __init__(
        self,
        position: Optional[Position] = None,
        error_code: Optional[int] = None,
        high_accuracy_threshold: float = 100.0,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._position = position
        self._error_code = error_code
        self._high_accuracy_threshold = high_accuracy_threshold
        self._clock = clock

    async def get_current_position(self, options: PositionOptions) -> Position:
        if self._error_code is not None:
            raise location_error_from_code(self._error_code)

        if self._position is None:
            raise LocationPositionUnavailableError()

        age = self._clock() - self._position.timestamp / 1000
        if age < -MAX_CLOCK_SKEW:
            raise LocationPositionUnavailableError(f"position is dated {-age:.0f}s in the future")
        if age > options.maximum_age:
            raise LocationPositionUnavailableError(f"position is {age:.0f}s old")

        accuracy = self._position.accuracy
        if options.enable_high_accuracy and (accuracy is None or accuracy > self._high_accuracy_threshold):
            raise LocationPositionUnavailableError(f"position accuracy {accuracy} is too coarse")

        return self._position


class LocationResolver:

    def __init__(
        self,
        provider: Optional[GeolocationProvider],
        tiers: Optional[List[PositionOptions]] = None,
    ) -> None:
        self._provider = provider
        self._tiers = tiers if tiers is not None else [HIGH_ACCURACY_TIER, FALLBACK_TIER]
        self.logger = logging.getLogger("uvicorn")
        self.logger.setLevel(logging.INFO)

    async def resolve(self) -> Position:
        if self._provider is None:
            raise LocationUnsupportedError()

        error: LocationError = LocationUnknownError()
        for options in self._tiers:
            try:
                return await self._attempt(options)
            except LocationError as e:
                self.logger.info(f"Location attempt (high accuracy={options.enable_high_accuracy}) failed : {e}")
                error = e

        raise error

    async def _attempt(self, options: PositionOptions) -> Position:
        try:
            return await asyncio.wait_for(
                self._provider.get_current_position(options), timeout=options.timeout
            )
        except asyncio.TimeoutError:
            raise LocationTimeoutError()
        except LocationError:
            raise
        except Exception as e:
            raise LocationUnknownError(str(e)) from e
