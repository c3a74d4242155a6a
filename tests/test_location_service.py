import asyncio

import pytest

from checkin_server.model.position import Position, PositionOptions
from checkin_server.service.location_service import (
    FALLBACK_TIER,
    HIGH_ACCURACY_TIER,
    LocationPermissionDeniedError,
    LocationPositionUnavailableError,
    LocationResolver,
    LocationTimeoutError,
    LocationUnknownError,
    LocationUnsupportedError,
    ReportedPositionProvider,
)


NOW = 1_704_103_200.0
FIX = Position(latitude=10.123, longitude=106.456, accuracy=20.0, timestamp=int(NOW * 1000))


class ScriptedProvider:
    """Answers each attempt with the next scripted outcome."""

    def __init__(self, *outcomes) -> None:
        self.outcomes = list(outcomes)
        self.calls: list[PositionOptions] = []

    async def get_current_position(self, options: PositionOptions) -> Position:
        self.calls.append(options)
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        return outcome


class HangingProvider:
    def __init__(self) -> None:
        self.calls = 0

    async def get_current_position(self, options: PositionOptions) -> Position:
        self.calls += 1
        await asyncio.sleep(10)
        return FIX


def test_tiers_match_device_settings() -> None:
    assert HIGH_ACCURACY_TIER == PositionOptions(enable_high_accuracy=True, timeout=8.0, maximum_age=60.0)
    assert FALLBACK_TIER == PositionOptions(enable_high_accuracy=False, timeout=15.0, maximum_age=300.0)


def test_first_tier_success_makes_one_attempt() -> None:
    provider = ScriptedProvider(FIX)

    assert asyncio.run(LocationResolver(provider).resolve()) == FIX
    assert provider.calls == [HIGH_ACCURACY_TIER]


def test_falls_back_to_low_accuracy_tier() -> None:
    provider = ScriptedProvider(LocationTimeoutError(), FIX)

    assert asyncio.run(LocationResolver(provider).resolve()) == FIX
    assert provider.calls == [HIGH_ACCURACY_TIER, FALLBACK_TIER]


def test_permission_denied_on_both_tiers_after_two_attempts() -> None:
    provider = ScriptedProvider(LocationPermissionDeniedError(), LocationPermissionDeniedError())

    with pytest.raises(LocationPermissionDeniedError):
        asyncio.run(LocationResolver(provider).resolve())

    assert len(provider.calls) == 2


def test_second_tier_error_is_the_one_reported() -> None:
    provider = ScriptedProvider(LocationPermissionDeniedError(), LocationPositionUnavailableError())

    with pytest.raises(LocationPositionUnavailableError) as exc_info:
        asyncio.run(LocationResolver(provider).resolve())

    assert exc_info.value.code == 2
    assert exc_info.value.message == "Thông tin vị trí không khả dụng"


def test_unexpected_provider_failure_is_unknown() -> None:
    provider = ScriptedProvider(RuntimeError("gps crashed"), RuntimeError("gps crashed"))

    with pytest.raises(LocationUnknownError):
        asyncio.run(LocationResolver(provider).resolve())


def test_missing_provider_is_unsupported() -> None:
    with pytest.raises(LocationUnsupportedError):
        asyncio.run(LocationResolver(None).resolve())


def test_each_tier_is_bounded_by_its_timeout() -> None:
    provider = HangingProvider()
    tiers = [
        PositionOptions(enable_high_accuracy=True, timeout=0.01, maximum_age=60.0),
        PositionOptions(enable_high_accuracy=False, timeout=0.01, maximum_age=300.0),
    ]

    with pytest.raises(LocationTimeoutError):
        asyncio.run(LocationResolver(provider, tiers=tiers).resolve())

    assert provider.calls == 2


def test_reported_coarse_fix_is_accepted_by_fallback_tier() -> None:
    coarse = FIX.model_copy(update={"accuracy": 1500.0})
    provider = ReportedPositionProvider(position=coarse, clock=lambda: NOW + 30)

    with pytest.raises(LocationPositionUnavailableError):
        asyncio.run(provider.get_current_position(HIGH_ACCURACY_TIER))

    assert asyncio.run(LocationResolver(provider).resolve()) == coarse


def test_reported_fix_older_than_fallback_age_is_unavailable() -> None:
    provider = ReportedPositionProvider(position=FIX, clock=lambda: NOW + 301)

    with pytest.raises(LocationPositionUnavailableError):
        asyncio.run(LocationResolver(provider).resolve())


def test_reported_browser_error_code_is_preserved() -> None:
    provider = ReportedPositionProvider(error_code=1)

    with pytest.raises(LocationPermissionDeniedError):
        asyncio.run(LocationResolver(provider).resolve())


def test_reported_fix_from_the_future_is_unavailable() -> None:
    provider = ReportedPositionProvider(position=FIX, clock=lambda: NOW - 3600)

    with pytest.raises(LocationPositionUnavailableError):
        asyncio.run(LocationResolver(provider).resolve())


def test_small_clock_skew_is_tolerated() -> None:
    provider = ReportedPositionProvider(position=FIX, clock=lambda: NOW - 2)

    assert asyncio.run(LocationResolver(provider).resolve()) == FIX


def test_unsupported_error_is_named_apart_from_unknown() -> None:
    assert LocationUnsupportedError().name == "unsupported"
    assert LocationUnknownError().name == "unknown"
