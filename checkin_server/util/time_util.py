from datetime import datetime, timezone, timedelta
from typing import Optional


class TimeUtil:
    def __init__(self) -> None:
        pass

    @staticmethod
    def now_timestamp(now: Optional[datetime] = None) -> str:
        tz = timezone(+timedelta(hours=7))
        now = now or datetime.now(tz)

        return now.astimezone(tz).strftime("%H:%M:%S %d/%m/%Y")
