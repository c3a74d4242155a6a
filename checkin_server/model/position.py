from typing import Optional

from pydantic import BaseModel

from .check_in import Location


class Position(BaseModel):
    latitude: float
    longitude: float
    # metres, as reported by the device
    accuracy: Optional[float] = None
    # epoch milliseconds of the fix
    timestamp: int

    def to_location(self, address: Optional[str] = None) -> Location:
        return Location(latitude=self.latitude, longitude=self.longitude, address=address)


class PositionOptions(BaseModel):
    enable_high_accuracy: bool
    timeout: float
    maximum_age: float
