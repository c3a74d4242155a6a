import math
from decimal import Decimal


class CoordinateUtil:
    def __init__(self) -> None:
        pass

    @staticmethod
    def format_number(value: float) -> str:
        """Render a float the way a browser prints a number: ``10`` rather
        than ``10.0`` and ``0.00001`` rather than ``1e-05``."""
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value == 0:
            return "0"

        magnitude = abs(value)
        if magnitude >= 1e21 or magnitude < 1e-7:
            mantissa, exponent = repr(float(value)).split("e")
            mantissa = mantissa[:-2] if mantissa.endswith(".0") else mantissa
            sign = "-" if exponent.startswith("-") else "+"
            return f"{mantissa}e{sign}{int(exponent.lstrip('+-'))}"

        if value == int(value):
            return str(int(value))

        text = repr(float(value))
        if "e" in text:
            text = format(Decimal(text), "f")

        return text

    @staticmethod
    def format_pair(latitude: float, longitude: float) -> str:
        return f"{CoordinateUtil.format_number(latitude)}, {CoordinateUtil.format_number(longitude)}"
