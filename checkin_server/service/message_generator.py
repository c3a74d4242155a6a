from typing import List

from ..model.check_in import CheckInEvent
from ..util.coordinate_util import CoordinateUtil


NO_LOCATION_LINE = "📍 Vị trí: Không có dữ liệu vị trí"


class MessageGenerator:
    def __init__(self) -> None:
        pass

    @staticmethod
    def get_check_in_message(event: CheckInEvent) -> str:
        lines: List[str] = [
            "🎯 THÔNG BÁO CHECK-IN THÀNH CÔNG",
            "",
            f"👤 Họ tên: {event.full_name}",
            f"📱 Số điện thoại: {event.phone_number}",
            f"🏢 Ngành nghề: {event.industry}",
            f"👥 Loại tham dự: {event.attendee_type.value}",
        ]

        if event.inviter is not None:
            lines.append(f"🤝 Khách của: {event.inviter}")

        if event.location is not None:
            lines.append(f"📍 Vị trí: {CoordinateUtil.format_pair(event.location.latitude, event.location.longitude)}")
            if event.location.address:
                lines.append(f"🗺️ Địa chỉ: {event.location.address}")
        else:
            lines.append(NO_LOCATION_LINE)

        lines.append(f"⏰ Thời gian: {event.timestamp}")
        lines.append("")
        lines.append("✅ Check-in thành công cho buổi họp BNI FELIX Chapter!")

        return "\n".join(lines)
