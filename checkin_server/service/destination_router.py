from ..model.check_in import AttendeeType


MEMBER_LABELS = (AttendeeType.MEMBER.value, "Member")


def route_destination(attendee_type: AttendeeType | str, member_chat_id: str, guest_chat_id: str) -> str:
    """Members go to the member group; every guest category, and anything
    else that is not an exact member label, goes to the guest group."""
    if attendee_type is AttendeeType.MEMBER or attendee_type in MEMBER_LABELS:
        return member_chat_id

    return guest_chat_id
