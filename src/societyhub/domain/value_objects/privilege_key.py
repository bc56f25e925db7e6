"""Privilege keys - closed catalog of society permissions."""

from enum import StrEnum


class PrivilegeKey(StrEnum):
    """Keys that roles may carry."""

    EVENT_MANAGEMENT = "event_management"
    MEMBER_MANAGEMENT = "member_management"
    ANNOUNCEMENT_MANAGEMENT = "announcement_management"
    CONTENT_MANAGEMENT = "content_management"
    EVENT_TICKET_HANDLING = "event_ticket_handling"
    PAYMENT_FINANCE_MANAGEMENT = "payment_finance_management"
    SOCIETY_SETTINGS_MANAGEMENT = "society_settings_management"
    TASK_MANAGEMENT = "task_management"
    MEETING_MANAGEMENT = "meeting_management"
