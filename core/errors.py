"""Errors raised by the local notification/price service adapter."""


class NotificationServiceError(Exception):
    """The notification service answered, but not with something usable."""
