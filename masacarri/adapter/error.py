"""Infrastructure layer errors."""


class AdapterError(Exception):
    """Base infrastructure error."""

    pass


class MailDeliveryError(AdapterError):
    """Outbound mail could not be delivered."""

    pass
