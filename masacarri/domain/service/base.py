"""Base service class for domain services."""


class Service:
    """Marker base for domain services.

    Services hold the rules around one aggregate and talk to repositories
    through their abstract interfaces only.
    """

    pass
