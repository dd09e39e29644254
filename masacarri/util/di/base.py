"""Provider metadata shared by every DI provider."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure that tests may replace with in-process stand-ins
Component = Literal["persistence", "notification"]


class ProviderBase(Provider):
    """Provider carrying the metadata used to assemble containers.

    ``__mock_component__`` is set on component bases only. Their
    subclasses set ``__is_mock__``, and ``__depends_on__`` lists components
    that must be real whenever this one is.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
    __depends_on__: ClassVar[set[Component]] = set()
