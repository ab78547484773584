"""Delimiter policies for delimited attribute lists.

A delimiter policy is a stateless tag class. It is passed as a type
parameter to ``AttributeList`` so that lists using different separators
are different classes and can't be mixed up.
"""


class Delimiter:
    """Base class for delimiter policies.

    Subclasses set ``SYMBOL``; they are never instantiated.
    """

    SYMBOL: str = ""

    def __init_subclass__(cls, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        if not cls.SYMBOL:
            raise TypeError(f"{cls.__name__} must define a non-empty SYMBOL")

    @classmethod
    def symbol(cls) -> str:
        """Return the separator used for both joining and splitting."""
        return cls.SYMBOL


class Semicolon(Delimiter):
    """``;``-separated lists, e.g. ``android:authorities``."""

    SYMBOL = ";"


class VerticalBar(Delimiter):
    """``|``-separated flag lists, e.g. ``android:configChanges``."""

    SYMBOL = "|"
