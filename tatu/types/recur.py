from tatu import Value


class RecurMarker:
    """Rebinding arguments produced by `recur`, consumed by the call trampoline."""

    __slots__ = ("args",)

    def __init__(self, args: list[Value]):
        self.args = args

    def __str__(self) -> str:
        return "__recur__"

    def __repr__(self) -> str:
        return f"RecurMarker({self.args!r})"
