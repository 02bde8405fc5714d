from __future__ import annotations


class GcdError(ValueError):
    """Rejected GCD input, carrying a short detail and a machine-readable code."""

    def __init__(
        self,
        detail: str,
        *,
        status_code: int = 400,
        code: str | None = None,
    ) -> None:
        super().__init__(detail)
        self.detail = detail
        self.status_code = status_code
        self.code = code


class OutOfRangeError(GcdError):
    """An input is the 32-bit minimum or does not fit in 32 bits at all."""

    def __init__(self, detail: str, *, argument: str | None = None) -> None:
        super().__init__(detail, code="out_of_range")
        self.argument = argument


class InvalidArgumentError(GcdError):
    def __init__(self, detail: str) -> None:
        super().__init__(detail, code="invalid_argument")


__all__ = ["GcdError", "OutOfRangeError", "InvalidArgumentError"]
