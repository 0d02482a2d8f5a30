from __future__ import annotations


class CustomerNotFoundError(LookupError):
    def __init__(self, customer_id, range_hint: str):
        self.customer_id = customer_id
        self.range_hint = range_hint
        super().__init__(
            "Customer ID {} not found. Available customers: {}".format(customer_id, range_hint)
        )


def describe_error(exc: BaseException) -> str:
    """Message forwarded to API callers; DBAPI errors are passed through verbatim."""
    orig = getattr(exc, "orig", None)
    if orig is not None:
        return str(orig)
    return str(exc)


def failure_payload(exc: BaseException) -> dict:
    return {"success": False, "error": describe_error(exc)}


__all__ = ["CustomerNotFoundError", "describe_error", "failure_payload"]
