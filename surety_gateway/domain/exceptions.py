"""Domain-specific exceptions raised at the input boundary; the scoring engine itself never raises"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class UnknownLineItemError(DomainException):
    """Financial statement key is not part of the line item vocabulary"""

    def __init__(self, key: object):
        self.key = key
        super().__init__(f"Unknown financial line item: {key!r}")
