"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the business rules that span more than one
    aggregate: ownership checks, version bookkeeping and the
    existence checks that guard writes.
    """

    pass
