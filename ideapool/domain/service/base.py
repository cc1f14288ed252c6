"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span an entity and its storage,
    translating storage signals into the errors API clients see.
    """

    pass
