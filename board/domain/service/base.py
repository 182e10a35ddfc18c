"""Domain service base."""


class Service:
    """Marker base for domain services.

    A service owns the operations on one aggregate that need its repository,
    such as loading, authorizing and saving a post as one unit.
    """
