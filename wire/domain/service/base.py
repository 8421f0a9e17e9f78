"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Services hold the sign-in and account rules that span repository calls;
    they receive their collaborators through the constructor.
    """

    pass
