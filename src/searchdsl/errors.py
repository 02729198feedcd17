"""
Error types raised by the request builders.

Only structural violations are reported here: the builders never check a
request against the feature set of the target engine.
"""


class InvalidInputError(ValueError):
    """
    Raised synchronously when a builder call violates the structural contract.

    Typical causes are an unknown bool bucket, a URI parameter outside the
    allow-list, or an unknown endpoint name. The call that raises leaves the
    receiving object unchanged.
    """

    pass
