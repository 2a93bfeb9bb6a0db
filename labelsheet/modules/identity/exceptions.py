"""Identity domain specific exceptions."""


class IdentityError(Exception):
    """Base class for sign-in failures."""


class InvalidTokenError(IdentityError):
    """Raised when a custom token is malformed, expired or wrongly signed."""


class AnonymousSignInDisabledError(IdentityError):
    """Raised when anonymous sign-in is turned off in configuration."""


class IdentityBootstrapError(IdentityError):
    """Raised when neither token nor anonymous sign-in yields a user.

    Fatal to the session: nothing can be loaded or saved without an owner.
    """

    message = "The user could not be signed in."
