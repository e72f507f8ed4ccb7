"""Error taxonomy. Every error carries the message shown to the user."""


class LifeLinkError(Exception):
    message = "Something went wrong."

    def __init__(self, message: str = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class AuthError(LifeLinkError):
    """Base for recoverable sign-in / registration failures."""


class AccountNotFound(AuthError):
    message = "Account not found. Please create an account first."


class InvalidCredentials(AuthError):
    message = "Incorrect password. The default is 1234."


class EmailAlreadyRegistered(AuthError):
    message = "This email is already registered. Please sign in."


class NoAccountForRole(AuthError):
    def __init__(self, role):
        self.role = role
        label = getattr(role, 'value', role)
        super().__init__(f"No {str(label).lower()} account found.")


class PersistenceWriteFailure(LifeLinkError):
    message = "Could not write to local storage."


class ChatCollaboratorFailure(LifeLinkError):
    message = "Chat service request failed."
