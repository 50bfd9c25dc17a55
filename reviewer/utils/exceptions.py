"""Base exception shared by every context."""


class ReviewerError(Exception):
    """
    Base for failures surfaced to the user.

    Each subclass carries a short static ``user_message``. The exception's own
    message holds diagnostic detail and goes to the log only.
    """

    user_message = "Something went wrong."
