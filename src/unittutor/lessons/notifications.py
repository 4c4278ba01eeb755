"""Welcome notifications, the subject of the mocking lesson.

``WelcomeNotifier`` receives its mailer instead of creating one, so tests can
hand it a ``unittest.mock.Mock`` and assert on the call.
"""

from __future__ import annotations

import logging
from typing import Protocol

from .errors import InvalidRecipientError, NotificationError

logger = logging.getLogger(__name__)

WELCOME_SUBJECT = "Welcome aboard!"


class Mailer(Protocol):  # pylint: disable=too-few-public-methods
    """Anything that can send an email."""

    def send(self, to: str, subject: str, body: str) -> bool:
        """Send a message and return True when it was accepted."""


class WelcomeNotifier:  # pylint: disable=too-few-public-methods
    """Sends a welcome email through an injected :class:`Mailer`."""

    def __init__(self, mailer: Mailer) -> None:
        self._mailer = mailer

    def notify(self, user_email: str, name: str) -> bool:
        """Send the welcome message to ``user_email``.

        Returns:
            bool: Whatever the mailer returned.

        Raises:
            InvalidRecipientError: If ``user_email`` is blank; the mailer is not called.
            NotificationError: If the mailer raises.
        """
        if not user_email.strip():
            raise InvalidRecipientError
        body = f"Hi {name}, thanks for signing up."
        try:
            accepted = self._mailer.send(user_email, WELCOME_SUBJECT, body)
        except Exception as e:  # pylint: disable=broad-except
            logger.warning("Mailer failed for %s: %s", user_email, e)
            raise NotificationError(user_email) from e
        logger.debug("Welcome mail to %s accepted=%s", user_email, accepted)
        return accepted
