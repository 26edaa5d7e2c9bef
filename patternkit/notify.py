"""Users and administrators that can be sent notifications."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Protocol


class Notifier(Protocol):
    """Anything that can send a notification and report what it sent."""

    def notify(self) -> str: ...


@dataclass
class User:
    """A user with a name and an e-mail address."""

    name: str
    email: str

    def notify(self) -> str:
        """Print and return the message sent to this user."""
        message = f"Sending user email to {self.name}<{self.email}>"
        print(message)
        return message

    def change_email(self, email: str) -> None:
        """Replace the user's e-mail address."""
        self.email = email


@dataclass
class Admin:
    """An administrator built around a user, with a privilege level.

    The admin's own ``notify`` takes precedence; the inner user's is still
    reachable through ``admin.user.notify()``.
    """

    user: User
    level: str = ""

    @property
    def name(self) -> str:
        return self.user.name

    @property
    def email(self) -> str:
        return self.user.email

    def notify(self) -> str:
        """Print and return the message sent to this administrator."""
        message = f"Sending admin email to {self.name}<{self.email}>"
        print(message)
        return message


class Duration(int):
    """A length of time counted as a whole number."""

    def pretty(self) -> str:
        """Return the duration as a readable line."""
        return f"Duration: {int(self)}"


def send_notification(notifier: Notifier) -> str:
    """Send a notification through anything that can notify; return the message."""
    return notifier.notify()


def main(argv: list[str] | None = None) -> int:
    """Send notifications to a few users and administrators."""
    argparse.ArgumentParser(description="Send sample notifications.").parse_args(argv)

    bill = User("Bill", "bill@example.com")
    lisa = User("Lisa", "lisa@example.com")
    bill.notify()
    lisa.notify()
    bill.change_email("bill@newdomain.example.com")
    lisa.change_email("lisa@newdomain.example.com")

    send_notification(bill)

    admin = Admin(User("john smith", "john@example.com"), level="super")
    send_notification(admin)
    admin.user.notify()
    admin.notify()

    print(Duration(42).pretty())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())