"""
Email sending port.
Defines the transport contract used to deliver notification emails.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class EmailMessage:
    """A single rendered email ready for delivery."""
    to: str
    subject: str
    html: str
    from_address: str
    from_name: Optional[str] = None
    text: Optional[str] = None

    @property
    def sender(self) -> str:
        """Formatted From header value."""
        if self.from_name:
            return f"{self.from_name} <{self.from_address}>"
        return self.from_address


class EmailSender(ABC):
    """
    Email transport interface.
    """

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """
        Whether credentials for the transport are available.
        """
        pass

    @abstractmethod
    async def send(self, message: EmailMessage) -> None:
        """
        Deliver the message.
        Raises an exception when delivery fails.
        """
        pass
