"""
PORTS - Interfaces to collaborators outside the domain

Infrastructure provides the implementations:
- Notifier: user-visible notices (toast/alert)
- AssistantGateway: the hosted chat assistant
- MailGateway: transactional email
"""

from discoverzim.domain.ports.notifier import AccessNotice, Notifier
from discoverzim.domain.ports.assistant_gateway import AssistantGateway
from discoverzim.domain.ports.mail_gateway import MailGateway

__all__ = [
    "AccessNotice",
    "Notifier",
    "AssistantGateway",
    "MailGateway",
]
