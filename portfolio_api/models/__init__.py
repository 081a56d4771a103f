"""Model exports used by metadata discovery."""

from portfolio_api.models.contact_message import ContactMessage
from portfolio_api.models.project import Project

__all__ = ["ContactMessage", "Project"]
