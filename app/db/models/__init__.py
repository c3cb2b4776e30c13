"""Model module imports for SQLAlchemy relationship registration."""

from app.db.models.customer import Customer
from app.db.models.invoice import Invoice
from app.db.models.user import User

__all__ = [
    "Customer",
    "Invoice",
    "User",
]
