"""Create enum types used by dashboard tables."""

from typing import Sequence
from typing import Union

from alembic import op
from sqlalchemy.dialects import postgresql

# revision identifiers, used by Alembic.
revision: str = "001_create_enums"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

invoice_status_enum = postgresql.ENUM(
    "pending",
    "paid",
    name="invoice_status",
)


def upgrade() -> None:
    """Create enum types before dependent tables are introduced."""
    invoice_status_enum.create(op.get_bind(), checkfirst=True)


def downgrade() -> None:
    invoice_status_enum.drop(op.get_bind(), checkfirst=True)
