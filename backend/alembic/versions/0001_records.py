from alembic import op
import sqlalchemy as sa

revision = "0001_records"
down_revision = None
branch_labels = None
depends_on = None


def _create_record_table(name: str):
    op.create_table(
        name,
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("name", sa.Text(), nullable=False),
        sa.Column("sector", sa.Text(), nullable=False),
        sa.Column("amount", sa.Float(), nullable=False),
        sa.Column("note", sa.Text(), nullable=False, server_default=""),
        sa.Column("date", sa.DateTime(), nullable=False),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )
    op.create_index(f"ix_{name}_sector", name, ["sector"], unique=False)
    op.create_index(f"ix_{name}_date", name, ["date"], unique=False)


def _drop_record_table(name: str):
    op.drop_index(f"ix_{name}_date", table_name=name)
    op.drop_index(f"ix_{name}_sector", table_name=name)
    op.drop_table(name)


def upgrade():
    _create_record_table("spends")
    _create_record_table("incomes")


def downgrade():
    _drop_record_table("incomes")
    _drop_record_table("spends")
