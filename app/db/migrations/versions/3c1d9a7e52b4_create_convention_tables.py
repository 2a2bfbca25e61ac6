"""Create convention tables

Revision ID: 3c1d9a7e52b4
Revises:
Create Date: 2026-10-18 10:02:41.118305

"""
from alembic import op
import sqlalchemy as sa


revision = '3c1d9a7e52b4'
down_revision = None
branch_labels = None
depends_on = None

LOCATION_COLUMNS = (
    ("description", sa.Text),
    ("website_url", sa.String),
    ("google_maps_url", sa.String),
    ("street_address", sa.String),
    ("city", sa.String),
    ("state_region", sa.String),
    ("postal_code", sa.String),
    ("country", sa.String),
    ("contact_email", sa.String),
    ("contact_phone", sa.String),
    ("parking_info", sa.Text),
    ("public_transport_info", sa.Text),
    ("overall_accessibility_notes", sa.Text),
)


def location_columns():
    return [sa.Column(name, type_(), nullable=True) for name, type_ in LOCATION_COLUMNS] + [
        sa.Column("amenities", sa.JSON(), nullable=False),
    ]


def convention_fk():
    return sa.Column(
        "convention_id",
        sa.String(),
        sa.ForeignKey("conventions.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )


def upgrade():
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), primary_key=True, index=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False, unique=True, index=True),
        sa.Column("password_hash", sa.String(), nullable=False),
        sa.Column(
            "role",
            sa.Enum("ADMIN", "ORGANIZER", "USER", name="userrole"),
            nullable=False,
        ),
    )

    op.create_table(
        "convention_series",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("organizer_user_id", sa.Integer(), sa.ForeignKey("users.id"), nullable=False, index=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )

    op.create_table(
        "conventions",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("slug", sa.String(), nullable=False, unique=True, index=True),
        sa.Column("series_id", sa.String(), sa.ForeignKey("convention_series.id"), nullable=False, index=True),
        sa.Column("start_date", sa.Date(), nullable=True),
        sa.Column("end_date", sa.Date(), nullable=True),
        sa.Column("is_one_day_event", sa.Boolean(), nullable=False),
        sa.Column("is_tbd", sa.Boolean(), nullable=False),
        sa.Column("city", sa.String(), nullable=True),
        sa.Column("state_abbreviation", sa.String(), nullable=True),
        sa.Column("state_name", sa.String(), nullable=True),
        sa.Column("country", sa.String(), nullable=True),
        sa.Column(
            "status",
            sa.Enum("DRAFT", "PUBLISHED", "PAST", "CANCELLED", name="conventionstatus"),
            nullable=False,
        ),
        sa.Column("description_short", sa.String(), nullable=True),
        sa.Column("description_main", sa.Text(), nullable=True),
        sa.Column("website_url", sa.String(), nullable=True),
        sa.Column("registration_url", sa.String(), nullable=True),
        sa.Column("cover_image_url", sa.String(), nullable=True),
        sa.Column("profile_image_url", sa.String(), nullable=True),
        sa.Column("guests_stay_at_primary_venue", sa.Boolean(), nullable=False),
        sa.Column("deleted_at", sa.DateTime(), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), nullable=False),
    )

    op.create_table(
        "venues",
        sa.Column("id", sa.String(), primary_key=True),
        convention_fk(),
        sa.Column("venue_name", sa.String(), nullable=False),
        *location_columns(),
        sa.Column("is_primary_venue", sa.Boolean(), nullable=False),
    )

    op.create_table(
        "hotels",
        sa.Column("id", sa.String(), primary_key=True),
        convention_fk(),
        sa.Column("hotel_name", sa.String(), nullable=False),
        *location_columns(),
        sa.Column("group_rate_or_booking_code", sa.String(), nullable=True),
        sa.Column("group_price", sa.Float(), nullable=True),
        sa.Column("booking_link", sa.String(), nullable=True),
        sa.Column("booking_cutoff_date", sa.Date(), nullable=True),
        sa.Column("is_primary_hotel", sa.Boolean(), nullable=False),
        sa.Column("is_at_primary_venue_location", sa.Boolean(), nullable=False),
    )

    op.create_table(
        "venue_photos",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("venue_id", sa.String(), sa.ForeignKey("venues.id", ondelete="CASCADE"), nullable=False, index=True),
        sa.Column("url", sa.String(), nullable=False),
        sa.Column("caption", sa.Text(), nullable=True),
    )

    op.create_table(
        "hotel_photos",
        sa.Column("id", sa.String(), primary_key=True),
        sa.Column("hotel_id", sa.String(), sa.ForeignKey("hotels.id", ondelete="CASCADE"), nullable=False, index=True),
        sa.Column("url", sa.String(), nullable=False),
        sa.Column("caption", sa.Text(), nullable=True),
    )

    op.create_table(
        "price_tiers",
        sa.Column("id", sa.String(), primary_key=True),
        convention_fk(),
        sa.Column("label", sa.String(), nullable=False),
        sa.Column("amount", sa.Float(), nullable=False),
        sa.Column("order", sa.Integer(), nullable=False),
    )

    op.create_table(
        "price_discounts",
        sa.Column("id", sa.String(), primary_key=True),
        convention_fk(),
        sa.Column("price_tier_id", sa.String(), sa.ForeignKey("price_tiers.id", ondelete="CASCADE"), nullable=False),
        sa.Column("cutoff_date", sa.Date(), nullable=False),
        sa.Column("discounted_amount", sa.Float(), nullable=False),
    )

    op.create_table(
        "schedule_days",
        sa.Column("id", sa.String(), primary_key=True),
        convention_fk(),
        sa.Column("day_offset", sa.Integer(), nullable=False),
        sa.Column("label", sa.String(), nullable=True),
        sa.Column("is_official", sa.Boolean(), nullable=False),
    )


def downgrade():
    for table in (
        "schedule_days",
        "price_discounts",
        "price_tiers",
        "hotel_photos",
        "venue_photos",
        "hotels",
        "venues",
        "conventions",
        "convention_series",
        "users",
    ):
        op.drop_table(table)

    sa.Enum(name="conventionstatus").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="userrole").drop(op.get_bind(), checkfirst=True)
