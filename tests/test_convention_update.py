"""Tests for the convention update orchestrator."""

from datetime import date, datetime

import pytest

import app.services.convention_update as convention_update
import app.services.venue_hotel as venue_hotel
from app.models.convention_series import ConventionSeries
from app.models.pricing import PriceDiscount, PriceTier
from app.models.schedule_day import ScheduleDay
from app.models.venue import Venue
from app.schemas.convention import ConventionUpdate
from app.services.convention_update import update_convention
from app.services.errors import (
    ConventionNotFoundError,
    InvalidDateRangeError,
    InvalidPricingError,
    SlugConflictError,
)

from conftest import make_convention


def body(**fields):
    return ConventionUpdate.model_validate(fields)


class TestImageOnlyUpdate:
    def test_only_images_change(self, db, convention, monkeypatch):
        def fail(*args, **kwargs):
            raise AssertionError("venue/hotel reconciliation must not run")

        monkeypatch.setattr(convention_update, "reconcile_venue_hotel", fail)
        convention.start_date = date(2026, 5, 1)
        convention.end_date = date(2026, 5, 3)
        db.commit()
        before = convention.updated_at

        result = update_convention(db, convention.id, body(coverImageUrl="cover.jpg"))

        assert result.cover_image_url == "cover.jpg"
        assert result.profile_image_url is None
        assert result.start_date == date(2026, 5, 1)
        assert result.name == "Tampa Magic 2026"
        assert result.updated_at >= before

    def test_image_fields_with_name_is_full_update(self):
        assert body(coverImageUrl="c.jpg").is_image_only()
        assert body(coverImageUrl="c.jpg", profileImageUrl="p.jpg").is_image_only()
        assert not body(coverImageUrl="c.jpg", name="New").is_image_only()
        assert not body().is_image_only()


class TestScalarUpdate:
    def test_absent_fields_keep_their_value(self, db, convention):
        convention.city = "Tampa"
        db.commit()

        result = update_convention(db, convention.id, body(name="Renamed", country="USA"))

        assert result.name == "Renamed"
        assert result.country == "USA"
        assert result.city == "Tampa"

    def test_dates_are_rewritten_on_full_update(self, db, convention):
        convention.start_date = date(2026, 5, 1)
        convention.end_date = date(2026, 5, 3)
        db.commit()

        result = update_convention(db, convention.id, body(name="No Dates"))

        assert result.start_date is None
        assert result.end_date is None

    def test_one_day_event_copies_start_to_end(self, db, convention):
        result = update_convention(
            db,
            convention.id,
            body(startDate="2026-06-10", endDate="2026-06-12", isOneDayEvent=True),
        )

        assert result.start_date == date(2026, 6, 10)
        assert result.end_date == date(2026, 6, 10)

    def test_tbd_forces_multi_day_flag_off(self, db, convention):
        result = update_convention(db, convention.id, body(isTBD=True, isOneDayEvent=True))

        assert result.is_tbd is True
        assert result.is_one_day_event is False

    def test_start_after_end_is_rejected(self, db, convention):
        with pytest.raises(InvalidDateRangeError):
            update_convention(
                db, convention.id, body(name="Bad", startDate="2026-06-12", endDate="2026-06-10")
            )

        db.expire_all()
        assert convention.name == "Tampa Magic 2026"

    def test_slug_in_use_is_rejected(self, db, convention, series):
        make_convention(db, series, slug="taken", name="Other")

        with pytest.raises(SlugConflictError):
            update_convention(db, convention.id, body(slug="taken"))

    def test_guests_stay_flag_is_stored(self, db, convention):
        result = update_convention(
            db, convention.id, body(venueHotel={"guestsStayAtPrimaryVenue": True})
        )

        assert result.guests_stay_at_primary_venue is True

    def test_series_is_touched(self, db, convention, series):
        series.updated_at = datetime(2020, 1, 1)
        db.commit()

        update_convention(db, convention.id, body(name="Touch"))

        db.expire_all()
        assert db.get(ConventionSeries, series.id).updated_at > datetime(2020, 1, 1)

    def test_deleted_convention_is_not_found(self, db, convention):
        convention.deleted_at = datetime.utcnow()
        db.commit()

        with pytest.raises(ConventionNotFoundError):
            update_convention(db, convention.id, body(name="Ghost"))

    def test_null_name_is_rejected_at_the_boundary(self):
        with pytest.raises(ValueError):
            body(name=None)


class TestAtomicity:
    def test_failure_rolls_back_every_step(self, db, convention, monkeypatch):
        def broken_photo(*args, **kwargs):
            raise RuntimeError("photo store down")

        monkeypatch.setattr(venue_hotel, "reconcile_photo", broken_photo)

        payload = body(
            name="Half Saved",
            venueHotel={
                "primaryVenue": {"venueName": "Hall A", "photos": [{"url": "a.jpg"}]},
            },
        )
        with pytest.raises(RuntimeError):
            update_convention(db, convention.id, payload)

        db.expire_all()
        assert convention.name == "Tampa Magic 2026"
        assert db.query(Venue).count() == 0


class TestPricing:
    def test_tiers_and_discounts_are_synced(self, db, convention):
        update_convention(
            db,
            convention.id,
            body(priceTiers=[{"label": "Weekend", "amount": 60, "order": 0}]),
        )
        tier = db.query(PriceTier).one()

        update_convention(
            db,
            convention.id,
            body(
                priceDiscounts=[
                    {"priceTierId": tier.id, "cutoffDate": "2026-03-01", "discountedAmount": 45}
                ]
            ),
        )

        discount = db.query(PriceDiscount).one()
        assert discount.price_tier_id == tier.id
        assert discount.discounted_amount == 45

    def test_removed_tier_takes_its_discounts(self, db, convention):
        tier = PriceTier(convention_id=convention.id, label="Day", amount=20, order=0)
        db.add(tier)
        db.flush()
        db.add(PriceDiscount(
            convention_id=convention.id,
            price_tier_id=tier.id,
            cutoff_date=date(2026, 1, 1),
            discounted_amount=15,
        ))
        db.commit()

        update_convention(db, convention.id, body(priceTiers=[]))

        assert db.query(PriceTier).count() == 0
        assert db.query(PriceDiscount).count() == 0

    def test_discount_for_unknown_tier_rolls_back(self, db, convention):
        payload = body(
            name="Priced",
            priceDiscounts=[
                {"priceTierId": "tier_missing", "cutoffDate": "2026-03-01", "discountedAmount": 1}
            ],
        )

        with pytest.raises(InvalidPricingError):
            update_convention(db, convention.id, payload)

        db.expire_all()
        assert convention.name == "Tampa Magic 2026"


class TestScheduleRealignment:
    def test_days_outside_range_become_unofficial(self, db, convention):
        for offset in (0, 2, 4):
            db.add(ScheduleDay(convention_id=convention.id, day_offset=offset, is_official=True))
        db.commit()

        update_convention(
            db, convention.id, body(startDate="2026-05-01", endDate="2026-05-03")
        )

        days = db.query(ScheduleDay).order_by(ScheduleDay.day_offset).all()
        assert [d.is_official for d in days] == [True, True, False]
