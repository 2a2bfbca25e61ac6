from datetime import date
from types import SimpleNamespace

from app.utils.pricing import build_pricing_schedule


def tier(id, label, amount, order):
    return SimpleNamespace(id=id, label=label, amount=amount, order=order)


def discount(tier_id, cutoff, amount):
    return SimpleNamespace(price_tier_id=tier_id, cutoff_date=cutoff, discounted_amount=amount)


def test_entries_grouped_by_cutoff_date():
    tiers = [tier("t2", "Weekend", 60, 1), tier("t1", "Day", 25, 0)]
    discounts = [
        discount("t2", date(2026, 3, 1), 50),
        discount("t1", date(2026, 1, 1), 15),
        discount("t2", date(2026, 1, 1), 40),
    ]

    schedule = build_pricing_schedule(tiers, discounts)

    assert [entry["cutoff_date"] for entry in schedule] == [date(2026, 1, 1), date(2026, 3, 1)]
    assert schedule[0]["prices"] == [
        {"tier_id": "t1", "label": "Day", "regular_amount": 25, "discounted_amount": 15},
        {"tier_id": "t2", "label": "Weekend", "regular_amount": 60, "discounted_amount": 40},
    ]
    # Tiers without a discount on that date still show their regular price
    assert schedule[1]["prices"][0]["discounted_amount"] is None


def test_no_discounts_means_empty_schedule():
    assert build_pricing_schedule([tier("t1", "Day", 25, 0)], []) == []
