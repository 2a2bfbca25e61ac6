"""Tests for create/update/delete planning of child collections."""

from app.schemas.pricing import PriceTierIn
from app.services.collections import Create, Update, plan_sync


def tier(label, id=None):
    return PriceTierIn(id=id, label=label, amount=10)


class TestPlanSync:
    """Tests for plan_sync."""

    def test_missing_existing_ids_are_deleted(self):
        plan = plan_sync(["v1", "v2"], [tier("Updated", id="v2")])

        assert plan.delete_ids == ["v1"]
        assert plan.upserts == [Update("v2", tier("Updated", id="v2"))]

    def test_payload_without_id_is_create(self):
        payload = tier("New")
        plan = plan_sync([], [payload])

        assert plan.delete_ids == []
        assert plan.upserts == [Create(payload)]

    def test_unknown_id_is_create(self):
        stale = tier("Stale", id="gone")
        plan = plan_sync(["v1"], [stale])

        assert plan.delete_ids == ["v1"]
        assert plan.upserts == [Create(stale)]

    def test_empty_payload_deletes_everything(self):
        plan = plan_sync(["b", "a"], [])

        assert plan.delete_ids == ["a", "b"]
        assert plan.upserts == []

    def test_skipped_ids_are_ignored(self):
        primary = tier("Primary", id="p1")
        other = tier("Other", id="v1")
        plan = plan_sync(["v1"], [primary, other], skip_ids=["p1", None])

        assert plan.delete_ids == []
        assert plan.upserts == [Update("v1", other)]

    def test_upserts_keep_payload_order(self):
        first, second, third = tier("A"), tier("B", id="v1"), tier("C")
        plan = plan_sync(["v1"], [first, second, third])

        assert [type(step) for step in plan.upserts] == [Create, Update, Create]
