"""HTTP tests for public search, public detail and authentication."""

from datetime import date, datetime

from app.models.enums import ConventionStatus, UserRole
from app.models.pricing import PriceDiscount, PriceTier
from app.schemas.user import UserOut

from conftest import make_convention, make_user


class TestSearch:
    def seed(self, db, series):
        make_convention(db, series, slug="austin-fest", name="Austin Fest", city="Austin",
                        state_name="Texas", state_abbreviation="TX", country="USA",
                        start_date=date(2026, 3, 5), end_date=date(2026, 3, 7))
        make_convention(db, series, slug="toronto-con", name="Toronto Con", city="Toronto",
                        state_name="Ontario", state_abbreviation="ON", country="Canada",
                        start_date=date(2026, 6, 1), end_date=date(2026, 6, 2))
        make_convention(db, series, slug="draft-con", name="Draft Con", city="Austin",
                        state_abbreviation="TX", status=ConventionStatus.DRAFT)
        make_convention(db, series, slug="old-con-DELETED-abc-12345678", name="Old Con",
                        city="Austin", state_abbreviation="TX", deleted_at=datetime.utcnow())

    def test_defaults_show_published_and_past_only(self, client, db, series):
        self.seed(db, series)

        data = client.get("/conventions/").json()

        assert data["total"] == 2
        assert {c["slug"] for c in data["items"]} == {"austin-fest", "toronto-con"}

    def test_state_matches_full_name_or_abbreviation(self, client, db, series):
        self.seed(db, series)

        by_name = client.get("/conventions/", params={"state": "texas"}).json()
        by_abbr = client.get("/conventions/", params={"state": "on"}).json()

        assert [c["slug"] for c in by_name["items"]] == ["austin-fest"]
        assert [c["slug"] for c in by_abbr["items"]] == ["toronto-con"]

    def test_free_text_and_status_filters(self, client, db, series):
        self.seed(db, series)

        data = client.get("/conventions/", params={"query": "austin", "status": "draft,published"}).json()

        # Draft is not a public status, so only the published match remains
        assert [c["slug"] for c in data["items"]] == ["austin-fest"]

    def test_unpublished_statuses_are_never_listed(self, client, db, series):
        self.seed(db, series)
        make_convention(db, series, slug="called-off", name="Called Off",
                        status=ConventionStatus.CANCELLED)

        for status in ("DRAFT", "CANCELLED", "draft,cancelled"):
            data = client.get("/conventions/", params={"status": status}).json()
            slugs = {c["slug"] for c in data["items"]}

            assert "draft-con" not in slugs
            assert "called-off" not in slugs
            assert slugs == {"austin-fest", "toronto-con"}

    def test_past_status_alone(self, client, db, series):
        self.seed(db, series)
        make_convention(db, series, slug="last-year", name="Last Year", status=ConventionStatus.PAST)

        data = client.get("/conventions/", params={"status": "past"}).json()

        assert [c["slug"] for c in data["items"]] == ["last-year"]

    def test_date_window_overlap(self, client, db, series):
        self.seed(db, series)

        data = client.get(
            "/conventions/", params={"startDate": "2026-05-01", "endDate": "2026-12-31"}
        ).json()

        assert [c["slug"] for c in data["items"]] == ["toronto-con"]

    def test_pagination(self, client, db, series):
        self.seed(db, series)

        data = client.get("/conventions/", params={"limit": 1, "page": 2}).json()

        assert data["page"] == 2
        assert data["totalPages"] == 2
        assert len(data["items"]) == 1

    def test_limit_is_bounded(self, client):
        assert client.get("/conventions/", params={"limit": 500}).status_code == 422


class TestPublicDetail:
    def test_detail_includes_pricing_schedule(self, client, db, convention):
        tier = PriceTier(convention_id=convention.id, label="Weekend", amount=60, order=0)
        db.add(tier)
        db.flush()
        db.add(PriceDiscount(convention_id=convention.id, price_tier_id=tier.id,
                             cutoff_date=date(2026, 2, 1), discounted_amount=45))
        db.commit()

        response = client.get(f"/conventions/{convention.slug}")

        assert response.status_code == 200
        schedule = response.json()["pricingSchedule"]
        assert schedule == [{
            "cutoffDate": "2026-02-01",
            "prices": [{
                "tierId": tier.id,
                "label": "Weekend",
                "regularAmount": 60.0,
                "discountedAmount": 45.0,
            }],
        }]

    def test_unknown_slug_is_404(self, client):
        assert client.get("/conventions/nothing-here").status_code == 404


class TestAuthRoutes:
    def test_register_login_and_create_series(self, client):
        registered = client.post(
            "/auth/register",
            json={"name": "Dana", "email": "dana@example.com", "password": "s3cret-pass", "role": "organizer"},
        )
        assert registered.status_code == 201
        assert registered.json()["role"] == "organizer"

        login = client.post("/auth/login", json={"email": "dana@example.com", "password": "s3cret-pass"})
        assert login.status_code == 200
        token = login.json()["access_token"]

        series = client.post(
            "/organizer/series/",
            json={"name": "Dana's Shows"},
            headers={"Authorization": f"Bearer {token}"},
        )
        assert series.status_code == 201

        listed = client.get("/organizer/series/", headers={"Authorization": f"Bearer {token}"})
        assert [s["name"] for s in listed.json()] == ["Dana's Shows"]

    def test_duplicate_email_is_rejected(self, client):
        payload = {"name": "Sam", "email": "sam@example.com", "password": "long-enough"}
        assert client.post("/auth/register", json=payload).status_code == 201
        assert client.post("/auth/register", json=payload).status_code == 400

    def test_wrong_password_is_401(self, client):
        client.post("/auth/register", json={"name": "Lee", "email": "lee@example.com", "password": "right-password"})

        response = client.post("/auth/login", json={"email": "lee@example.com", "password": "wrong-password"})
        assert response.status_code == 401

    def test_admin_register_needs_key(self, client):
        payload = {"name": "Root", "email": "root@example.com", "password": "admin-pass-1"}

        assert client.post("/auth/admin/register", json=payload).status_code == 403
        ok = client.post("/auth/admin/register", json=payload, headers={"X-Admin-Key": "test-admin-key"})
        assert ok.status_code == 201
        assert ok.json()["role"] == "admin"

    def test_self_registration_cannot_pick_admin(self, client):
        response = client.post(
            "/auth/register",
            json={"name": "Eve", "email": "eve@example.com", "password": "password-1", "role": "admin"},
        )
        assert response.status_code == 422

    def test_user_out_reads_orm_rows(self, db):
        user = make_user(db, email="orm@example.com", role=UserRole.ORGANIZER)

        out = UserOut.model_validate(user)

        assert (out.id, out.email, out.role) == (user.id, "orm@example.com", UserRole.ORGANIZER)
