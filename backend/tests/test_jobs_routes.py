"""Tests for /jobs routes."""

from sqlalchemy.exc import IntegrityError


class TestCreate:
    new_job = {"title": "J-new", "salary": 10, "equity": "0.2", "company_handle": "c1"}

    def test_ok_for_admin(self, client, store, admin_headers):
        store.queue([{"id": 9, **self.new_job}])

        resp = client.post("/jobs/", json=self.new_job, headers=admin_headers)

        assert resp.status_code == 201
        assert resp.json() == {"job": {"id": 9, **self.new_job}}

    def test_forbidden_for_non_admin(self, client, store, user_headers):
        resp = client.post("/jobs/", json=self.new_job, headers=user_headers)
        assert resp.status_code == 403
        assert store.calls == []

    def test_equity_out_of_range(self, client, admin_headers):
        resp = client.post("/jobs/", json={**self.new_job, "equity": "1.5"}, headers=admin_headers)
        assert resp.status_code == 422

    def test_unknown_company(self, client, store, db, admin_headers):
        store.queue(IntegrityError("INSERT", {}, Exception("foreign key")))
        resp = client.post("/jobs/", json=self.new_job, headers=admin_headers)
        assert resp.status_code == 400
        assert resp.json()["error"]["code"] == "CONFLICT"
        db.rollback.assert_called_once()


class TestList:
    def test_no_filters(self, client, store, job_row):
        store.queue([job_row])
        resp = client.get("/jobs/")
        assert resp.json() == {"jobs": [job_row]}

    def test_filters(self, client, store):
        resp = client.get("/jobs/", params={"minSalary": 50, "hasEquity": "true", "title": "eng"})
        assert resp.status_code == 200
        sql, values = store.calls[0]
        assert "WHERE salary > $1 AND equity > 0 AND title ILIKE $2" in sql
        assert values == [50, "%eng%"]

    def test_has_equity_false(self, client, store):
        client.get("/jobs/", params={"hasEquity": "false"})
        assert "WHERE" not in store.calls[0][0]

    def test_non_numeric_salary(self, client, store):
        resp = client.get("/jobs/", params={"minSalary": "lots"})
        assert resp.status_code == 422
        assert store.calls == []


class TestGet:
    def test_works(self, client, store, job_row, company_row):
        store.queue([job_row], [company_row])

        resp = client.get("/jobs/1")

        assert resp.status_code == 200
        job = resp.json()["job"]
        assert job["title"] == "J1"
        assert "company_handle" not in job
        assert job["company"]["handle"] == "c1"
        assert job["company"]["logoUrl"] == "http://c1.img"

    def test_not_found(self, client):
        assert client.get("/jobs/0").status_code == 404

    def test_bad_id(self, client):
        assert client.get("/jobs/abc").status_code == 422


class TestUpdate:
    def test_works_for_admin(self, client, store, job_row, admin_headers):
        store.queue([{**job_row, "title": "J-new"}])

        resp = client.patch("/jobs/1", json={"title": "J-new"}, headers=admin_headers)

        assert resp.status_code == 200
        assert resp.json()["job"]["title"] == "J-new"
        assert store.calls[0] == (
            'UPDATE jobs SET "title"=$1 WHERE id = $2 RETURNING id, title, salary, equity, company_handle',
            ["J-new", 1],
        )

    def test_empty_body(self, client, store, admin_headers):
        resp = client.patch("/jobs/1", json={}, headers=admin_headers)
        assert resp.status_code == 400
        assert store.calls == []

    def test_unknown_field(self, client, admin_headers):
        resp = client.patch("/jobs/1", json={"id": 5}, headers=admin_headers)
        assert resp.status_code == 422

    def test_not_found(self, client, admin_headers):
        assert client.patch("/jobs/0", json={"title": "x"}, headers=admin_headers).status_code == 404

    def test_unauth_for_anon(self, client):
        assert client.patch("/jobs/1", json={"title": "x"}).status_code == 401


class TestDelete:
    def test_works_for_admin(self, client, store, admin_headers):
        store.queue([{"id": 1}])
        resp = client.delete("/jobs/1", headers=admin_headers)
        assert resp.json() == {"deleted": 1}

    def test_forbidden_for_non_admin(self, client, user_headers):
        assert client.delete("/jobs/1", headers=user_headers).status_code == 403

    def test_not_found(self, client, admin_headers):
        assert client.delete("/jobs/0", headers=admin_headers).status_code == 404
