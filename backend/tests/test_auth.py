import pytest


class TestAuthenticate:
    def test_login_sets_http_only_cookie(self, client, admin_credentials):
        username, password = admin_credentials
        r = client.post("/api/auth", json={"username": username, "password": password})
        assert r.status_code == 200
        assert r.json() == {"success": True, "message": "Login successful"}
        cookie = r.headers["set-cookie"]
        assert cookie.startswith("jobboard_session=")
        assert "HttpOnly" in cookie
        assert "Max-Age=3600" in cookie

    def test_login_accepts_email_field(self, client, admin_credentials):
        username, password = admin_credentials
        r = client.post("/api/auth", json={"email": username, "password": password})
        assert r.status_code == 200

    @pytest.mark.parametrize("tamper", [
        lambda u, p: (u, "wrong-password"),
        lambda u, p: ("someone@example.com", p),
        lambda u, p: (u.upper(), p),
        lambda u, p: (u, p.upper()),
        lambda u, p: ("", ""),
    ], ids=["wrong-password", "unknown-user", "username-case", "password-case", "blank"])
    def test_login_rejects_anything_but_exact_pair(self, client, admin_credentials, tamper):
        username, password = tamper(*admin_credentials)
        r = client.post("/api/auth", json={"username": username, "password": password})
        assert r.status_code == 401
        assert r.json()["detail"] == "Invalid credentials"
        assert "set-cookie" not in r.headers

    def test_login_missing_fields(self, client):
        r = client.post("/api/auth", json={})
        assert r.status_code == 401

    def test_unconfigured_credentials_reject_every_login(self, client, admin_settings, admin_credentials):
        username, password = admin_credentials
        admin_settings.admin_password = None
        r = client.post("/api/auth", json={"username": username, "password": password})
        assert r.status_code == 401

        admin_settings.admin_username = None
        r = client.post("/api/auth", json={"username": "admin", "password": "admin123"})
        assert r.status_code == 401
        assert client.get("/api/auth/check").json() == {"isAuthenticated": False}

    def test_no_credentials_are_built_in(self):
        from jobboard.config import Settings

        defaults = Settings.model_fields
        assert defaults["admin_username"].default is None
        assert defaults["admin_password"].default is None


class TestSessionCheck:
    def test_check_without_cookie(self, client):
        r = client.get("/api/auth/check")
        assert r.status_code == 200
        assert r.json() == {"isAuthenticated": False}

    def test_check_after_login(self, admin_client):
        r = admin_client.get("/api/auth/check")
        assert r.json() == {"isAuthenticated": True}

    def test_forged_cookie_is_rejected(self, client):
        r = client.get("/api/auth/check", headers={"Cookie": "jobboard_session=true"})
        assert r.json() == {"isAuthenticated": False}


class TestLogout:
    def test_logout_clears_session(self, admin_client):
        r = admin_client.delete("/api/auth")
        assert r.status_code == 200
        assert r.json()["success"] is True
        assert "jobboard_session=" in r.headers["set-cookie"]
        assert admin_client.get("/api/auth/check").json() == {"isAuthenticated": False}

    def test_logout_without_session(self, client):
        r = client.delete("/api/auth")
        assert r.status_code == 200
        assert r.json()["success"] is True

    def test_stolen_token_is_dead_after_logout(self, admin_client):
        token = admin_client.cookies.get("jobboard_session")
        admin_client.delete("/api/auth")
        r = admin_client.get("/api/auth/check", headers={"Cookie": f"jobboard_session={token}"})
        assert r.json() == {"isAuthenticated": False}


class TestAdminGate:
    @pytest.mark.parametrize("path", ["/admin", "/admin/", "/admin/jobs/edit/42"])
    def test_redirects_without_session(self, client, path):
        r = client.get(path, follow_redirects=False)
        assert r.status_code == 307
        assert r.headers["location"] == "/"

    def test_redirect_lands_on_public_page(self, client):
        r = client.get("/admin/jobs")
        assert r.status_code == 200
        assert r.json()["name"] == "Euro Asia Global"

    def test_admin_pages_with_session(self, admin_client):
        r = admin_client.get("/admin", follow_redirects=False)
        assert r.status_code == 200
        data = r.json()
        assert data["section"] == "dashboard"
        assert data["total_jobs"] == 0
        assert 0 < data["session_expires_in_seconds"] <= 3600

        r = admin_client.get("/admin/jobs", follow_redirects=False)
        assert r.status_code == 200
        assert r.json()["section"] == "jobs"

    def test_similar_prefix_is_not_gated(self, client):
        r = client.get("/administrator", follow_redirects=False)
        assert r.status_code == 404
