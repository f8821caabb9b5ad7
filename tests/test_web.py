"""Tests for the web interface."""

import pytest
from fastapi.testclient import TestClient

from bmi_tracker.web import create_app

ALICE = {"X-User-Id": "alice"}
BOB = {"X-User-Id": "bob"}


@pytest.fixture
def client(temp_db_path):
    with TestClient(create_app(temp_db_path)) as client:
        yield client


def onboard_us(client, headers=ALICE):
    return client.post(
        "/onboarding",
        data={
            "name": "Alice",
            "system": "us",
            "height_feet": "5",
            "height_inches": "7",
            "date_of_birth": "1990-03-01",
            "sex": "female",
        },
        headers=headers,
        follow_redirects=False,
    )


def add_entry(client, headers=ALICE, **fields):
    data = {"date": "2024-06-14", "height_feet": "5", "height_inches": "11", "weight": "165"}
    data.update(fields)
    return client.post("/entries", data=data, headers=headers, follow_redirects=False)


class TestPages:
    """Tests for the HTML pages."""

    def test_health(self, client):
        """Test the health endpoint."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_root_redirects_new_user_to_onboarding(self, client):
        """Test a new user is sent to onboarding."""
        response = client.get("/", headers=ALICE, follow_redirects=False)
        assert response.status_code == 302
        assert response.headers["location"] == "/onboarding"

    def test_dashboard_requires_onboarding(self, client):
        """Test the dashboard redirects until the profile is set up."""
        response = client.get("/dashboard", headers=ALICE, follow_redirects=False)
        assert response.status_code == 302
        assert response.headers["location"] == "/onboarding"

    def test_onboarding_page(self, client):
        """Test the onboarding form shows fields for the chosen system."""
        response = client.get("/onboarding?system=uk", headers=ALICE)
        assert response.status_code == 200
        assert "Complete Setup" in response.text
        assert 'name="height_feet"' in response.text

    def test_onboarding_redirects_to_dashboard(self, client):
        """Test completing onboarding leads to the dashboard."""
        response = onboard_us(client)
        assert response.status_code == 302
        assert response.headers["location"] == "/dashboard"

        root = client.get("/", headers=ALICE, follow_redirects=False)
        assert root.headers["location"] == "/dashboard"

    def test_dashboard_page(self, client):
        """Test the dashboard lists entries in the user's units."""
        onboard_us(client)
        add_entry(client)

        response = client.get("/dashboard", headers=ALICE)
        assert response.status_code == 200
        assert "Profile Summary" in response.text
        assert "5&#39;11&#34;" in response.text or "5'11\"" in response.text
        assert "164.99 lbs" in response.text

    def test_dashboard_empty_state(self, client):
        """Test the dashboard message when no entries exist."""
        onboard_us(client)
        response = client.get("/dashboard", headers=ALICE)
        assert "No entries yet" in response.text


class TestOnboardingForm:
    """Tests for onboarding form handling."""

    def test_height_stored_in_cm(self, client):
        """Test a US height is converted before it is stored."""
        onboard_us(client)

        profile = client.get("/api/profile", headers=ALICE).json()
        assert profile["height_cm"] == 170.18
        assert profile["measurement_system"] == "us"
        assert profile["onboarding_completed"] is True

    def test_missing_name(self, client):
        """Test onboarding without a name is rejected."""
        response = client.post(
            "/onboarding",
            data={"name": "", "system": "metric", "height": "170"},
            headers=ALICE,
        )
        assert response.status_code == 400
        assert response.json()["error"] == "Name is required"

    def test_future_date_of_birth(self, client):
        """Test a date of birth in the future is rejected."""
        response = client.post(
            "/onboarding",
            data={"name": "Alice", "system": "metric", "height": "170", "date_of_birth": "2999-01-01"},
            headers=ALICE,
        )
        assert response.status_code == 400
        assert "future" in response.json()["error"]


class TestEntries:
    """Tests for entry form posts and the JSON API."""

    def test_add_entry(self, client):
        """Test an entry is converted to canonical units."""
        onboard_us(client)
        response = add_entry(client)
        assert response.status_code == 302

        data = client.get("/api/entries", headers=ALICE).json()
        entry = data["entries"][0]
        assert entry["height_cm"] == 180.34
        assert entry["weight_kg"] == 74.84
        assert entry["height"] == "5'11\""
        assert entry["category"] == "Normal"

    def test_add_before_onboarding(self, client):
        """Test entries are refused until onboarding is complete."""
        response = client.post(
            "/entries",
            data={"date": "2024-06-14", "height": "180", "weight": "75"},
            headers=ALICE,
        )
        assert response.status_code == 400
        assert "Complete your profile" in response.json()["error"]

    def test_inches_out_of_range(self, client):
        """Test inches above 11 are rejected."""
        onboard_us(client)
        response = add_entry(client, height_inches="12")
        assert response.status_code == 400
        assert response.json()["error"] == "Inches must be between 0 and 11"

    def test_missing_date(self, client):
        """Test the date is required."""
        onboard_us(client)
        response = add_entry(client, date="")
        assert response.status_code == 400
        assert response.json()["error"] == "Date is required"

    def test_edit_entry(self, client):
        """Test editing an entry recomputes its BMI."""
        onboard_us(client)
        add_entry(client)
        entry_id = client.get("/api/entries", headers=ALICE).json()["entries"][0]["id"]

        response = client.post(
            f"/entries/{entry_id}",
            data={"date": "2024-06-15", "height_feet": "5", "height_inches": "11", "weight": "200"},
            headers=ALICE,
            follow_redirects=False,
        )
        assert response.status_code == 302

        entry = client.get(f"/api/entries/{entry_id}", headers=ALICE).json()
        assert entry["weight_kg"] == 90.72
        assert entry["recorded_at"].startswith("2024-06-15")
        assert entry["bmi"] == pytest.approx(27.89, abs=0.01)

    def test_dashboard_edit_form_prefilled(self, client):
        """Test each row has an edit form filled with the entry in the user's units."""
        onboard_us(client)
        add_entry(client)
        entry_id = client.get("/api/entries", headers=ALICE).json()["entries"][0]["id"]

        page = client.get("/dashboard", headers=ALICE).text
        start = page.index(f'action="/entries/{entry_id}" class="edit-entry"')
        form = page[start : page.index("</form>", start)]

        assert 'name="date" value="2024-06-14"' in form
        assert 'name="height_feet" min="0" max="8" value="5"' in form
        assert 'name="height_inches" min="0" max="11" value="11"' in form
        assert 'name="weight" step="0.01" value="164.99"' in form

    def test_huge_weight_is_stored(self, client):
        """Test a weight far beyond any real value is converted, not a server error."""
        onboard_us(client)
        response = add_entry(client, weight="1e27")
        assert response.status_code == 302

        entry = client.get("/api/entries", headers=ALICE).json()["entries"][0]
        assert entry["weight_kg"] == pytest.approx(1e27 / 2.20462)
        assert entry["category"] == "Obese"
        assert client.get("/dashboard", headers=ALICE).status_code == 200

    def test_entries_scoped_to_user(self, client):
        """Test users only see and delete their own entries."""
        onboard_us(client)
        add_entry(client)
        entry_id = client.get("/api/entries", headers=ALICE).json()["entries"][0]["id"]

        assert client.get("/api/entries", headers=BOB).json()["entries"] == []
        assert client.get(f"/api/entries/{entry_id}", headers=BOB).status_code == 404

        response = client.post(f"/entries/{entry_id}/delete", headers=BOB)
        assert response.status_code == 404
        assert "error" in response.json()

    def test_delete_entry(self, client):
        """Test the owner can delete an entry."""
        onboard_us(client)
        add_entry(client)
        entry_id = client.get("/api/entries", headers=ALICE).json()["entries"][0]["id"]

        response = client.post(
            f"/entries/{entry_id}/delete", headers=ALICE, follow_redirects=False
        )
        assert response.status_code == 302
        assert client.get("/api/entries", headers=ALICE).json()["entries"] == []
