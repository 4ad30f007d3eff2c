"""
Integration tests for the patient appointment API.

These exercise the full request path: bearer authentication, input
validation, the command/query services and the cached patient list.
"""

from django.core.cache import cache
from rest_framework import status
from rest_framework.test import APIClient, APITestCase

from ..models import Patient, User
from ..services.queries import PATIENT_LIST_CACHE_KEY


class PatientAPITests(APITestCase):
    def setUp(self) -> None:
        self.staff = User.objects.create_user(username="nurse", password="P@ssw0rd1")
        self.patient = Patient.objects.create(
            patient_name="John Doe",
            doctor_name="Dr. Smith",
            date="2026-01-25",
            time="14:30:00",
        )
        self.client = self.authenticate(self.staff)

    def authenticate(self, user: User) -> APIClient:
        """Return a client carrying a real bearer token for ``user``."""
        client = APIClient()
        r = client.post("/api/auth/login", {"username": user.username, "password": "P@ssw0rd1"}, format="json")
        client.credentials(HTTP_AUTHORIZATION=f"Bearer {r.data['token']}")
        return client

    def test_list_patients(self):
        response = self.client.get("/api/patients")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data), 1)
        row = response.data[0]
        self.assertEqual(row["patient_name"], "John Doe")
        self.assertEqual(row["date"], "2026-01-25")
        self.assertEqual(row["time"], "14:30:00")
        self.assertEqual(row["status"], "Pending")

    def test_list_requires_authentication(self):
        response = APIClient().get("/api/patients")
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertFalse(response.data["ok"])

    def test_create_patient(self):
        response = self.client.post(
            "/api/patients",
            {"patient_name": "Jane Roe", "doctor_name": "Dr. Who", "date": "2026-02-01", "time": "09:15"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["time"], "09:15:00")
        self.assertEqual(response.data["status"], "Pending")
        self.assertTrue(Patient.objects.filter(patient_name="Jane Roe").exists())

    def test_create_patient_validation_error(self):
        response = self.client.post(
            "/api/patients",
            {"doctor_name": "Dr. Who", "date": "not-a-date", "time": "09:15", "status": "Lost"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertFalse(response.data["ok"])
        self.assertIn("patient_name", response.data["error"]["message"])
        self.assertIn("date", response.data["error"]["message"])
        self.assertIn("status", response.data["error"]["message"])
        self.assertEqual(Patient.objects.count(), 1)

    def test_create_patient_strips_markup(self):
        response = self.client.post(
            "/api/patients",
            {"patient_name": "  <b>Ann</b> Lee ", "doctor_name": "<script>x</script>Dr. No",
             "date": "2026-02-01", "time": "09:15:00"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["patient_name"], "Ann Lee")
        self.assertNotIn("<script>", response.data["doctor_name"])

    def test_create_patient_keeps_plain_text_characters(self):
        response = self.client.post(
            "/api/patients",
            {"patient_name": "Smith & Jones", "doctor_name": "Dr. A < B",
             "date": "2026-02-01", "time": "09:15"},
            format="json",
        )
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["patient_name"], "Smith & Jones")
        self.assertEqual(response.data["doctor_name"], "Dr. A < B")
        names = [p["patient_name"] for p in self.client.get("/api/patients").data]
        self.assertIn("Smith & Jones", names)

    def test_update_patient(self):
        response = self.client.put(
            f"/api/patients/{self.patient.id}", {"status": "Completed"}, format="json"
        )
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["status"], "Completed")
        self.assertEqual(response.data["patient_name"], "John Doe")
        self.patient.refresh_from_db()
        self.assertEqual(self.patient.status, "Completed")

    def test_update_unknown_patient(self):
        response = self.client.put("/api/patients/9999", {"status": "Completed"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["message"], "Patient not found")

    def test_delete_patient(self):
        response = self.client.delete(f"/api/patients/{self.patient.id}")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], "Patient deleted")
        self.assertFalse(Patient.objects.filter(id=self.patient.id).exists())

    def test_delete_unknown_patient(self):
        response = self.client.delete("/api/patients/9999")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.data["message"], "Patient not found")

    def test_list_reflects_writes_despite_cache(self):
        """A write drops the cached list so the next read sees it."""
        self.client.get("/api/patients")
        self.assertIsNotNone(cache.get(PATIENT_LIST_CACHE_KEY))

        with self.captureOnCommitCallbacks(execute=True):
            self.client.post(
                "/api/patients",
                {"patient_name": "Jane Roe", "doctor_name": "Dr. Who", "date": "2026-02-01", "time": "09:15"},
                format="json",
            )
        self.assertIsNone(cache.get(PATIENT_LIST_CACHE_KEY))
        names = [p["patient_name"] for p in self.client.get("/api/patients").data]
        self.assertEqual(names, ["John Doe", "Jane Roe"])

        with self.captureOnCommitCallbacks(execute=True):
            self.client.delete(f"/api/patients/{self.patient.id}")
        names = [p["patient_name"] for p in self.client.get("/api/patients").data]
        self.assertEqual(names, ["Jane Roe"])


class SiteTests(APITestCase):
    def test_unknown_route_returns_json_404(self):
        response = self.client.get("/api/does-not-exist")
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)
        self.assertEqual(response.json()["message"], "Can't find /api/does-not-exist on this server!")

    def test_healthz(self):
        response = self.client.get("/healthz")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.json(), {"ok": True, "db": True})

    def test_index_serves_browser_client(self):
        response = self.client.get("/")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertContains(response, "patients/app.js")
        self.assertContains(response, 'data-api-base="/api"')

    def test_patient_table_shows_id_and_empty_state(self):
        from django.contrib.staticfiles import finders

        response = self.client.get("/")
        self.assertContains(response, "<th>ID</th><th>Patient</th>")
        with open(finders.find("patients/app.js"), encoding="utf-8") as fh:
            script = fh.read()
        self.assertIn("'id', 'patient_name'", script)
        self.assertIn("No patients found.", script)
