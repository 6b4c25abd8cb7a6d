"""
Integration tests for the generic record endpoints, exercised through
the victim resource.

The behaviours covered here (envelopes, pagination, sparse updates,
id validation and search) come from the shared access layer, so they
hold for every record type.  Resource specific rules live in the
neighbouring test modules.
"""

from rest_framework import status
from rest_framework.test import APIClient, APITestCase

from ..models import PoliceOfficer, Victim

VICTIM = {
    "first_name": "Jane",
    "last_name": "Doe",
    "gender": "F",
    "dob": "1990-05-01",
    "nationality": "Ugandan",
    "nin": "CF900501",
    "created_by": "admin",
}


class VictimAPITests(APITestCase):
    def setUp(self) -> None:
        self.officer = PoliceOfficer.objects.create_user(
            username="desk1", email="desk1@example.com", password="Secret123"
        )
        self.client = APIClient()
        self.client.force_authenticate(user=self.officer)

    def create_victim(self, **overrides) -> dict:
        response = self.client.post("/api/victim", {**VICTIM, **overrides}, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED, response.data)
        return response.data["data"]

    def test_create_returns_record_with_id_and_timestamps(self):
        response = self.client.post("/api/victim", VICTIM, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data["status"], "success")
        self.assertEqual(response.data["message"], "Victim created successfully")
        data = response.data["data"]
        self.assertGreaterEqual(data["id"], 1)
        self.assertTrue(data["created_at"])
        self.assertTrue(data["updated_at"])
        self.assertEqual(data["case_ids"], [])

        fetched = self.client.get(f"/api/victim/{data['id']}")
        self.assertEqual(fetched.status_code, status.HTTP_200_OK)
        self.assertEqual(fetched.data["data"]["nin"], "CF900501")

    def test_create_also_answers_with_trailing_slash(self):
        response = self.client.post("/api/victim/", VICTIM, format="json")
        self.assertEqual(response.status_code, status.HTTP_201_CREATED)

    def test_create_with_missing_required_fields_reports_field_errors(self):
        response = self.client.post("/api/victim", {"first_name": "Jane"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["status"], "error")
        self.assertIn("last_name", response.data["data"])
        self.assertIn("dob", response.data["data"])
        self.assertEqual(Victim.objects.count(), 0)

    def test_markup_is_stripped_on_write(self):
        data = self.create_victim(first_name="<script>x</script>Jane", address="<i>Plot 4</i> Kampala Road")
        self.assertEqual(data["first_name"], "xJane")
        self.assertEqual(data["address"], "Plot 4 Kampala Road")

    def test_update_changes_only_supplied_field(self):
        created = self.create_victim()
        response = self.client.put(f"/api/victim/{created['id']}", {"first_name": "Janet"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], "Victim updated successfully")
        data = response.data["data"]
        self.assertEqual(data["first_name"], "Janet")
        for key in ("last_name", "gender", "dob", "nationality", "nin", "created_by"):
            self.assertEqual(data[key], created[key])
        self.assertGreaterEqual(data["updated_at"], created["updated_at"])

    def test_explicit_blank_clears_a_field(self):
        created = self.create_victim(address="Plot 4")
        response = self.client.put(f"/api/victim/{created['id']}", {"address": ""}, format="json")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["data"]["address"], "")
        self.assertEqual(response.data["data"]["first_name"], "Jane")

    def test_empty_update_is_rejected(self):
        created = self.create_victim()
        response = self.client.put(f"/api/victim/{created['id']}", {}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertIn("empty update", response.data["message"])

        response = self.client.put(f"/api/victim/{created['id']}", {"unknown": "x"}, format="json")
        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)

    def test_missing_record_is_404_for_get_update_and_delete(self):
        for method in ("get", "put", "delete"):
            kwargs = {"data": {"first_name": "X"}, "format": "json"} if method == "put" else {}
            response = getattr(self.client, method)("/api/victim/999", **kwargs)
            self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND, method)
            self.assertEqual(response.data["status"], "error")
            self.assertEqual(response.data["message"], "Victim not found")

    def test_non_numeric_id_is_400(self):
        for raw in ("abc", "0", "-3"):
            response = self.client.get(f"/api/victim/{raw}")
            self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST, raw)

    def test_delete_removes_the_record(self):
        created = self.create_victim()
        response = self.client.delete(f"/api/victim/{created['id']}")
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["data"], {"id": created["id"]})
        self.assertFalse(Victim.objects.filter(pk=created["id"]).exists())

        again = self.client.delete(f"/api/victim/{created['id']}")
        self.assertEqual(again.status_code, status.HTTP_404_NOT_FOUND)

    def test_list_is_paginated_and_ordered(self):
        for i in range(12):
            self.create_victim(first_name=f"Victim{i:02d}", nin=f"N{i:02d}")

        response = self.client.get("/api/victims", {"page": 2, "limit": 5})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["message"], "Victims retrieved successfully")
        self.assertEqual(
            response.data["pagination"],
            {"total_items": 12, "total_pages": 3, "current_page": 2, "limit": 5},
        )
        self.assertEqual([v["first_name"] for v in response.data["data"]], [f"Victim{i:02d}" for i in range(5, 10)])

        last = self.client.get("/api/victims", {"page": 3, "limit": 5})
        self.assertEqual(len(last.data["data"]), 2)

    def test_page_past_the_end_is_empty(self):
        self.create_victim()
        response = self.client.get("/api/victims", {"page": 999})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["data"], [])
        self.assertEqual(response.data["pagination"]["total_items"], 1)

    def test_bad_paging_params_fall_back_to_defaults(self):
        self.create_victim()
        response = self.client.get("/api/victims", {"page": "x", "limit": "-1"})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["pagination"]["current_page"], 1)
        self.assertEqual(response.data["pagination"]["limit"], 10)

    def test_search_combines_filters_with_and(self):
        self.create_victim(nin="A1")
        self.create_victim(nin="A2", nationality="Kenyan")
        self.create_victim(nin="A3", gender="M")

        response = self.client.get("/api/victims/search", {"gender": "F", "nationality": "Ugandan"})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual([v["nin"] for v in response.data["data"]], ["A1"])
        self.assertEqual(response.data["pagination"]["total_items"], 1)

    def test_search_name_is_substring_match(self):
        self.create_victim(first_name="Janet", nin="B1")
        self.create_victim(first_name="Grace", nin="B2")
        response = self.client.get("/api/victims/search", {"firstname": "ane"})
        self.assertEqual([v["nin"] for v in response.data["data"]], ["B1"])

    def test_search_without_params_equals_list(self):
        for i in range(3):
            self.create_victim(nin=f"C{i}")
        listed = self.client.get("/api/victims")
        searched = self.client.get("/api/victims/search")
        self.assertEqual(searched.data["data"], listed.data["data"])
        self.assertEqual(searched.data["pagination"], listed.data["pagination"])

    def test_search_ignores_non_numeric_case_id(self):
        self.create_victim()
        response = self.client.get("/api/victims/search", {"case_id": "abc"})
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data["data"]), 1)
