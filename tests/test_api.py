# tests/test_api.py
"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from bag_of_holding.config import Settings
from bag_of_holding.core.exceptions import EmptyCandidatesError
from bag_of_holding.models.base import Domain, Language
from bag_of_holding.models.deities import Pantheon
from bag_of_holding.web import app as app_module
from bag_of_holding.web.app import create_app, rng_factory

pytestmark = pytest.mark.api


class TestStatus:
    """Test status endpoints."""

    def test_root(self, client):
        """Root reports the service is running."""
        response = client.get("/")
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "running"
        assert data["application"] == "Bag of Holding"

    def test_health(self, client):
        """Health check endpoint."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestGeneration:
    """Test generation endpoints."""

    def test_abilities(self, client):
        """Ability scores come back in sheet order."""
        response = client.post("/abilities")
        assert response.status_code == 200
        data = response.json()
        assert list(data) == ["STR", "DEX", "CON", "INT", "WIS", "CHA"]
        for entry in data.values():
            assert 3 <= entry["base"] <= 18
            assert entry["racial_increase"] == 0
            assert entry["score"] == entry["base"]

    def test_alignment(self, client):
        """Alignment is a display string."""
        response = client.post("/alignments")
        assert response.status_code == 200
        assert isinstance(response.json(), str)

    def test_character(self, client):
        """A full character sheet."""
        response = client.post("/characters")
        assert response.status_code == 200
        sheet = response.json()
        assert sheet["name"]
        assert "Common" in sheet["languages"]
        assert sheet["size"] in ("Small", "Medium")
        assert set(sheet["ability_scores"]) == {"STR", "DEX", "CON", "INT", "WIS", "CHA"}


class TestDeities:
    """Test deity endpoints."""

    def test_deity(self, client):
        """A deity is always returned."""
        response = client.post("/deities")
        assert response.status_code == 200
        assert response.json()["pantheon"] in [p.value for p in Pantheon]

    def test_deity_with_domain(self, client):
        """The domain filter is applied."""
        response = client.post("/deities", params={"domain": "War"})
        assert response.status_code == 200
        assert "War" in response.json()["domains"]

    def test_unknown_domain(self, client):
        """Unknown domains fail validation."""
        response = client.post("/deities", params={"domain": "Cheese"})
        assert response.status_code == 422

    def test_pantheons(self, client):
        """Pantheon names."""
        response = client.get("/deities/pantheons")
        assert response.json() == [p.value for p in Pantheon]

    def test_domains(self, client):
        """Domain listing and random domain."""
        assert client.get("/deities/domains").json() == [d.value for d in Domain]
        assert client.post("/deities/domains").json() in [d.value for d in Domain]

    def test_generation_error(self, client, monkeypatch):
        """Generation faults become a JSON 500."""
        def fail(*args, **kwargs):
            raise EmptyCandidatesError()

        monkeypatch.setattr(app_module, "generate_deity", fail)
        response = client.post("/deities")
        assert response.status_code == 500
        assert "candidate" in response.json()["detail"]


class TestDice:
    """Test dice endpoints."""

    def test_list(self, client):
        """Available dice."""
        assert client.get("/dice").json() == ["d4", "d6", "d8", "d10", "d12", "d20", "d100"]

    def test_roll_one(self, client):
        """Roll a single die."""
        response = client.post("/dice/d20/roll")
        assert response.status_code == 200
        data = response.json()
        assert data["die"] == "d20"
        assert data["faces"] == 20
        assert 1 <= data["roll"] <= 20

    def test_unknown_die(self, client):
        """Unknown dice fail validation."""
        assert client.post("/dice/d7/roll").status_code == 422

    def test_roll_pool(self, client):
        """Roll several dice at once."""
        response = client.post("/dice/roll", json={"d6": 2, "d20": 1})
        assert response.status_code == 200
        data = response.json()
        assert len(data["d6"]) == 2
        assert len(data["d20"]) == 1
        assert all(1 <= r <= 6 for r in data["d6"])

    def test_roll_pool_validation(self, client):
        """Bad dice and negative counts are rejected."""
        assert client.post("/dice/roll", json={"d7": 1}).status_code == 422
        assert client.post("/dice/roll", json={"d6": -1}).status_code == 422


class TestReferenceLists:
    """Test languages, names and sizes."""

    def test_languages(self, client):
        """Language names."""
        assert client.get("/languages").json() == [l.value for l in Language]

    def test_names(self, client):
        """Name generators and names."""
        assert client.get("/names").json() == ["dragonborn", "dwarf", "elf", "halfling"]
        response = client.post("/names/dwarf")
        assert response.status_code == 200
        assert len(response.json().split()) >= 2
        assert client.post("/names/gnome").status_code == 422

    def test_height_and_weight(self, client):
        """Height and weight tables."""
        tables = client.get("/height-and-weight").json()
        assert "hill-dwarf" in tables
        response = client.post("/height-and-weight/halfling")
        assert response.status_code == 200
        data = response.json()
        assert 33 <= data["height"] <= 39
        assert data["weight"] == 35 + (data["height"] - 31)


class TestRandomSources:
    """Test per-request random sources."""

    def test_seeded_requests_are_reproducible(self):
        """Two apps with the same seed answer the same way."""
        first = TestClient(create_app(Settings(seed=5)))
        second = TestClient(create_app(Settings(seed=5)))
        assert first.post("/characters").json() == second.post("/characters").json()

    def test_seeded_requests_differ(self):
        """Each request gets its own generator."""
        make = rng_factory(5)
        assert make().random() != make().random()

    def test_unseeded(self):
        """Without a seed, generators are independent."""
        make = rng_factory(None)
        assert make() is not make()
