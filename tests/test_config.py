import store.collection
from models import BusinessConfig
from models.business_config import SINGLETON_ID
from store import Collection

STRING_FIELDS = [
    "businessName", "ownerName", "address", "city", "state",
    "zipCode", "phone", "email", "website",
]


def test_get_config_creates_default(client, db):
    assert db.query(BusinessConfig).count() == 0

    response = client.get("/api/config")
    assert response.status_code == 200
    config = response.json()

    assert all(config[field] == "" for field in STRING_FIELDS)
    assert config["hourlyRate"] == 0
    assert config["updatedAt"]
    assert db.query(BusinessConfig).count() == 1


def test_get_config_is_idempotent(client, db):
    client.get("/api/config")
    client.get("/api/config")
    assert db.query(BusinessConfig).count() == 1


def test_save_config_creates_singleton(client, db):
    response = client.post("/api/config", json={"businessName": "Ridgeline Auto", "hourlyRate": 95})
    assert response.status_code == 200
    assert response.json()["businessName"] == "Ridgeline Auto"
    assert response.json()["hourlyRate"] == 95
    assert response.json()["city"] == ""
    assert db.query(BusinessConfig).count() == 1


def test_save_config_merges_onto_existing(client, db):
    client.post("/api/config", json={"businessName": "Ridgeline Auto", "city": "Bend"})
    response = client.post("/api/config", json={"city": "Redmond", "zipCode": "97756"})

    config = response.json()
    assert config["businessName"] == "Ridgeline Auto"
    assert config["city"] == "Redmond"
    assert config["zipCode"] == "97756"
    assert client.get("/api/config").json() == config
    assert db.query(BusinessConfig).count() == 1


def test_save_config_rejects_malformed_body(client, db):
    for body in [{"hourlyRate": "lots"}, {"businessName": ["Ridgeline"]}, ["Ridgeline Auto"]]:
        response = client.post("/api/config", json=body)
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to save business configuration"}

    assert db.query(BusinessConfig).count() == 0


def test_singleton_upsert_without_native_conflict_insert(db, monkeypatch):
    monkeypatch.delitem(store.collection.CONFLICT_INSERTS, "sqlite")
    configs = Collection(db, BusinessConfig)

    created = configs.upsert_singleton(SINGLETON_ID)
    assert created.business_name == ""

    saved = configs.upsert_singleton(SINGLETON_ID, {"business_name": "Ridgeline Auto"})
    assert saved.business_name == "Ridgeline Auto"
    assert db.query(BusinessConfig).count() == 1
