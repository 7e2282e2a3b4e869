import pytest

from querypage.db import init as db_init


class FakeClient:
    def __init__(self, uri, **kwargs):
        self.uri = uri
        self.kwargs = kwargs

    def __getitem__(self, name):
        return ("db", name, self)


def test_use_tls():
    assert db_init._use_tls("mongodb+srv://cluster.example.net")
    assert db_init._use_tls("mongodb://host:27017/?tls=true")
    assert not db_init._use_tls("mongodb://localhost:27017")


@pytest.mark.asyncio
async def test_init_db_binds_models(monkeypatch):
    seen = {}

    async def fake_init_beanie(database, document_models):
        seen["database"] = database
        seen["document_models"] = document_models

    class Item:
        pass

    monkeypatch.setenv("MONGODB_URI", "mongodb+srv://cluster.example.net")
    monkeypatch.setenv("MONGODB_DB_NAME", "paging_test")
    monkeypatch.setattr(db_init, "AsyncIOMotorClient", FakeClient)
    monkeypatch.setattr(db_init, "init_beanie", fake_init_beanie)

    await db_init.init_db((Item,))

    kind, name, client = seen["database"]
    assert name == "paging_test"
    assert client.uri == "mongodb+srv://cluster.example.net"
    assert client.kwargs["tlsDisableOCSPEndpointCheck"] is True
    assert "tlsCAFile" in client.kwargs
    assert seen["document_models"] == [Item]
