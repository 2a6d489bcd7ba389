"""Tests for the software catalog, uploads and renames."""

from core.storage import read_json

CATALOG = {
    "version": 1,
    "items": [
        {"id": "7z", "title": "7-Zip", "description": "Archiver", "tags": ["utils", "free"],
         "fileName": "7z.exe", "url": "/downloads/7z.exe", "note": None},
        {"id": "office", "title": "Office", "description": "Docs", "tags": ["office"]},
    ],
}


class TestCatalog:
    def test_empty_seed(self, client):
        assert client.get("/api/software").json() == {"version": 1, "items": []}

    def test_put_then_get(self, client, data_paths):
        assert client.put("/api/software", json=CATALOG).json() == {"ok": True}
        stored = read_json(data_paths.software_json)
        assert stored["items"][0]["note"] is None
        assert client.get("/api/software").json()["items"] == CATALOG["items"]

    def test_filters(self, client):
        client.put("/api/software", json=CATALOG)
        items = client.get("/api/software", params={"q": "arch"}).json()["items"]
        assert [i["id"] for i in items] == ["7z"]
        items = client.get("/api/software", params={"tags": "office, "}).json()["items"]
        assert [i["id"] for i in items] == ["office"]

    def test_extra_fields_kept(self, client, data_paths):
        client.put("/api/software", json={**CATALOG, "updatedBy": "admin"})
        assert read_json(data_paths.software_json)["updatedBy"] == "admin"

    def test_items_required(self, client):
        response = client.put("/api/software", json={"version": 1})
        assert response.status_code == 400
        assert response.json()["error"] == "items[] required"


class TestUpload:
    def test_upload(self, client, data_paths):
        response = client.post("/api/files", files={"file": ("My Tool.msi", b"abc")})
        assert response.status_code == 200
        assert response.json() == {
            "ok": True,
            "fileName": "My Tool.msi",
            "url": "/downloads/My%20Tool.msi",
        }
        assert (data_paths.downloads_dir / "My Tool.msi").read_bytes() == b"abc"

    def test_collision_gets_counter(self, client, data_paths):
        client.post("/api/files", files={"file": ("tool.zip", b"1")})
        response = client.post("/api/files", files={"file": ("tool.zip", b"2")})
        assert response.json()["fileName"] == "tool (1).zip"
        assert (data_paths.downloads_dir / "tool.zip").read_bytes() == b"1"

    def test_path_parts_dropped(self, client, data_paths):
        response = client.post("/api/files", files={"file": ("../../evil.sh", b"x")})
        assert response.json()["fileName"] == "evil.sh"
        assert (data_paths.downloads_dir / "evil.sh").is_file()

    def test_missing_file(self, client):
        response = client.post("/api/files")
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_REQUEST"

    def test_too_large(self, client, monkeypatch):
        import api.routes.files

        monkeypatch.setattr(api.routes.files, "MAX_UPLOAD_SIZE_BYTES", 4)
        response = client.post("/api/files", files={"file": ("big.bin", b"12345")})
        assert response.status_code == 413
        assert response.json()["code"] == "FILE_TOO_LARGE"


class TestRename:
    def test_rename(self, client, data_paths):
        client.post("/api/files", files={"file": ("old.txt", b"x")})
        response = client.post(
            "/api/files/rename", json={"fileName": "old.txt", "newFileName": "new name.txt"}
        )
        assert response.json() == {
            "ok": True,
            "fileName": "new name.txt",
            "url": "/downloads/new%20name.txt",
        }
        assert not (data_paths.downloads_dir / "old.txt").exists()
        assert (data_paths.downloads_dir / "new name.txt").is_file()

    def test_rename_onto_existing(self, client):
        client.post("/api/files", files={"file": ("a.txt", b"a")})
        client.post("/api/files", files={"file": ("b.txt", b"b")})
        response = client.post("/api/files/rename", json={"fileName": "a.txt", "newFileName": "b.txt"})
        assert response.json()["fileName"] == "b (1).txt"

    def test_missing_names(self, client):
        response = client.post("/api/files/rename", json={"fileName": "a.txt"})
        assert response.status_code == 400

    def test_unknown_file(self, client):
        response = client.post(
            "/api/files/rename", json={"fileName": "ghost.txt", "newFileName": "x.txt"}
        )
        assert response.status_code == 404
        assert response.json()["code"] == "NOT_FOUND"
