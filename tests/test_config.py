from docimport.config import Settings
from docimport.client import files_url


def test_defaults():
    s = Settings(_env_file=None)
    assert s.api_base == "http://localhost:1717"
    assert s.upload_timeout is None
    assert s.default_extensions == [".md", ".txt", ".docx", ".pdf"]


def test_env_override(monkeypatch):
    monkeypatch.setenv("DOCIMPORT_API_BASE", "http://docs.internal:8080")
    monkeypatch.setenv("DOCIMPORT_UPLOAD_TIMEOUT", "30")
    s = Settings(_env_file=None)
    assert s.api_base == "http://docs.internal:8080"
    assert s.upload_timeout == 30.0
    assert files_url("3", s.api_base) == "http://docs.internal:8080/api/projects/3/files"
