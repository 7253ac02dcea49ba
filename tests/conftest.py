import shutil
import subprocess

import pytest

from ecs_https_app.config import Settings
from ecs_https_app.server import create_app


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    monkeypatch.delenv("PORT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    # keep a stray .env in the repo root from leaking into settings
    monkeypatch.chdir(tmp_path)


@pytest.fixture(scope="session")
def tls_pair(tmp_path_factory):
    """Throwaway self-signed certificate and key, as (certfile, keyfile)."""
    if shutil.which("openssl") is None:
        pytest.skip("openssl binary is not available")
    d = tmp_path_factory.mktemp("tls")
    certfile, keyfile = d / "server.crt", d / "server.key"
    subprocess.run(
        [
            "openssl", "req", "-x509", "-newkey", "rsa:2048", "-nodes",
            "-keyout", str(keyfile), "-out", str(certfile),
            "-days", "1", "-subj", "/CN=localhost",
        ],
        check=True,
        capture_output=True,
    )
    return str(certfile), str(keyfile)


@pytest.fixture
def client():
    app = create_app(Settings(port=443))
    return app.test_client()
