"""
Tests for the manifest fetcher. The network is replaced with a fake requests.get.
"""

import json
import os

import pytest
import requests

from loomdeps.loomdeps_config import LoomConfig
from loomdeps.loomdeps_exceptions import FetchFailure
from loomdeps.manifest_fetcher import ManifestFetcher

INDEX_URL = "https://launchermeta.example/version_manifest.json"
VERSION_URL = "https://launchermeta.example/v1/packages/abc/1.12.2.json"


class FakeResponse:
    def __init__(self, status_code=200, body=b""):
        self.status_code = status_code
        self.body = body
        self.text = body.decode("utf-8", "replace")
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self):
        self.closed = True

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error")

    def json(self):
        return json.loads(self.body)

    def iter_content(self, chunk_size=1):
        for i in range(0, len(self.body), chunk_size):
            yield self.body[i : i + chunk_size]


@pytest.fixture
def config(tmp_path):
    return LoomConfig(
        target_version="1.12.2", cache_dir=str(tmp_path), manifest_index_url=INDEX_URL
    )


@pytest.fixture
def index_body():
    return json.dumps(
        {
            "latest": {"release": "1.12.2"},
            "versions": [
                {"id": "1.13", "url": "https://launchermeta.example/1.13.json"},
                {"id": "1.12.2", "url": VERSION_URL},
            ],
        }
    ).encode("utf-8")


@pytest.fixture
def fake_network(monkeypatch, index_body, manifest_bytes):
    calls = []

    def fake_get(url, **kwargs):
        calls.append(url)
        if url == INDEX_URL:
            return FakeResponse(body=index_body)
        if url == VERSION_URL:
            return FakeResponse(body=manifest_bytes)
        return FakeResponse(status_code=404, body=b"not found")

    monkeypatch.setattr(requests, "get", fake_get)
    return calls


class TestManifestFetcher:
    """Tests for ManifestFetcher.fetch."""

    def test_downloads_into_cache(self, config, logger, fake_network, manifest_bytes):
        path = ManifestFetcher(config, logger).fetch()

        assert path == config.minecraft_json_path
        with open(path, "rb") as f:
            assert f.read() == manifest_bytes
        assert fake_network == [INDEX_URL, VERSION_URL]

    def test_cached_manifest_is_reused(self, config, logger, fake_network):
        fetcher = ManifestFetcher(config, logger)
        fetcher.fetch()
        fetcher.fetch()

        assert fake_network == [INDEX_URL, VERSION_URL]

    def test_unknown_version(self, tmp_path, logger, fake_network):
        config = LoomConfig(
            target_version="0.0.1", cache_dir=str(tmp_path), manifest_index_url=INDEX_URL
        )
        with pytest.raises(FetchFailure, match="0.0.1"):
            ManifestFetcher(config, logger).fetch()

    def test_index_http_error(self, config, logger, monkeypatch):
        monkeypatch.setattr(requests, "get", lambda url, **kwargs: FakeResponse(status_code=500))
        with pytest.raises(FetchFailure):
            ManifestFetcher(config, logger).fetch()

    def test_connection_error(self, config, logger, monkeypatch):
        def fail(url, **kwargs):
            raise requests.ConnectionError("no route to host")

        monkeypatch.setattr(requests, "get", fail)
        with pytest.raises(FetchFailure, match="no route to host"):
            ManifestFetcher(config, logger).fetch()

    def test_failed_download_leaves_no_cache_file(self, config, logger, monkeypatch, index_body):
        def fake_get(url, **kwargs):
            if url == INDEX_URL:
                return FakeResponse(body=index_body)
            return FakeResponse(status_code=503, body=b"unavailable")

        monkeypatch.setattr(requests, "get", fake_get)
        with pytest.raises(FetchFailure):
            ManifestFetcher(config, logger).fetch()

        assert not os.path.exists(config.minecraft_json_path)

    def test_interrupted_stream_leaves_no_temp_file(self, config, logger, monkeypatch, index_body):
        class InterruptedResponse(FakeResponse):
            def iter_content(self, chunk_size=1):
                yield b'{"id"'
                raise requests.ConnectionError("connection reset by peer")

        responses = []

        def fake_get(url, **kwargs):
            if url == INDEX_URL:
                return FakeResponse(body=index_body)
            response = InterruptedResponse(body=b"")
            responses.append(response)
            return response

        monkeypatch.setattr(requests, "get", fake_get)
        with pytest.raises(FetchFailure, match="connection reset by peer"):
            ManifestFetcher(config, logger).fetch()

        assert os.listdir(config.cache_dir) == []
        assert responses[0].closed

    def test_index_without_versions(self, config, logger, monkeypatch):
        monkeypatch.setattr(
            requests, "get", lambda url, **kwargs: FakeResponse(body=b'{"latest": {}}')
        )
        with pytest.raises(FetchFailure):
            ManifestFetcher(config, logger).fetch()
