"""Tests for the runtime advisor: registry client, recommender, manifest writer."""

from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest

from theme_ai.engines.outdated_checker import AuditResult, OutdatedEntry
from theme_ai.engines.runtime_advisor import (
    UPDATED_MANIFEST_FILENAME,
    RegistryClient,
    build_updated_manifest,
    constraint_weight,
    pick_highest_constraint,
    recommend_node_version,
    write_updated_manifest,
)
from theme_ai.engines.runtime_advisor.registry_client import encode_package_name
from theme_ai.exceptions import RegistryError
from theme_ai.manifest import Manifest, load_manifest

DEFAULT = ">=18.0.0"


def _audit(**latest: str) -> AuditResult:
    entries = {
        name: OutdatedEntry(name=name, current="0.0.1", latest=version)
        for name, version in latest.items()
    }
    return AuditResult(status="outdated" if entries else "up_to_date", entries=entries)


def _registry(engines: dict[str, object], calls: list[str] | None = None) -> RegistryClient:
    """RegistryClient backed by a MockTransport.

    *engines* maps package name -> engines.node value, or an int HTTP status
    to return instead of a document.
    """

    def handler(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request.url.raw_path.decode())
        name = request.url.raw_path.decode().lstrip("/").rsplit("/", 1)[0]
        name = name.replace("%2F", "/")
        value = engines.get(name)
        if isinstance(value, int):
            return httpx.Response(value)
        doc: dict = {"name": name}
        if value is not None:
            doc["engines"] = {"node": value}
        return httpx.Response(200, json=doc)

    return RegistryClient("https://registry.test", transport=httpx.MockTransport(handler))


# ── constraint helpers ───────────────────────────────────────────────────


class TestConstraintWeight:
    def test_plain(self):
        assert constraint_weight(">=18.0.0") == 18.0

    def test_minor_kept(self):
        assert constraint_weight(">=18.17.0") == 18.17

    def test_no_digits(self):
        assert constraint_weight(">=x") == 0.0

    def test_range_is_coarse(self):
        # "^14.17.0 || >=16" -> "14.17.016" -> leading float 14.17
        assert constraint_weight("^14.17.0 || >=16") == 14.17


class TestPickHighest:
    def test_highest_wins(self):
        assert pick_highest_constraint([">=14", ">=18.17.0", ">=16.0.0"]) == ">=18.17.0"

    def test_non_gte_filtered(self):
        assert pick_highest_constraint(["^20.0.0", "~22", ">=12"]) == ">=12"

    def test_none_matching(self):
        assert pick_highest_constraint(["^20.0.0", "*"]) is None

    def test_empty(self):
        assert pick_highest_constraint([]) is None

    def test_ties_keep_first(self):
        assert pick_highest_constraint([">=18.0.0", ">=18"]) == ">=18.0.0"


# ── registry client ──────────────────────────────────────────────────────


class TestRegistryClient:
    def test_encode_plain(self):
        assert encode_package_name("bootstrap") == "bootstrap"

    def test_encode_scoped(self):
        assert encode_package_name("@babel/core") == "@babel%2Fcore"

    @pytest.mark.anyio
    async def test_get_node_engine(self):
        calls: list[str] = []
        async with _registry({"sass": ">=14.0.0"}, calls) as client:
            assert await client.get_node_engine("sass", "1.77.0") == ">=14.0.0"
        assert calls == ["/sass/1.77.0"]

    @pytest.mark.anyio
    async def test_scoped_path(self):
        calls: list[str] = []
        async with _registry({"@babel/core": ">=6.9.0"}, calls) as client:
            assert await client.get_node_engine("@babel/core", "7.24.0") == ">=6.9.0"
        assert calls == ["/@babel%2Fcore/7.24.0"]

    @pytest.mark.anyio
    async def test_no_engines(self):
        async with _registry({}) as client:
            assert await client.get_node_engine("left-pad", "1.3.0") is None

    @pytest.mark.anyio
    async def test_http_error(self):
        async with _registry({"ghost": 404}) as client:
            with pytest.raises(RegistryError, match="HTTP 404"):
                await client.get_node_engine("ghost", "1.0.0")

    @pytest.mark.anyio
    async def test_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        client = RegistryClient("https://registry.test", transport=httpx.MockTransport(handler))
        async with client:
            with pytest.raises(RegistryError, match="connection refused"):
                await client.get_version_metadata("x", "1.0.0")

    @pytest.mark.anyio
    async def test_invalid_json(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="<html>")

        client = RegistryClient("https://registry.test", transport=httpx.MockTransport(handler))
        async with client:
            with pytest.raises(RegistryError, match="invalid JSON"):
                await client.get_version_metadata("x", "1.0.0")


# ── recommender ──────────────────────────────────────────────────────────


class TestRecommendNodeVersion:
    @pytest.mark.anyio
    async def test_manifest_constraint_wins(self):
        manifest = Manifest.from_dict({"engines": {"node": ">=20"}})
        async with _registry({"sass": ">=22"}) as registry:
            rec = await recommend_node_version(manifest, _audit(sass="1.77.0"), registry, DEFAULT)
        assert rec.constraint == ">=20"
        assert rec.source == "manifest"

    @pytest.mark.anyio
    async def test_registry_highest(self):
        manifest = Manifest.from_dict({})
        engines = {"a": ">=14.0.0", "b": ">=18.17.0", "c": "^16 || ^18"}
        async with _registry(engines) as registry:
            rec = await recommend_node_version(
                manifest, _audit(a="1.0.0", b="2.0.0", c="3.0.0"), registry, DEFAULT
            )
        assert rec.constraint == ">=18.17.0"
        assert rec.source == "registry"

    @pytest.mark.anyio
    async def test_failed_lookups_excluded(self):
        manifest = Manifest.from_dict({})
        async with _registry({"a": 500, "b": ">=12"}) as registry:
            rec = await recommend_node_version(manifest, _audit(a="1", b="1"), registry, DEFAULT)
        assert rec.constraint == ">=12"

    @pytest.mark.anyio
    async def test_fallback_when_no_metadata(self):
        manifest = Manifest.from_dict({})
        async with _registry({"a": 404}) as registry:
            rec = await recommend_node_version(manifest, _audit(a="1"), registry, DEFAULT)
        assert rec.constraint == DEFAULT
        assert rec.source == "default"

    @pytest.mark.anyio
    async def test_fallback_when_nothing_outdated(self):
        calls: list[str] = []
        async with _registry({}, calls) as registry:
            rec = await recommend_node_version(Manifest.from_dict({}), _audit(), registry, DEFAULT)
        assert rec.constraint == DEFAULT
        assert calls == []

    @pytest.mark.anyio
    async def test_fallback_without_registry(self):
        rec = await recommend_node_version(Manifest.from_dict({}), _audit(a="1"), None, ">=20.0.0")
        assert rec.constraint == ">=20.0.0"
        assert rec.source == "default"


# ── manifest writer ──────────────────────────────────────────────────────


class TestUpdatedManifest:
    def test_build_bumps_and_sets_engine(self):
        manifest = Manifest.from_dict(
            {
                "name": "t",
                "dependencies": {"bootstrap": "^4.6.0"},
                "devDependencies": {"sass": "^1.32.0", "gulp": "^4.0.0"},
                "engines": {"npm": ">=8"},
            }
        )
        updated = build_updated_manifest(
            manifest, _audit(bootstrap="5.3.3", sass="1.77.0", unknown="9.9.9"), ">=18.0.0"
        )
        assert updated["dependencies"] == {"bootstrap": "5.3.3"}
        assert updated["devDependencies"] == {"sass": "1.77.0", "gulp": "^4.0.0"}
        assert updated["engines"] == {"npm": ">=8", "node": ">=18.0.0"}
        assert "unknown" not in updated["dependencies"]
        # raw document untouched
        assert manifest.raw["dependencies"] == {"bootstrap": "^4.6.0"}
        assert manifest.raw["engines"] == {"npm": ">=8"}

    def test_runtime_dependency_preferred(self):
        manifest = Manifest.from_dict(
            {"dependencies": {"x": "1"}, "devDependencies": {"x": "1"}}
        )
        updated = build_updated_manifest(manifest, _audit(x="2"), DEFAULT)
        assert updated["dependencies"]["x"] == "2"
        assert updated["devDependencies"]["x"] == "1"

    def test_no_engines_section(self):
        updated = build_updated_manifest(Manifest.from_dict({}), _audit(), ">=20")
        assert updated["engines"] == {"node": ">=20"}

    def test_write_nothing_when_up_to_date(self, tmp_path: Path, write_manifest):
        write_manifest()
        manifest = load_manifest(tmp_path)
        assert write_updated_manifest(tmp_path, manifest, _audit(), DEFAULT) is None
        assert not (tmp_path / UPDATED_MANIFEST_FILENAME).exists()

    def test_write_leaves_original_unchanged(self, tmp_path: Path, write_manifest):
        original = write_manifest(dependencies={"bootstrap": "^4.6.0"})
        before = original.read_bytes()
        manifest = load_manifest(tmp_path)

        path = write_updated_manifest(tmp_path, manifest, _audit(bootstrap="5.3.3"), ">=18.17.0")

        assert path == tmp_path / UPDATED_MANIFEST_FILENAME
        assert original.read_bytes() == before
        data = json.loads(path.read_text())
        assert data["dependencies"]["bootstrap"] == "5.3.3"
        assert data["engines"]["node"] == ">=18.17.0"
        assert data["name"] == "my-theme"
