"""Tests for port discovery."""

import shutil
from pathlib import Path

import pytest

from ad_cli.ports.discover import NO_CONFIG, NOT_FOUND, get_module_ports, port_report
from ad_cli.ports.sources import APP_CONFIG, CLUSTER_SERVICE, NODE_PORT, PORT_FORWARD

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def module(tmp_path):
    """ad-core with application.yml, k8s/service.yml and a Tiltfile."""
    path = tmp_path / "ad-core"
    (path / "src" / "main" / "resources").mkdir(parents=True)
    (path / "k8s").mkdir()
    shutil.copy(FIXTURES / "application.yml", path / "src" / "main" / "resources" / "application.yml")
    shutil.copy(FIXTURES / "service.yml", path / "k8s" / "service.yml")
    shutil.copy(FIXTURES / "Tiltfile", path / "Tiltfile")
    return path


def provider(files: dict[str, str]):
    """Content provider backed by a dict of module-relative paths."""
    def read(path: Path):
        return files.get(f"{path.parent.name}/{path.name}") or files.get(path.name)
    return read


class TestSources:
    def test_app_config_port(self):
        text = (FIXTURES / "application.yml").read_text()
        assert APP_CONFIG.extract(text) == "8081"

    def test_service_port_ignores_target_port(self):
        text = (FIXTURES / "service.yml").read_text()
        assert CLUSTER_SERVICE.extract(text) == "8080"

    def test_service_port_list_item(self):
        assert CLUSTER_SERVICE.extract("spec:\n  ports:\n  - port: 9000\n") == "9000"

    def test_service_port_outside_window(self):
        text = "ports:\n" + "  # filler\n" * 5 + "  port: 9000\n"
        assert CLUSTER_SERVICE.extract(text) is None

    def test_service_port_requires_ports_section(self):
        assert CLUSTER_SERVICE.extract("port: 9000\n") is None

    def test_node_port(self):
        text = (FIXTURES / "service.yml").read_text()
        assert NODE_PORT.extract(text) == "30080"

    def test_port_forward(self):
        text = (FIXTURES / "Tiltfile").read_text()
        assert PORT_FORWARD.extract(text) == "8081:8081"

    def test_missing_file_is_not_an_error(self, tmp_path):
        assert APP_CONFIG.probe(tmp_path) is None


class TestModulePorts:
    def test_all_sources(self, module):
        info = get_module_ports("ad-core", module.parent)
        assert info.primary_port == "8081"
        assert info.primary_source == "app config"
        assert info.render() == "8081 (app config), node port: 30080, local port-forward: 8081:8081"

    def test_falls_back_to_cluster_service(self, module):
        (module / "src" / "main" / "resources" / "application.yml").unlink()
        info = get_module_ports("ad-core", module.parent)
        assert info.render().startswith("8080 (cluster service)")

    def test_node_port_equal_to_primary_is_dropped(self, tmp_path):
        (tmp_path / "m").mkdir()
        read = provider({"k8s/service.yml": "ports:\n  - port: 30080\n    nodePort: 30080\n"})
        info = get_module_ports("m", tmp_path, read)
        assert info.render() == "30080 (cluster service)"

    def test_secondary_only(self, tmp_path):
        (tmp_path / "m").mkdir()
        read = provider({"Tiltfile": "k8s_resource('m', port_forwards=['3000:80'])\n"})
        assert get_module_ports("m", tmp_path, read).render() == "local port-forward: 3000:80"

    def test_no_port_config(self, tmp_path):
        (tmp_path / "m").mkdir()
        info = get_module_ports("m", tmp_path)
        assert info.found_module
        assert info.render() == NO_CONFIG

    def test_module_not_found(self, tmp_path):
        info = get_module_ports("ghost", tmp_path)
        assert not info.found_module
        assert info.render() == NOT_FOUND

    def test_report_keeps_going_after_missing_module(self, module):
        infos = port_report(["ghost", "ad-core"], module.parent)
        assert [i.module for i in infos] == ["ghost", "ad-core"]
        assert infos[0].render() == NOT_FOUND
        assert infos[1].primary_port == "8081"
