"""Port sources — line scanners for the files a module may declare ports in.

Files are scanned as text, never parsed as YAML. The first match wins and
a missing file or missing key is not an error.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from pathlib import Path

ContentProvider = Callable[[Path], str | None]


def read_if_present(path: Path) -> str | None:
    """Default content provider: file text, or None when absent."""
    if not path.is_file():
        return None
    return path.read_text(errors="replace")


class PortSource:
    """One file location and the pattern that finds a port in it."""

    label = ""
    relpath = ""
    pattern: re.Pattern[str]

    def extract(self, text: str) -> str | None:
        for line in text.splitlines():
            m = self.pattern.search(line)
            if m:
                return m.group(1)
        return None

    def probe(self, module_path: Path, read: ContentProvider = read_if_present) -> str | None:
        text = read(module_path / self.relpath)
        if not text:
            return None
        return self.extract(text)


class AppConfigPort(PortSource):
    """server port from the Spring Boot application.yml."""

    label = "app config"
    relpath = "src/main/resources/application.yml"
    pattern = re.compile(r"^\s*port:\s*([0-9]+)")


class ServicePort(PortSource):
    """First port declared under a `ports:` section of the k8s service."""

    label = "cluster service"
    relpath = "k8s/service.yml"
    pattern = re.compile(r"^\s*-?\s*port:\s*([0-9]+)")

    # Lines after `ports:` searched for the port entry
    window = 5

    def extract(self, text: str) -> str | None:
        lines = text.splitlines()
        for i, line in enumerate(lines):
            if "ports:" not in line:
                continue
            for candidate in lines[i:i + self.window + 1]:
                m = self.pattern.search(candidate)
                if m:
                    return m.group(1)
        return None


class NodePort(PortSource):
    label = "node port"
    relpath = "k8s/service.yml"
    pattern = re.compile(r"^\s*nodePort:\s*([0-9]+)")


class PortForward(PortSource):
    """Local development port-forward from the Tiltfile."""

    label = "local port-forward"
    relpath = "Tiltfile"
    pattern = re.compile(r"port_forwards=\['([0-9]+:[0-9]+)'\]")


APP_CONFIG = AppConfigPort()
CLUSTER_SERVICE = ServicePort()
NODE_PORT = NodePort()
PORT_FORWARD = PortForward()
