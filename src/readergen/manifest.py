"""Load the list of functions to generate.

A manifest is a YAML file:

    functions:
      - resource: Instance
        zone: true
      - resource: Firewall
"""

from __future__ import annotations

from pathlib import Path

import yaml

from readergen.function import Function

DEFAULT_FUNCTIONS: tuple[Function, ...] = (
    Function("Instance", zone=True),
    Function("InstanceGroup", zone=True),
    Function("Disk", zone=True),
    Function("Firewall"),
    Function("Network"),
    Function("HealthCheck"),
    Function("BackendService"),
    Function("UrlMap"),
    Function("TargetHttpProxy"),
    Function("TargetHttpsProxy"),
    Function("SslCertificate"),
    Function("GlobalForwardingRule"),
    Function("Image"),
)


def load_manifest(path: Path | str) -> list[Function]:
    """Read and parse a manifest file.

    Args:
        path: Path to the manifest YAML.

    Returns:
        Functions in manifest order.

    Raises:
        FileNotFoundError: If the file doesn't exist.
        yaml.YAMLError: If the YAML is malformed.
        ValueError: If the structure is not a valid manifest.
    """
    manifest_path = Path(path)
    with open(manifest_path) as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"manifest at {manifest_path} is not a YAML mapping")

    entries = data.get("functions")
    if not isinstance(entries, list):
        raise ValueError(f"manifest at {manifest_path} has no 'functions' list")

    return [_parse_entry(manifest_path, i, entry) for i, entry in enumerate(entries)]


def _parse_entry(path: Path, index: int, entry: object) -> Function:
    if not isinstance(entry, dict):
        raise ValueError(f"{path}: functions[{index}] is not a mapping")

    resource = entry.get("resource")
    if not isinstance(resource, str) or not resource:
        raise ValueError(f"{path}: functions[{index}] needs a non-empty 'resource'")

    zone = entry.get("zone", False)
    if not isinstance(zone, bool):
        raise ValueError(f"{path}: functions[{index}] 'zone' must be true or false")

    return Function(resource=resource, zone=zone)
