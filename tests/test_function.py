"""Tests for the function descriptor and renderer."""

from __future__ import annotations

import dataclasses
import io

import pytest
from jinja2 import UndefinedError

from readergen.errors import TemplateExpansionError
from readergen.function import Function
from readergen.registry import TemplateRegistry
from readergen.templates import GLOBAL_FUNCTION_TEMPLATE, ZONAL_FUNCTION_TEMPLATE


class TestDescriptor:
    def test_zone_defaults_to_false(self):
        assert Function("Firewall").zone is False

    def test_name(self):
        assert Function("Instance", zone=True).name == "ListInstances"

    def test_is_immutable(self):
        fn = Function("Instance")
        with pytest.raises(dataclasses.FrozenInstanceError):
            fn.resource = "Disk"


class TestZonalRender:
    def test_signature(self, registry):
        text = Function("Instance", zone=True).render(registry)
        assert (
            "func (r *GCPReader) ListInstances(ctx context.Context, filter string) "
            "(map[string][]compute.Instance, error) {"
        ) in text

    def test_builds_zone_mapping(self, registry):
        text = Function("Instance", zone=True).render(registry)
        assert "make(map[string][]compute.Instance)" in text
        assert "for _, zone := range zones {" in text
        assert "service.List(r.project, zone)" in text
        assert "list[zone] = resources" in text
        assert "return list, nil" in text

    def test_doc_comment_mentions_zone(self, registry):
        text = Function("Instance", zone=True).render(registry)
        first = text.splitlines()[0]
        assert first == "// ListInstances returns a list of Instance within a project and a zone"

    def test_wraps_errors(self, registry):
        text = Function("Instance", zone=True).render(registry)
        assert 'errors.Wrap(err, "unable to get zones in region")' in text
        assert 'errors.Wrap(err, "unable to list compute Instance from google APIs")' in text


class TestGlobalRender:
    def test_signature(self, registry):
        text = Function("Firewall").render(registry)
        assert (
            "func (r *GCPReader) ListFirewalls(ctx context.Context, filter string) "
            "([]compute.Firewall, error) {"
        ) in text

    def test_flat_sequence_without_zone_code(self, registry):
        text = Function("Firewall").render(registry)
        assert "return resources, nil" in text
        assert "service.List(r.project)." in text
        assert "map[string]" not in text
        assert "getZones" not in text
        assert "zone" not in text

    def test_filter_and_page_size(self, registry):
        text = Function("Firewall").render(registry)
        assert "Filter(filter)." in text
        assert "MaxResults(int64(r.maxResults))." in text
        assert "func(page *compute.FirewallList) error" in text


class TestSubstitution:
    @pytest.mark.parametrize("zone,source", [
        (True, ZONAL_FUNCTION_TEMPLATE),
        (False, GLOBAL_FUNCTION_TEMPLATE),
    ])
    def test_every_placeholder_replaced(self, registry, zone, source):
        text = Function("Xq7Widget", zone=zone).render(registry)
        assert "{{" not in text
        assert text.count("Xq7Widget") == source.count("{{ resource }}")

    @pytest.mark.parametrize("resource", ["Instance", "Firewall", "TargetHttpsProxy", "A1"])
    def test_deterministic(self, registry, resource):
        fn = Function(resource, zone=True)
        assert fn.render(registry) == fn.render(registry)
        assert fn.render(registry) == fn.render(TemplateRegistry())

    def test_execute_writes_to_sink(self, registry):
        buf = io.StringIO()
        buf.write("// header\n")
        Function("Network").execute(buf, registry)
        assert buf.getvalue().startswith("// header\n// ListNetworks")

    def test_uses_default_registry(self):
        assert Function("Image").render() == Function("Image").render(TemplateRegistry())


class TestExpansionError:
    @pytest.fixture
    def broken(self):
        return TemplateRegistry(zonal="// List{{ resource }}s in {{ region }}\n")

    def test_undefined_field_raises(self, broken):
        fn = Function("Disk", zone=True)
        with pytest.raises(TemplateExpansionError) as exc:
            fn.execute(io.StringIO(), broken)
        assert isinstance(exc.value.__cause__, UndefinedError)
        assert exc.value.function is fn

    def test_message_names_descriptor(self, broken):
        with pytest.raises(TemplateExpansionError) as exc:
            Function("Disk", zone=True).render(broken)
        message = str(exc.value)
        assert "resource='Disk'" in message
        assert "zone=True" in message
        assert "region" in message

    def test_other_variant_unaffected(self, broken):
        text = Function("Disk", zone=False).render(broken)
        assert "ListDisks" in text
