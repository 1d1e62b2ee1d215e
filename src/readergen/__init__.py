"""Go compute reader generator.

Renders one `List<Resource>s` method per compute resource type on the
GCPReader type, prefixed by a fixed package preamble. The output is
committed as Go source and regenerated by hand (or `go generate`) when
the resource list changes.

    registry = TemplateRegistry()
    Function("Instance", zone=True).execute(sink, registry)
"""

# Marker recognised by Go tooling as generated code
GENERATED_MARKER = "// Code generated by 'go generate'; DO NOT EDIT."
