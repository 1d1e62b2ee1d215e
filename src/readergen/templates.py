"""Go source templates for the generated reader.

Templates are Jinja2 strings. The package preamble takes no parameters;
the function templates take `resource`. Zonal and global resources get
separate templates rather than one template branching on the zone flag.
"""

from __future__ import annotations

from readergen import GENERATED_MARKER

# ── Package preamble ──────────────────────────────────────────────

PACKAGE_TEMPLATE = GENERATED_MARKER + """

package google

import (
	"context"

	"github.com/pkg/errors"
	"google.golang.org/api/compute/v1"
)
"""

# ── Zonal resources: one listing per zone ─────────────────────────

ZONAL_FUNCTION_TEMPLATE = """\
// List{{ resource }}s returns a list of {{ resource }} within a project and a zone
func (r *GCPReader) List{{ resource }}s(ctx context.Context, filter string) (map[string][]compute.{{ resource }}, error) {
	service := compute.New{{ resource }}sService(r.compute)

	list := make(map[string][]compute.{{ resource }})
	zones, err := r.getZones()
	if err != nil {
		return nil, errors.Wrap(err, "unable to get zones in region")
	}
	for _, zone := range zones {
		resources := make([]compute.{{ resource }}, 0)
		if err := service.List(r.project, zone).
			Filter(filter).
			MaxResults(int64(r.maxResults)).
			Pages(ctx, func(page *compute.{{ resource }}List) error {
				for _, res := range page.Items {
					resources = append(resources, *res)
				}
				return nil
			}); err != nil {
			return nil, errors.Wrap(err, "unable to list compute {{ resource }} from google APIs")
		}
		list[zone] = resources
	}
	return list, nil
}
"""

# ── Global resources: one listing per project ─────────────────────

GLOBAL_FUNCTION_TEMPLATE = """\
// List{{ resource }}s returns a list of {{ resource }} within a project
func (r *GCPReader) List{{ resource }}s(ctx context.Context, filter string) ([]compute.{{ resource }}, error) {
	service := compute.New{{ resource }}sService(r.compute)

	resources := make([]compute.{{ resource }}, 0)
	if err := service.List(r.project).
		Filter(filter).
		MaxResults(int64(r.maxResults)).
		Pages(ctx, func(page *compute.{{ resource }}List) error {
			for _, res := range page.Items {
				resources = append(resources, *res)
			}
			return nil
		}); err != nil {
		return nil, errors.Wrap(err, "unable to list compute {{ resource }} from google APIs")
	}
	return resources, nil
}
"""
