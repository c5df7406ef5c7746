"""HTTP route groups, one module per resource."""
