"""
Use Cases

Organized into domain folders:
- admin/: Tenant provisioning
- tenants/: Tenant self-service
- workspaces/: Workspace management
- data_tables/: Tables, columns, rows, views, options, relations, files
- batch/: Batch RPC dispatch

Import from subdirectories.
"""
