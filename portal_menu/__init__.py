"""Menu composition for the admin, client, service and talent portals."""
