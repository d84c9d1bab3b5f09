"""Entity handlers (users, stores, products), independent of the HTTP layer."""
