"""SQLAlchemy repositories implementing the contracts in storefront.core.contracts."""
