"""Main configuration package for the Storefront Django project."""
