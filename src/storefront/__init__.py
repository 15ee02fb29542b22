"""Storefront: product catalogue, shopping cart, checkout and order history."""
