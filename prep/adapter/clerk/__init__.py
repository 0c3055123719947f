"""Clerk identity provider adapter."""
