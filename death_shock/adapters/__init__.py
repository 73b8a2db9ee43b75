"""Adapters for the host and the OpenShock API."""
