"""Core domain: ports, errors, scoring and services."""
