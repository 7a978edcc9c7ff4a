"""Integration tests for env-config.

This package contains integration tests that verify:
- End-to-end configuration serving over HTTP
- .env file loading before the first request
"""
