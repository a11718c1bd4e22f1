"""Test fixtures for fluent record scenarios.

This package provides reusable test fixtures:
- records: In-memory collaborators for RecordService tests
- api: Record store TestClient, fresh store and wired RecordStoreClient
"""
