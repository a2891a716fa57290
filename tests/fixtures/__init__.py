"""
Test Fixtures and Utilities

Shared synthetic entries and builders for unit and integration tests.
All test data is synthetic and does not contain real financial information.
"""
