"""Test suite for data_models.

Test Structure:
- domain/models/: Tests for data models, type categories and the size table
- infrastructure/: Tests for logging utilities

Run tests with pytest:
    pytest                    # Run all tests
    pytest -m unit            # Run unit tests only
"""
