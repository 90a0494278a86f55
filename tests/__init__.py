"""Test suite for analysisproject.

Test organization:
- fixtures/: Sample project documents
- unit/: Unit tests for individual modules

Run tests with:
    pytest tests/
    pytest tests/unit/ -v --tb=short
"""
