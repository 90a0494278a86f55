"""Unit tests for analysisproject."""
