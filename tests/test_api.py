# -*- coding: utf-8 -*-
"""
Tests for the FastAPI endpoints.
"""

import sys
from pathlib import Path
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

# Add api directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "api"))

from index import app


@pytest.fixture
def client() -> TestClient:
    return TestClient(app)


class TestOptimizeEndpoint:
    """Tests for POST /api/optimize."""

    def test_successful_optimization(self, client, report_200_words):
        """A valid request returns optimized content and stats."""
        response = client.post("/api/optimize", json={
            "content": report_200_words,
            "primaryKeywords": ["widget"],
            "secondaryKeywords": ["gadget"],
            "primaryFrequency": 2.5,
            "secondaryFrequency": 1,
        })
        assert response.status_code == 200

        data = response.json()
        assert data["primaryKeywordStats"][0]["keyword"] == "widget"
        assert data["primaryKeywordStats"][0]["occurrences"] == 5
        assert data["secondaryKeywordStats"][0]["keyword"] == "gadget"
        assert data["secondaryKeywordStats"][0]["occurrences"] == 2
        assert data["totalWords"] == 207
        assert data["wordCount"] == data["totalWords"]
        assert "widget" in data["optimizedContent"]

    def test_word_limit_exceeded(self, client, report_1000_words):
        """Content over the word limit gets a distinct 400 response."""
        response = client.post("/api/optimize", json={
            "content": report_1000_words + " extra",
            "primaryKeywords": ["widget"],
            "primaryFrequency": 2.5,
            "secondaryFrequency": 1,
        })
        assert response.status_code == 400
        assert response.json()["detail"] == "Content exceeds the 1000 word limit"

    def test_output_word_count_can_exceed_limit(self, client, report_1000_words):
        """The limit covers the input only; reported counts describe the output."""
        response = client.post("/api/optimize", json={
            "content": report_1000_words,
            "primaryKeywords": ["widget"],
            "primaryFrequency": 2.5,
            "secondaryFrequency": 1,
        })
        assert response.status_code == 200
        assert response.json()["totalWords"] == 1021

    def test_validation_error(self, client):
        """Requests without keywords are rejected by validation."""
        response = client.post("/api/optimize", json={
            "content": "Some content.",
            "primaryKeywords": [],
            "secondaryKeywords": [],
            "primaryFrequency": 2.5,
            "secondaryFrequency": 1,
        })
        assert response.status_code == 422

    def test_frequency_out_of_range(self, client):
        """Out-of-range frequencies are rejected by validation."""
        response = client.post("/api/optimize", json={
            "content": "Some content.",
            "primaryKeywords": ["content"],
            "primaryFrequency": 20,
            "secondaryFrequency": 1,
        })
        assert response.status_code == 422

    def test_unexpected_failure(self, client):
        """Unexpected errors return a generic 500 without partial results."""
        with patch("index.optimize_content", side_effect=RuntimeError("boom")):
            response = client.post("/api/optimize", json={
                "content": "Some content.",
                "primaryKeywords": ["content"],
            })
        assert response.status_code == 500
        assert response.json() == {"detail": "An unexpected error occurred"}


class TestInfoEndpoints:
    """Tests for health and info endpoints."""

    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_info(self, client):
        response = client.get("/api/info")
        assert response.status_code == 200
        data = response.json()
        assert data["limits"]["max_words"] == 1000
        assert "POST /api/optimize" in data["endpoints"]

    def test_root(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert "Keyword Density Optimizer API" in response.text
