"""Tests for the public generate_challenge entry point."""

import random

import pytest

import coverage_quest
from coverage_quest import (
    Challenge,
    ChallengeConfig,
    NoEligibleCandidateError,
    RepositoryAccessError,
    generate_challenge,
)

pytestmark = pytest.mark.git


@pytest.fixture
def workspace(git_repo, write_report, monkeypatch, tmp_path):
    """Alice changed Cart (missed lines) and Price (fully covered)."""
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.chdir(tmp_path)
    git_repo.commit("Bob Builder", {"README.md": "shop\n"})
    git_repo.commit(
        "Alice Example",
        {
            "src/main/java/com/example/shop/Cart.java": "class Cart {}\n",
            "src/main/java/com/example/shop/Price.java": "class Price {}\n",
            "src/test/java/com/example/shop/CartTest.java": "class CartTest {}\n",
        },
    )
    report_root = git_repo.root / "target" / "site" / "jacoco"
    write_report(report_root, "com.example.shop", "Cart.java", covered=7, partial=1, uncovered=2)
    write_report(report_root, "com.example.shop", "Price.java", covered=12)
    return git_repo.root


class TestGenerateChallenge:
    """Test generate_challenge."""

    def test_returns_challenge_for_class_with_missed_lines(self, workspace):
        challenge = generate_challenge(workspace, "Alice Example", rng=random.Random(1))

        assert isinstance(challenge, Challenge)
        assert challenge.qualified_name == "com.example.shop.Cart"
        assert challenge.describe() == (
            "Write a test to cover more lines in class Cart in package com.example.shop"
        )
        assert challenge.report_path == (
            workspace / "target" / "site" / "jacoco" / "com.example.shop" / "Cart.java.html"
        )

    def test_accepts_string_workspace(self, workspace):
        challenge = generate_challenge(str(workspace), "Alice Example")
        assert challenge.class_name == "Cart"

    def test_overrides_reach_config(self, workspace):
        with pytest.raises(NoEligibleCandidateError):
            generate_challenge(workspace, "Alice Example", report_dir="build/reports/jacoco")

    def test_explicit_config(self, workspace):
        config = ChallengeConfig(max_authored_commits=1)
        assert generate_challenge(workspace, "Alice Example", config=config).class_name == "Cart"

    def test_unknown_user(self, workspace):
        with pytest.raises(NoEligibleCandidateError):
            generate_challenge(workspace, "alice example")

    def test_missing_repository(self, tmp_path):
        with pytest.raises(RepositoryAccessError):
            generate_challenge(tmp_path / "nowhere", "Alice Example", config=ChallengeConfig())

    def test_version(self):
        assert coverage_quest.__version__ == "0.1.0"
