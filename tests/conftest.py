"""Shared test fixtures: throwaway git repositories and JaCoCo report pages."""

import os
import shutil
import subprocess
from pathlib import Path
from typing import Optional

import pytest

GIT_AVAILABLE = shutil.which("git") is not None


def pytest_configure(config):
    """Register the git marker."""
    config.addinivalue_line("markers", "git: test builds a real git repository")


def pytest_collection_modifyitems(config, items):
    """Skip git-backed tests when git is not installed."""
    if GIT_AVAILABLE:
        return
    skip_git = pytest.mark.skip(reason="git not found")
    for item in items:
        if "git" in item.keywords:
            item.add_marker(skip_git)


class GitRepoBuilder:
    """Builds a git history commit by commit, with a chosen author per commit."""

    def __init__(self, root: Path):
        self.root = root
        self.root.mkdir(parents=True, exist_ok=True)
        self.git("init", "-q")
        self.git("symbolic-ref", "HEAD", "refs/heads/main")
        self.git("config", "user.name", "Committer")
        self.git("config", "user.email", "committer@example.com")
        self.git("config", "commit.gpgsign", "false")

    def git(self, *args: str, author: Optional[str] = None) -> str:
        env = dict(os.environ)
        env["GIT_CONFIG_NOSYSTEM"] = "1"
        if author is not None:
            env["GIT_AUTHOR_NAME"] = author
            env["GIT_AUTHOR_EMAIL"] = f"{author.lower().replace(' ', '.')}@example.com"
        result = subprocess.run(
            ["git", "-C", str(self.root), *args],
            capture_output=True,
            text=True,
            env=env,
            check=True,
        )
        return result.stdout.strip()

    def commit(self, author: str, files: dict, message: str = "change") -> str:
        """Write ``files`` (path -> content), commit them as ``author``, return the sha."""
        for rel_path, content in files.items():
            target = self.root / rel_path
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content)
        self.git("add", "-A")
        self.git("commit", "-q", "-m", message, author=author)
        return self.head()

    def move(self, author: str, old: str, new: str) -> str:
        (self.root / new).parent.mkdir(parents=True, exist_ok=True)
        self.git("mv", old, new)
        self.git("commit", "-q", "-m", f"move {old}", author=author)
        return self.head()

    def checkout(self, branch: str, create: bool = False) -> None:
        if create:
            self.git("checkout", "-q", "-b", branch)
        else:
            self.git("checkout", "-q", branch)

    def merge(self, author: str, branch: str) -> str:
        self.git("merge", "-q", "--no-ff", "-m", f"merge {branch}", branch, author=author)
        return self.head()

    def head(self) -> str:
        return self.git("rev-parse", "HEAD")


def jacoco_page(covered: int = 0, partial: int = 0, uncovered: int = 0, name: str = "Foo.java") -> str:
    """HTML shaped like a JaCoCo source page with the given line states."""
    lines = []
    number = 1
    for css, count in (("fc", covered), ("pc bpc", partial), ("nc", uncovered)):
        for _ in range(count):
            title = ' title="1 of 2 branches missed."' if css.startswith("pc") else ""
            lines.append(f'<span class="{css}" id="L{number}"{title}>  line {number};</span>')
            number += 1
    source = "\n".join(lines)
    return (
        '<?xml version="1.0" encoding="UTF-8"?><!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 '
        'Strict//EN" "http://www.w3.org/TR/xhtml1/DTD/xhtml1-strict.dtd">'
        '<html xmlns="http://www.w3.org/1999/xhtml" lang="en"><head>'
        '<meta http-equiv="Content-Type" content="text/html;charset=UTF-8"/>'
        '<link rel="stylesheet" href="../jacoco-resources/report.css" type="text/css"/>'
        f"<title>{name}</title></head><body onload=\"window['PR_TAB_WIDTH']=4;prettyPrint()\">"
        '<div class="breadcrumb" id="breadcrumb"><span class="info">'
        '<a href="../jacoco-sessions.html" class="el_session">Sessions</a></span></div>'
        f'<h1>{name}</h1><pre class="source lang-java linenums">{source}</pre>'
        '<div class="footer"><span class="right">Created with JaCoCo</span></div></body></html>'
    )


@pytest.fixture
def git_repo(tmp_path):
    """An empty git repository with a builder for commits."""
    return GitRepoBuilder(tmp_path / "repo")


@pytest.fixture
def write_report():
    """Write a JaCoCo page for ``package``/``file_name`` under a report root."""

    def _write(
        report_root: Path,
        package: str,
        file_name: str,
        covered: int = 0,
        partial: int = 0,
        uncovered: int = 0,
    ) -> Path:
        page = Path(report_root) / (package or "default") / f"{file_name}.html"
        page.parent.mkdir(parents=True, exist_ok=True)
        page.write_text(jacoco_page(covered, partial, uncovered, name=file_name), encoding="utf-8")
        return page

    return _write
