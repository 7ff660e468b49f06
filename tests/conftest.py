"""Pytest fixtures for pagebreak tests."""

from pathlib import Path

import pytest
from lxml import html

from helpers import numbered_items, template_page
from pagebreak.state import PaginationState


@pytest.fixture
def site(tmp_path):
    """A source and output directory for a site."""
    source = tmp_path / "source"
    output = tmp_path / "output"
    source.mkdir()
    return {"root": tmp_path, "source": source, "output": output}


@pytest.fixture
def write_file():
    """Write a file, creating its parent directories."""

    def _write(path: Path, content: str) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def make_state(tmp_path):
    """Build an unhydrated PaginationState from a document string."""

    def _make(content: str, file_path: str = "index.html") -> PaginationState:
        document = html.document_fromstring(content)
        return PaginationState(document, Path(file_path), tmp_path / "output")

    return _make


@pytest.fixture
def blog_page():
    """A paginated blog index with metadata and controls."""
    head = """<title>Blog</title>
        <meta property="og:title" content="Blog">
        <meta name="twitter:title" content="Blog">
        <link rel="canonical" href="https://example.com/blog/">
        <meta property="og:url" content="https://example.com/blog/">
        <link rel="stylesheet" href="style.css">"""
    body = f"""<div id="list" data-pagebreak="2">{numbered_items(5)}</div>
        <nav>
            <a id="prev" href="#" data-pagebreak-control="prev">Previous</a>
            <span id="no-prev" data-pagebreak-control="!prev">No previous</span>
            <span id="current" data-pagebreak-label="current">1</span>
            <span id="total" data-pagebreak-label="total">1</span>
            <a id="next" href="#" data-pagebreak-control="next">Next</a>
            <span id="no-next" data-pagebreak-control="!next">No next</span>
        </nav>
        <a id="home" href="../">Home</a>
        <a id="external" href="https://example.com/">External</a>
        <a id="rooted" href="/about/">About</a>"""
    return template_page(body, head=head)
