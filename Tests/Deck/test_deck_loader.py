"""Tests for reading Markdown decks."""

import pytest

from deckview.Deck.loader import load_deck, parse_deck, split_slides
from deckview.errors import DeckLoadError


class TestSplitSlides:

    def test_splits_on_separator_lines(self):
        slides = split_slides("# One\n---\n# Two\n\n---\nThree")

        assert [slide.body for slide in slides] == ["# One", "# Two", "Three"]
        assert [slide.index for slide in slides] == [0, 1, 2]

    def test_separator_must_be_alone_on_its_line(self):
        slides = split_slides("text --- more\n----\nstill one slide")

        assert len(slides) == 1

    def test_blank_chunks_are_dropped(self):
        slides = split_slides("---\n# Only\n---\n\n---\n")

        assert len(slides) == 1
        assert slides[0].index == 0

    def test_titles_from_first_heading(self):
        slides = split_slides("Intro text\n## Agenda ##\n---\nno heading")

        assert slides[0].title == "Agenda"
        assert slides[1].title is None

    def test_empty_document(self):
        assert split_slides("") == []


class TestParseDeck:

    def test_title_from_first_slide(self):
        deck = parse_deck("# Quarterly review\n---\n# Numbers")

        assert deck.title == "Quarterly review"
        assert deck.total == 2

    def test_explicit_title(self):
        assert parse_deck("# A", title="Talk").title == "Talk"

    def test_untitled(self):
        assert parse_deck("just text").title == "Untitled deck"


class TestLoadDeck:

    def test_load_from_file(self, tmp_path):
        path = tmp_path / "talk.md"
        path.write_text("# Hello\n---\n# World\n", encoding="utf-8")

        deck = load_deck(path)

        assert deck.total == 2
        assert deck.source_path == str(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(DeckLoadError, match="file not found"):
            load_deck(tmp_path / "missing.md")

    def test_not_utf8(self, tmp_path):
        path = tmp_path / "latin1.md"
        path.write_bytes("# Caf\xe9".encode("latin-1"))

        with pytest.raises(DeckLoadError, match="UTF-8"):
            load_deck(path)

    def test_empty_file_logs_warning(self, tmp_path, log_messages):
        path = tmp_path / "empty.md"
        path.write_text("\n", encoding="utf-8")

        deck = load_deck(path)

        assert deck.total == 0
        assert any(record["level"].name == "WARNING" for record in log_messages)
