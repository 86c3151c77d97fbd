import json
from pathlib import Path

from click.testing import CliRunner as ClickRunner
from typer.testing import CliRunner

from readscore.cli import app
from readscore.inspect_cli import inspect_group
from tests.utils import chapter_html, paragraph_of, write_minimal_epub

runner = CliRunner()

EASY_TEXT = "The cat sat on the mat. " * 60
COMPLEX = (
    "Although the weather was cold and grey, the hikers kept walking up the "
    "steep trail, which led them toward the distant summit."
)


def test_cli_analyze_outputs_summary(tmp_path: Path):
    """analyze returns one JSON entry per supported file in a directory."""
    corpus_dir = _create_sample_corpus(tmp_path)
    result = runner.invoke(app, ["analyze", "--input-path", str(corpus_dir)])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    doc_ids = [doc["doc_id"] for doc in payload["documents"]]
    assert sorted(doc_ids) == ["article.html", "chapter1.txt", "novella.epub"]
    assert all(doc["error"] is None for doc in payload["documents"])
    assert all("readingTime" in doc for doc in payload["documents"])


def test_cli_analyze_text_format(tmp_path: Path):
    source = tmp_path / "easy.txt"
    source.write_text(EASY_TEXT, encoding="utf-8")
    result = runner.invoke(
        app, ["analyze", "--input-path", str(source), "--format", "text"]
    )
    assert result.exit_code == 0
    assert "easy.txt" in result.stdout
    assert "Level: Easy" in result.stdout
    assert "Reading time: 1 min" in result.stdout


def test_cli_analyze_rejects_unknown_format(tmp_path: Path):
    source = tmp_path / "easy.txt"
    source.write_text(EASY_TEXT, encoding="utf-8")
    result = runner.invoke(
        app, ["analyze", "--input-path", str(source), "--format", "xml"]
    )
    assert result.exit_code == 2


def test_cli_analyze_uses_config_file(tmp_path: Path):
    source = tmp_path / "complex.txt"
    source.write_text(COMPLEX, encoding="utf-8")
    config_path = tmp_path / "config.yaml"
    config_path.write_text("include_issue_text: false\n", encoding="utf-8")
    result = runner.invoke(
        app,
        ["analyze", "--input-path", str(source), "--config", str(config_path)],
    )
    assert result.exit_code == 0
    doc = json.loads(result.stdout)["documents"][0]
    assert doc["issues"]["complexSentences"][0]["text"] is None


def test_cli_analyze_tolerates_non_utf8_text(tmp_path: Path):
    """A Latin-1 file is read leniently and does not abort the other documents."""
    corpus_dir = tmp_path / "corpus"
    corpus_dir.mkdir()
    (corpus_dir / "cafe.txt").write_bytes(
        ("Café culture. " + EASY_TEXT).encode("latin-1")
    )
    (corpus_dir / "easy.txt").write_text(EASY_TEXT, encoding="utf-8")
    result = runner.invoke(app, ["analyze", "--input-path", str(corpus_dir)])
    assert result.exit_code == 0
    docs = {doc["doc_id"]: doc for doc in json.loads(result.stdout)["documents"]}
    assert set(docs) == {"cafe.txt", "easy.txt"}
    assert docs["cafe.txt"]["error"] is None
    assert docs["cafe.txt"]["wordCount"] == docs["easy.txt"]["wordCount"] + 2


def test_inspect_reads_non_utf8_text(tmp_path: Path):
    source = tmp_path / "cafe.txt"
    source.write_bytes("Café culture matters.".encode("latin-1"))
    result = ClickRunner().invoke(inspect_group, ["words", str(source)])
    assert result.exit_code == 0
    assert "culture" in result.output


def test_cli_rejects_mistyped_config_value(tmp_path: Path):
    source = tmp_path / "easy.txt"
    source.write_text(EASY_TEXT, encoding="utf-8")
    config_path = tmp_path / "config.yaml"
    config_path.write_text("min_text_chars: lots\n", encoding="utf-8")
    result = runner.invoke(
        app,
        ["analyze", "--input-path", str(source), "--config", str(config_path)],
    )
    assert result.exit_code == 2


def test_cli_print_config():
    """print-config dumps the default configuration values."""
    result = runner.invoke(app, ["print-config"])
    assert result.exit_code == 0
    assert "min_text_chars: 50" in result.stdout


def test_cli_selection(tmp_path: Path):
    text = "First line of the selected passage here.\nSecond line follows right after it."
    result = runner.invoke(app, ["selection", "--text", text])
    assert result.exit_code == 0
    doc = json.loads(result.stdout)["documents"][0]
    assert doc["doc_id"] == "selection"
    assert doc["isSelectionAnalysis"] is True


def test_cli_selection_reads_stdin():
    text = "A passage piped in on standard input, long enough to score."
    result = runner.invoke(app, ["selection"], input=text)
    assert result.exit_code == 0
    assert json.loads(result.stdout)["documents"][0]["isSelectionAnalysis"] is True


def test_cli_selection_too_short():
    result = runner.invoke(app, ["selection", "--text", "Too short."])
    assert result.exit_code == 2


def test_cli_issues_pages_through_results(tmp_path: Path):
    source = tmp_path / "issues.txt"
    source.write_text("\n".join([COMPLEX] * 3), encoding="utf-8")

    first = runner.invoke(
        app, ["issues", "--input-path", str(source), "--batch-size", "2"]
    )
    assert first.exit_code == 0
    assert "complex_sentences: showing up to 2 of 3" in first.stdout
    assert "[text#0]" in first.stdout
    assert "rerun with --page 2" in first.stdout

    second = runner.invoke(
        app,
        ["issues", "--input-path", str(source), "--batch-size", "2", "--page", "2"],
    )
    assert second.exit_code == 0
    assert "complex_sentences: showing up to 3 of 3" in second.stdout
    assert "[text#2]" in second.stdout
    assert "More issues" not in second.stdout


def test_inspect_syllables():
    result = ClickRunner().invoke(inspect_group, ["syllables", "table", "rhythm"])
    assert result.exit_code == 0
    assert "table: 2" in result.output
    assert "rhythm: 1" in result.output


def test_inspect_sentences_and_clauses(tmp_path: Path):
    source = tmp_path / "sample.txt"
    source.write_text("Dr. Smith went home. " + COMPLEX, encoding="utf-8")
    sentences = ClickRunner().invoke(inspect_group, ["sentences", str(source)])
    assert sentences.exit_code == 0
    assert "Total sentences: 2" in sentences.output

    clauses = ClickRunner().invoke(inspect_group, ["clauses", str(source)])
    assert clauses.exit_code == 0
    assert "3 clauses, 22 words" in clauses.output


def test_inspect_words_with_syllables(tmp_path: Path):
    source = tmp_path / "words.txt"
    source.write_text("Readability matters.", encoding="utf-8")
    result = ClickRunner().invoke(inspect_group, ["words", str(source), "--syllables"])
    assert result.exit_code == 0
    assert "readability\t5" in result.output
    assert "Total words: 2" in result.output


def _create_sample_corpus(tmp_path: Path) -> Path:
    """Create a small corpus with .txt, .html and .epub sources."""
    corpus_dir = tmp_path / "corpus"
    corpus_dir.mkdir()
    (corpus_dir / "chapter1.txt").write_text(EASY_TEXT, encoding="utf-8")
    (corpus_dir / "article.html").write_text(
        f"<html><body><article><p>{paragraph_of(3, 12)}</p></article></body></html>",
        encoding="utf-8",
    )
    (corpus_dir / "notes.csv").write_text("ignored,file\n", encoding="utf-8")
    write_minimal_epub(
        corpus_dir / "novella.epub",
        chapters=[
            chapter_html("The captain stood on the deck and watched the grey sea.")
        ],
    )
    return corpus_dir
