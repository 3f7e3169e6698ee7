"""Tests for the JSONL command-line runner."""
import json

from textcorpus.run_pipeline import corpus_to_records, load_corpus_jsonl, load_jsonl, main, write_jsonl


def _write_docs(path, items):
    path.write_text("".join(json.dumps(i) + "\n" for i in items) + "\n", encoding="utf-8")


def test_load_corpus_jsonl_splits_attributes(tmp_path):
    path = tmp_path / "docs.jsonl"
    _write_docs(path, [{"text": "one", "id": 1}, {"text": "two", "lang": "en"}])
    corpus = load_corpus_jsonl(path)
    assert corpus.texts() == ["one", "two"]
    assert corpus[0].attributes == {"id": 1}
    assert corpus[1].attributes == {"lang": "en"}
    assert corpus_to_records(corpus) == [{"text": "one", "id": 1}, {"text": "two", "lang": "en"}]


def test_write_jsonl_creates_parent(tmp_path):
    out = tmp_path / "nested" / "out.jsonl"
    write_jsonl([{"text": "é"}], out)
    assert load_jsonl(out) == [{"text": "é"}]


def test_main_end_to_end(tmp_path, capsys):
    docs = tmp_path / "docs.jsonl"
    _write_docs(docs, [{"text": "Hello,\nWorld 42!", "id": "a"}, {"text": "   ", "id": "b"}])
    profile = tmp_path / "profile.yaml"
    profile.write_text(
        "name: test\nsteps: [remove_newlines, remove_interpunctuation, remove_digits, to_lower, clean]\n",
        encoding="utf-8",
    )
    out = tmp_path / "out.jsonl"

    main(["--docs", str(docs), "--profile", str(profile), "--out", str(out), "--show", "20"])

    assert load_jsonl(out) == [{"text": "hello world", "id": "a"}]
    printed = capsys.readouterr().out
    assert "Profile: test" in printed
    assert "Documents in: 2 | kept: 1" in printed
    assert "Document 0:" in printed


def test_main_default_profile(tmp_path):
    docs = tmp_path / "docs.jsonl"
    _write_docs(docs, [{"text": "a\r\nb"}])
    out = tmp_path / "out.jsonl"
    main(["--docs", str(docs), "--out", str(out)])
    assert load_jsonl(out) == [{"text": "a b"}]
