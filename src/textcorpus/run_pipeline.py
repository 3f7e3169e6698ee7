from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from .corpus import Corpus
from .document import Document
from .profiles import apply_profile, load_profile, profile_from_cfg


def load_jsonl(path: Path) -> list[dict]:
    items: list[dict] = []
    with path.open("r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            items.append(json.loads(line))
    return items


def write_jsonl(items: list[dict], out_path: Path) -> None:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    with out_path.open("w", encoding="utf-8") as f:
        for item in items:
            f.write(json.dumps(item, ensure_ascii=False) + "\n")


def load_corpus_jsonl(path: Path) -> Corpus:
    """Build a corpus from JSONL lines of the form {"text": ..., <attributes>}."""
    docs: list[Document] = []
    for obj in load_jsonl(path):
        attributes = {k: v for k, v in obj.items() if k != "text"}
        docs.append(Document(text=str(obj["text"]), attributes=attributes))
    return Corpus().add_docs(docs)


def corpus_to_records(corpus: Corpus) -> list[dict]:
    return [{"text": d.text, **d.attributes} for d in corpus]


def main(argv: list[str] | None = None) -> None:
    p = argparse.ArgumentParser(description="Clean a JSONL document collection with a YAML profile")
    p.add_argument("--docs", required=True, help="JSONL with one {\"text\": ...} object per line")
    p.add_argument("--profile", default=None, help="YAML cleaning profile (default: built-in basic)")
    p.add_argument("--out", required=True, help="Output JSONL path")
    p.add_argument("--show", type=int, default=0, help="Print the first N characters of each document")
    p.add_argument("--verbose", action="store_true", help="Log every corpus operation")
    args = p.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%H:%M:%S",
        )

    profile = load_profile(Path(args.profile)) if args.profile else profile_from_cfg(None)
    corpus = load_corpus_jsonl(Path(args.docs))
    n_in = corpus.n_docs

    result = apply_profile(corpus, profile)
    out_path = Path(args.out)
    write_jsonl(corpus_to_records(result), out_path)

    print("=== Cleaning complete ===")
    print(f"Profile: {profile.name} | steps: {', '.join(profile.steps)}")
    print(f"Documents in: {n_in} | kept: {result.n_docs}")
    print(f"Wrote {out_path}")
    if args.show > 0:
        print(result.to_string(nchars=args.show))


if __name__ == "__main__":
    main()
