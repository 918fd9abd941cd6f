"""Read WebQuestions datasets and mapping tables, write conversion results."""

import json
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

import pandas as pd


@dataclass
class ParseRecord:
    """One candidate SPARQL parse of a question."""
    sparql: str


@dataclass
class QuestionRecord:
    """A single question with its candidate parses."""
    question_id: str
    raw_question: str
    processed_question: str = ""
    parses: list[ParseRecord] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict) -> "QuestionRecord":
        return cls(
            question_id=data.get("QuestionId", ""),
            raw_question=data.get("RawQuestion", ""),
            processed_question=data.get("ProcessedQuestion", ""),
            parses=[ParseRecord(sparql=p.get("Sparql") or "") for p in data.get("Parses", [])],
        )


@dataclass
class ConvertedExample:
    """A dataset question with its converted query (None if nothing converted)."""
    question: str
    sparql: str | None = None

    def to_dict(self) -> dict:
        return {"question": self.question, "sparql": self.sparql}


def load_questions(path: Path) -> list[QuestionRecord]:
    """
    Load questions from a WebQuestions JSON file.

    Args:
        path: File holding {"Questions": [...]}

    Returns:
        List of QuestionRecord objects, in file order
    """
    if not path.exists():
        raise FileNotFoundError(f"Dataset not found at {path}")

    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict) or "Questions" not in data:
        raise ValueError(f"Expected an object with a 'Questions' list in {path}")

    return [QuestionRecord.from_dict(q) for q in data["Questions"]]


def load_mappings(path: Path) -> dict[str, str]:
    """
    Load a mapping table from legacy local id to successor local id.

    JSON files hold a single object; .tsv files hold two tab-separated
    columns without a header.
    """
    if not path.exists():
        raise FileNotFoundError(f"Mapping table not found at {path}")

    if path.suffix == ".tsv":
        df = pd.read_csv(
            path,
            sep="\t",
            header=None,
            names=["legacy", "successor"],
            dtype=str,
            keep_default_na=False,
        )
        return dict(zip(df["legacy"], df["successor"]))

    mappings = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(mappings, dict):
        raise ValueError(f"Expected a JSON object in {path}")
    return mappings


def save_converted(path: Path, examples: Iterable[ConvertedExample]):
    """Write converted examples as a JSON array."""
    path.write_text(
        json.dumps([ex.to_dict() for ex in examples], indent=2, ensure_ascii=False),
        encoding="utf-8",
    )


def save_missing_mappings(path: Path, legacy_ids: Iterable[str]):
    """Write legacy ids without a mapping entry, one per line."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(legacy_ids), encoding="utf-8")
