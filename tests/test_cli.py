import json
import sys
from pathlib import Path

import pytest

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
sys.path.insert(0, str(SRC_ROOT))

from sensegraft import cli  # noqa: E402

DATA_DIR = SRC_ROOT / "sensegraft" / "data"


def test_clean_positional_glosses(capsys):
    assert cli.main(["clean", "a [[large]] [[cat|cats]]", "{{w|Paris}}, France"]) == 0
    assert capsys.readouterr().out.splitlines() == ["a large cats", "Paris, France"]


def test_clean_from_file_keeping_links(tmp_path, capsys):
    path = tmp_path / "glosses.txt"
    path.write_text("{{lb|en|slang}} A [[dog]]\n{{gloss|fish}}\n", encoding="utf-8")

    assert cli.main(["clean", "--input", str(path), "--keep-links"]) == 0
    assert capsys.readouterr().out.splitlines() == ["A [[dog]]", "fish"]


def test_clean_missing_file_fails(tmp_path):
    assert cli.main(["clean", "--input", str(tmp_path / "missing.txt")]) == 2


@pytest.mark.parametrize("scorer", ["first", "overlap"])
def test_propose_writes_json_lines(tmp_path, capsys, scorer):
    output = tmp_path / "out" / "attachments.jsonl"
    code = cli.main(
        [
            "propose",
            "--records",
            str(DATA_DIR / "senses.jsonl"),
            "--inventory-json",
            str(DATA_DIR / "inventory_sample.json"),
            "--output",
            str(output),
            "--scorer",
            scorer,
            "--max-workers",
            "2",
        ]
    )

    assert code == 0
    rows = [json.loads(line) for line in output.read_text(encoding="utf-8").splitlines()]
    assert [(row["lemma"], row["parent"]) for row in rows] == [
        ("beagle", "n-dog"),
        ("woofle", "v-bark"),
    ]
    assert "2 proposals" in capsys.readouterr().out


def test_propose_with_missing_records(tmp_path):
    code = cli.main(
        [
            "propose",
            "--records",
            str(tmp_path / "nope.jsonl"),
            "--inventory-json",
            str(DATA_DIR / "inventory_sample.json"),
        ]
    )
    assert code == 2


def test_propose_with_malformed_records(tmp_path):
    records = tmp_path / "senses.jsonl"
    records.write_text('{"lemma": "x"}\n', encoding="utf-8")
    code = cli.main(
        [
            "propose",
            "--records",
            str(records),
            "--inventory-json",
            str(DATA_DIR / "inventory_sample.json"),
            "--output",
            str(tmp_path / "out.jsonl"),
        ]
    )
    assert code == 2
