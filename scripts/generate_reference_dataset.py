from __future__ import annotations

import argparse
import json
from pathlib import Path

from concurso_similarity.datasets import ReferenceDatasetGenerator


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate synthetic convocatoria records")
    parser.add_argument("--size", type=int, default=1000)
    parser.add_argument("--seed", type=int, default=42)
    parser.add_argument("--duplicate-rate", type=float, default=0.15)
    parser.add_argument("--output", type=Path, default=Path("data/reference_concursos.jsonl"))
    args = parser.parse_args()

    records = ReferenceDatasetGenerator(seed=args.seed).generate(size=args.size, duplicate_rate=args.duplicate_rate)

    args.output.parent.mkdir(parents=True, exist_ok=True)
    with args.output.open("w", encoding="utf-8") as handle:
        for record in records:
            handle.write(json.dumps(record.to_dict(), ensure_ascii=False))
            handle.write("\n")


if __name__ == "__main__":
    main()
