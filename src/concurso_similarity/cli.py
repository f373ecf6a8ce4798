from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from concurso_similarity.benchmark import DEFAULT_THRESHOLDS, run_similarity_benchmarks, run_strategy_matrix
from concurso_similarity.config import STRATEGIES, TEXT_SOURCES, ClusterOptions, Settings
from concurso_similarity.datasets import ReferenceDatasetGenerator
from concurso_similarity.errors import InvalidRecordError
from concurso_similarity.interfaces import Ranker
from concurso_similarity.logging_config import setup_logging
from concurso_similarity.models import ConcursoRecord
from concurso_similarity.runners import LocalSimilarityPipeline
from concurso_similarity.schema import BlockFlag
from concurso_similarity.steps import MatchRanker, TermFrequencyVectorizer, TextNormalizer, diff_documents

logger = logging.getLogger(__name__)


def main(argv: Sequence[str] | None = None) -> None:
    settings = Settings()
    parser = _build_parser(settings)
    args = parser.parse_args(argv)
    setup_logging(settings)

    if args.command is None:
        parser.print_help()
        return

    vectorizer = TermFrequencyVectorizer(
        TextNormalizer(max_depth=settings.NORMALIZE_MAX_DEPTH, max_nodes=settings.NORMALIZE_MAX_NODES)
    )

    try:
        payload = _dispatch(args, vectorizer)
    except (ValueError, OSError) as exc:
        parser.error(str(exc))

    _emit(payload, args.output)


def _dispatch(args: argparse.Namespace, vectorizer: TermFrequencyVectorizer) -> Any:
    if args.command == "cluster":
        return run_cluster(
            records=_read_records(args.input),
            options=ClusterOptions(
                similarity_threshold=args.threshold,
                strategy=args.strategy,
                max_iterations=args.max_iterations,
                text_source=args.text_source,
            ),
            filters=dict(args.filter or []),
            vectorizer=vectorizer,
        )
    if args.command == "rank":
        ranker: Ranker = MatchRanker(vectorizer=vectorizer)
        document = _read_document(args.document)
        records = _read_records(args.input)
        results = ranker.compare(document, records) if args.with_differences else ranker.rank(document, records)
        return [result.to_dict() for result in results]
    if args.command == "diff":
        return [difference.to_dict() for difference in diff_documents(_read_document(args.new), _read_document(args.old))]
    if args.command == "benchmark":
        records = (
            _read_records(args.input)
            if args.input is not None
            else ReferenceDatasetGenerator(seed=args.seed).generate(size=args.size)
        )
        if args.strategy is None:
            results = run_strategy_matrix(records, thresholds=args.thresholds)
        else:
            results = run_similarity_benchmarks(records, thresholds=args.thresholds, strategy=args.strategy)
        return [result.to_dict() for result in results]
    if args.command == "generate-dataset":
        records = ReferenceDatasetGenerator(seed=args.seed).generate(size=args.size, duplicate_rate=args.duplicate_rate)
        return [record.to_dict() for record in records]
    raise ValueError(f"unknown command {args.command!r}")


def run_cluster(
    *,
    records: list[ConcursoRecord],
    options: ClusterOptions,
    filters: dict[BlockFlag, bool],
    vectorizer: TermFrequencyVectorizer,
) -> list[dict[str, Any]]:
    if not options.within_recommended_range:
        logger.warning(
            "similarity threshold outside the recommended range",
            extra={"threshold": options.similarity_threshold},
        )
    pipeline = LocalSimilarityPipeline(vectorizer=vectorizer, options=options)
    groups = pipeline.run(records, filters)
    logger.info(
        "clustered records",
        extra={"records": len(records), "clusters": len(groups), "strategy": options.strategy},
    )
    return [group.to_dict() for group in groups]


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="concurso-similarity", description="Convocatoria similarity CLI")
    subparsers = parser.add_subparsers(dest="command")

    output_parent = argparse.ArgumentParser(add_help=False)
    output_parent.add_argument("--output", type=Path, default=None, help="Write JSON here instead of stdout")

    cluster_parser = subparsers.add_parser(
        "cluster", parents=[output_parent], help="Group stored records without predefined categories"
    )
    cluster_parser.add_argument("--input", type=Path, required=True)
    cluster_parser.add_argument("--threshold", type=float, default=settings.SIMILARITY_THRESHOLD)
    cluster_parser.add_argument("--strategy", choices=STRATEGIES, default=settings.CLUSTER_STRATEGY)
    cluster_parser.add_argument("--max-iterations", type=int, default=settings.MAX_ITERATIONS)
    cluster_parser.add_argument("--text-source", choices=TEXT_SOURCES, default=settings.TEXT_SOURCE)
    cluster_parser.add_argument(
        "--filter",
        action="append",
        type=_parse_filter,
        metavar="KEY=true|false",
        help=f"Require a detected block value; keys: {', '.join(flag.value for flag in BlockFlag)}",
    )

    rank_parser = subparsers.add_parser(
        "rank", parents=[output_parent], help="Rank stored records against a new document"
    )
    rank_parser.add_argument("--input", type=Path, required=True)
    rank_parser.add_argument("--document", type=Path, required=True)
    rank_parser.add_argument("--with-differences", action="store_true")

    diff_parser = subparsers.add_parser(
        "diff", parents=[output_parent], help="List tracked fields that changed between two documents"
    )
    diff_parser.add_argument("--new", type=Path, required=True)
    diff_parser.add_argument("--old", type=Path, required=True)

    benchmark_parser = subparsers.add_parser(
        "benchmark", parents=[output_parent], help="Time clustering across thresholds"
    )
    benchmark_parser.add_argument("--input", type=Path, default=None)
    benchmark_parser.add_argument("--size", type=int, default=500)
    benchmark_parser.add_argument("--seed", type=int, default=42)
    benchmark_parser.add_argument("--thresholds", type=float, nargs="+", default=list(DEFAULT_THRESHOLDS))
    benchmark_parser.add_argument("--strategy", choices=STRATEGIES, default=None)

    dataset_parser = subparsers.add_parser(
        "generate-dataset", parents=[output_parent], help="Write synthetic records for testing"
    )
    dataset_parser.add_argument("--size", type=int, default=200)
    dataset_parser.add_argument("--seed", type=int, default=42)
    dataset_parser.add_argument("--duplicate-rate", type=float, default=0.15)

    return parser


def _parse_filter(raw: str) -> tuple[BlockFlag, bool]:
    key, sep, value = raw.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"expected KEY=true|false, got {raw!r}")
    try:
        flag = BlockFlag(key.strip())
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"unknown filter key {key!r}") from exc
    lowered = value.strip().lower()
    if lowered not in {"true", "false"}:
        raise argparse.ArgumentTypeError(f"filter value must be true or false, got {value!r}")
    return flag, lowered == "true"


def _read_records(path: Path) -> list[ConcursoRecord]:
    text = path.read_text(encoding="utf-8")
    stripped = text.lstrip()
    if stripped.startswith("["):
        raw_records = json.loads(text)
    else:
        raw_records = [json.loads(line) for line in text.splitlines() if line.strip()]
    records: list[ConcursoRecord] = []
    for raw in raw_records:
        if not isinstance(raw, dict):
            raise InvalidRecordError(f"{path}: every record must be a JSON object")
        records.append(ConcursoRecord.from_mapping(raw))
    return records


def _read_document(path: Path) -> dict[str, Any]:
    document = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(document, dict):
        raise InvalidRecordError(f"{path}: document must be a JSON object")
    return document


def _emit(payload: Any, output: Path | None) -> None:
    if output is None:
        json.dump(payload, sys.stdout, indent=2, ensure_ascii=False)
        sys.stdout.write("\n")
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    with output.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2, ensure_ascii=False)


if __name__ == "__main__":
    main()
