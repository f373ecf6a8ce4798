from concurso_similarity.benchmark import run_similarity_benchmarks, run_strategy_matrix
from concurso_similarity.datasets import ReferenceDatasetGenerator


def test_similarity_benchmarks_follow_threshold_order() -> None:
    records = ReferenceDatasetGenerator(seed=3).generate(size=40)

    results = run_similarity_benchmarks(records, [0.5, 0.9])

    assert [result.threshold for result in results] == [0.5, 0.9]
    assert all(result.strategy == "threshold" for result in results)
    assert all(result.duration_ms >= 0 for result in results)


def test_strategy_matrix_covers_every_combination() -> None:
    records = ReferenceDatasetGenerator(seed=3).generate(size=30)

    results = run_strategy_matrix(records)

    assert [(result.threshold, result.strategy) for result in results] == [
        (0.4, "threshold"),
        (0.4, "kmeans"),
        (0.5, "threshold"),
        (0.5, "kmeans"),
        (0.6, "threshold"),
        (0.6, "kmeans"),
        (0.7, "threshold"),
        (0.7, "kmeans"),
    ]
    assert all(result.clusters >= 1 for result in results)
    assert set(results[0].to_dict()) == {"strategy", "threshold", "durationMs", "clusters"}
