"""
Concurrency safety tests.

The engines hold no mutable state, so parallel callers sharing one result
set must all observe the same classification.
"""

from concurrent.futures import ThreadPoolExecutor

from ecotrip.domain.comparison import ComparisonEngine, classify
from ecotrip.domain.distance import haversine_km
from ecotrip.domain.reference_data import TRANSPORT_MODES


class TestParallelClassification:
    def test_shared_results_give_identical_answers(self, scenario_results):
        snapshot = list(scenario_results)
        with ThreadPoolExecutor(max_workers=8) as pool:
            outcomes = list(pool.map(lambda _: classify("car", scenario_results), range(64)))
        assert all(o == outcomes[0] for o in outcomes)
        assert scenario_results == snapshot

    def test_engine_shared_across_threads(self):
        engine = ComparisonEngine(TRANSPORT_MODES)
        distances = [haversine_km(0.0, 0.0, lat, 0.0) for lat in range(1, 41)]

        def run(distance):
            _, c = engine.compare(distance, "train")
            return c

        with ThreadPoolExecutor(max_workers=8) as pool:
            parallel = list(pool.map(run, distances))
        assert parallel == [run(d) for d in distances]
