"""
Concurrency tests for fuzzycompare.

All comparisons are pure functions, so concurrent calls on independent
inputs must agree with sequential ones.
"""

import concurrent.futures

import fuzzycompare as fc
from fuzzycompare import Mode

PAIRS = [
    ("hello", "hallo"),
    ("world", "word"),
    ("ca", "ac"),
    ("The Quick Fox", "quick fox the"),
    ("FooBar_baz.Qux", "foo bar baz"),
]


class TestParallelComparisons:
    """Test comparisons can run in parallel."""

    def test_compare_parallel_all_modes(self):
        def worker():
            return [fc.compare(s1, s2, mode) for s1, s2 in PAIRS for mode in Mode]

        with concurrent.futures.ThreadPoolExecutor(max_workers=4) as executor:
            futures = [executor.submit(worker) for _ in range(8)]
            all_results = [f.result() for f in futures]

        # All threads should get same results
        expected = worker()
        for result in all_results:
            assert result == expected

    def test_tokenize_parallel(self):
        texts = [f"Report_{i}-Final.DOCX" for i in range(100)]

        def worker(text):
            return fc.tokenize(text)

        with concurrent.futures.ThreadPoolExecutor(max_workers=4) as executor:
            results = list(executor.map(worker, texts))

        assert results == [fc.tokenize(t) for t in texts]

    def test_batch_parallel(self):
        choices = [f"item_{i}" for i in range(50)]

        def worker(thread_id):
            found = fc.batch.best_matches(choices, f"item_{thread_id}", limit=1)
            return found[0].text

        with concurrent.futures.ThreadPoolExecutor(max_workers=4) as executor:
            results = list(executor.map(worker, range(10)))

        assert results == [f"item_{i}" for i in range(10)]
