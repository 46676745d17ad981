import math
import threading
from concurrent.futures import ThreadPoolExecutor

from tfidf_corpus.calculator import TfIdfCalculator
from tfidf_corpus.corpus import CorpusIndex


def test_concurrent_adds_are_all_counted():
    calculator = TfIdfCalculator()
    workers, per_worker = 8, 200

    def add_many(worker):
        for i in range(per_worker):
            calculator.add_document_to_corpus("shared worker%d item%d" % (worker, i))

    with ThreadPoolExecutor(max_workers=workers) as pool:
        list(pool.map(add_many, range(workers)))

    assert calculator.document_count == workers * per_worker
    assert calculator.frequency_of("shared") == workers * per_worker
    assert calculator.frequency_of("worker3") == per_worker


def test_snapshots_are_never_torn():
    # Every document contains "shared", so df(shared) must equal N in any
    # consistent view of the corpus.
    corpus = CorpusIndex()
    stop = threading.Event()
    torn = []

    def writer():
        for i in range(2000):
            corpus.add_document("shared unique%d" % i)
        stop.set()

    def reader():
        while not stop.is_set():
            snapshot = corpus.snapshot(["shared"])
            if snapshot.frequency_of("shared") != snapshot.document_count:
                torn.append(snapshot)

    threads = [threading.Thread(target=writer)] + [threading.Thread(target=reader) for _ in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert not torn, "Readers observed N and df out of step"


def test_concurrent_scores_stay_finite():
    calculator = TfIdfCalculator(["seed document"])
    results = []
    lock = threading.Lock()

    def add_and_score(i):
        calculator.add_document_to_corpus("document number %d" % i)
        score = calculator.calculate_document_tfidf("document number %d extra" % i)
        with lock:
            results.append(score)

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(add_and_score, range(500)))

    assert len(results) == 500
    assert all(math.isfinite(r) and r > 0.0 for r in results)
    assert calculator.document_count == 501


def test_add_is_visible_to_other_threads_after_return():
    calculator = TfIdfCalculator()
    added = threading.Event()
    seen = []

    def add():
        calculator.add_document_to_corpus("visible")
        added.set()

    def check():
        added.wait(timeout=5)
        seen.append(calculator.frequency_of("visible"))

    t1, t2 = threading.Thread(target=add), threading.Thread(target=check)
    t2.start()
    t1.start()
    t1.join()
    t2.join()
    assert seen == [1]
