import logging
from contextlib import contextmanager
from time import perf_counter


class StepTimer:
    def __init__(self):
        self.durations = {}   # {label: seconds}

    @contextmanager
    def timeit(self, label: str):
        start = perf_counter()
        try:
            yield
        finally:
            elapsed = perf_counter() - start
            self.durations[label] = self.durations.get(label, 0.0) + elapsed

    def log_summary(self, title: str = "Runtime summary"):
        width = max((len(k) for k in self.durations), default=10)
        lines = [f"{k.ljust(width)} : {v:8.3f}s" for k, v in self.durations.items()]
        logging.info("%s\n%s", title, "\n".join(lines))
