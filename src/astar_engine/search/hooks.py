# search/hooks.py
from typing import Protocol


class SearchHooks(Protocol):
    def run_start(self, *, start, finish): ...
    def run_end(self, *, state, expanded, weight, wall_ms): ...
    def pop(self, node, *, open_size, closed_size): ...
    def relax(self, current, successor, *, g, improved): ...
    def skip(self, current, successor, *, reason: str): ...


class NoopHooks:
    def run_start(self, **_):
        pass

    def run_end(self, **_):
        pass

    def pop(self, *_, **__):
        pass

    def relax(self, *_, **__):
        pass

    def skip(self, *_, **__):
        pass
