# Node id generation (explicit generator object, no module-level counter)

import itertools


class IdGenerator:
    """
    Hands out unique node ids: "n100", "n101", ...

    One generator belongs to one editing session; pass it into every call
    that creates nodes (clone_model, load_preset, new_spring, ...). Two
    generators never share state.
    """

    def __init__(self, prefix: str = "n", start: int = 100):
        self.prefix = prefix
        self._counter = itertools.count(start)

    def __call__(self) -> str:
        return f"{self.prefix}{next(self._counter)}"

    def reserve(self, ids) -> None:
        """Advance past numeric suffixes already in use (e.g. after loading a saved tree)."""
        highest = None
        for node_id in ids:
            suffix = str(node_id)[len(self.prefix):] if str(node_id).startswith(self.prefix) else ""
            if suffix.isdigit():
                highest = int(suffix) if highest is None else max(highest, int(suffix))
        if highest is None:
            return
        nxt = next(self._counter)
        self._counter = itertools.count(max(nxt, highest + 1))
