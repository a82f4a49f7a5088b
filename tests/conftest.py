import pytest

from app.shell import MountainFlow
from app.store import PreferenceStore
from app.suggestions import SuggestionEngine


class ScriptedChoice:
    """Random source stand-in that picks the listed indexes in order."""

    def __init__(self, *indexes: int) -> None:
        self.indexes = list(indexes)
        self.seen: list[tuple[str, ...]] = []

    def choice(self, seq):
        self.seen.append(tuple(seq))
        return seq[self.indexes.pop(0)]


@pytest.fixture
def store(tmp_path):
    return PreferenceStore(tmp_path / "data")


@pytest.fixture
def shell(store):
    return MountainFlow(store)


@pytest.fixture
def scripted():
    def make(*indexes: int) -> ScriptedChoice:
        return ScriptedChoice(*indexes)

    return make


@pytest.fixture
def scripted_shell(store, scripted):
    def make(*indexes: int) -> MountainFlow:
        return MountainFlow(store, engine=SuggestionEngine(rng=scripted(*indexes)))

    return make
