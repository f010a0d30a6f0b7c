from typing import List, Optional

import pytest
from faker import Faker

fake = Faker()


class MockResource:
    def __init__(self, name: str, journal: List[str], error: Optional[BaseException] = None):
        self.name = name
        self.journal = journal
        self.error = error
        self.close_count = 0

    @property
    def closed(self) -> bool:
        return self.close_count > 0

    def close(self):
        self.close_count += 1
        self.journal.append(self.name)
        if self.error is not None:
            raise self.error

    def __repr__(self):
        return f"MockResource({self.name!r})"


class ReleaseFailure(Exception):
    pass


@pytest.fixture
def journal() -> List[str]:
    return []


@pytest.fixture
def make_resource(journal):
    def factory(name: str = None, fail: bool = False) -> MockResource:
        name = name or fake.unique.user_name()
        error = ReleaseFailure(f"{name}: {fake.sentence()}") if fail else None
        return MockResource(name, journal, error)

    return factory
