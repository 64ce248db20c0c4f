"""
MockMaster Fake Data

Thin wrapper around the Faker library with a small, stable API for test
data. Seeding an instance makes its output reproducible.

Example:
    fake = FakeData(seed=42)
    fake.name()           # 'Allison Hill'
    fake.number(max=10)   # 7
    fake.date.past()      # datetime within the last year
"""

from datetime import datetime
from typing import Optional

from faker import Faker


class _DateFakes:
    """Date generators (fake.date.*)."""

    def __init__(self, faker: Faker):
        self._faker = faker

    def past(self) -> datetime:
        """A moment within the last year."""
        return self._faker.date_time_between(start_date='-1y', end_date='now')

    def future(self) -> datetime:
        """A moment within the next year."""
        return self._faker.date_time_between(start_date='now', end_date='+1y')

    def between(self, start: datetime, end: datetime) -> datetime:
        return self._faker.date_time_between(start_date=start, end_date=end)

    def recent(self) -> datetime:
        """A moment within the last day."""
        return self._faker.date_time_between(start_date='-1d', end_date='now')


class _InternetFakes:
    """Internet generators (fake.internet.*)."""

    def __init__(self, faker: Faker):
        self._faker = faker

    def url(self) -> str:
        return self._faker.url()

    def username(self) -> str:
        return self._faker.user_name()


class FakeData:
    """
    Functional facade over a Faker instance.

    Each FakeData owns its own Faker, so seeding one instance does not
    affect another.
    """

    def __init__(self, locale: str = 'en_US', seed: Optional[int] = None):
        """
        Initialize fake data generator.

        Args:
            locale: Faker locale
            seed: Optional seed for reproducible output
        """
        self._faker = Faker(locale)
        self.date = _DateFakes(self._faker)
        self.internet = _InternetFakes(self._faker)

        if seed is not None:
            self.set_seed(seed)

    def set_seed(self, seed: int) -> None:
        """Seed this instance for reproducible output."""
        self._faker.seed_instance(seed)

    def reset_seed(self) -> None:
        """Return to unseeded (random) output."""
        self._faker.seed_instance(None)

    def name(self) -> str:
        return self._faker.name()

    def first_name(self) -> str:
        return self._faker.first_name()

    def last_name(self) -> str:
        return self._faker.last_name()

    def email(self) -> str:
        return self._faker.email()

    def uuid(self) -> str:
        return str(self._faker.uuid4())

    def number(self, min: int = 0, max: int = 100) -> int:
        """Integer in [min, max]."""
        return self._faker.random_int(min=min, max=max)

    def floating(self, min: float = 0, max: float = 100) -> float:
        """Float in [min, max]."""
        return round(self._faker.random.uniform(min, max), 2)

    def boolean(self) -> bool:
        return self._faker.pybool()

    def word(self) -> str:
        return self._faker.word()

    def iso_datetime(self) -> str:
        return self._faker.iso8601()

    def choice(self, options):
        """Pick one element of a non-empty sequence."""
        return self._faker.random_element(elements=list(options))

    def chance(self, probability: float) -> bool:
        """True with the given probability (0.0 to 1.0)."""
        return self._faker.random.random() < probability


# Shared default instance
fake = FakeData()


def set_seed(seed: int) -> None:
    """Seed the shared `fake` instance."""
    fake.set_seed(seed)


def reset_seed() -> None:
    """Unseed the shared `fake` instance."""
    fake.reset_seed()
