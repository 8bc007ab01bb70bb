import datetime
from typing import Iterator, Sequence

import randomname

Meetup = tuple[int, int]
Day = list[Meetup]


class Schedule:
    """Repeating cycle of days

    Each day is a list of meetups, pairs of participant indices. A valid day
    never contains two meetups sharing a participant. The order of days is
    significant, the last day is followed by the first one again.

    Parameters
    ----------
    names: Sequence[str] | None
        Display names of the participants, only used for rendering
    days: list[Day] | None
        Initial days
    """

    def __init__(self, names: Sequence[str] | None = None, days: list[Day] | None = None):
        self.names = list(names) if names is not None else None
        self._days: list[Day] = list(days) if days is not None else []
        self.name = randomname.get_name()
        self.created_at = datetime.datetime.now(datetime.timezone.utc)

    @property
    def days(self) -> list[Day]:
        return self._days

    def add(self, day: Day):
        self._days.append(day)

    def insert(self, index: int, day: Day):
        self._days.insert(index, day)

    def __len__(self) -> int:
        return len(self._days)

    def __iter__(self) -> Iterator[Day]:
        return iter(self._days)

    def __getitem__(self, index: int) -> Day:
        return self._days[index]

    def meetups(self) -> set[Meetup]:
        """All distinct meetups occurring at least once per cycle"""
        return {meetup for day in self._days for meetup in day}

    def participant(self, index: int) -> str:
        if self.names is not None:
            return self.names[index]
        return str(index)

    def named_days(self) -> list[list[tuple[str, str]]]:
        """Days with meetups resolved to display names, or indices if no names were given"""
        return [
            [(self.participant(first), self.participant(second)) for first, second in day]
            for day in self._days
        ]

    def __repr__(self) -> str:
        str = f"============= Schedule: {self.name} =============\n"
        str += f"Created at: {self.created_at:%Y-%m-%d %H:%M:%S} UTC\n"
        for number, day in enumerate(self.named_days(), start=1):
            str += f"DAY #{number}:\n"
            for first, second in day:
                str += f"\t{first} and {second} meet\n"
        str += "================================================\n"
        return str
