from datetime import datetime as dt
from datetime import timezone


# Clock readings handed to the ledger by its environment. Always treated as UTC, and reduced to whole UNIX seconds
# when they are mixed into a seed.
class Datetime:
    def __init__(self, year, month, day, hour=0, minute=0, second=0, microsecond=0):
        self._datetime = dt(year=year, month=month, day=day, hour=hour,
                            minute=minute, second=second, microsecond=microsecond)

        self.year = self._datetime.year
        self.month = self._datetime.month
        self.day = self._datetime.day
        self.hour = self._datetime.hour
        self.minute = self._datetime.minute
        self.second = self._datetime.second
        self.microsecond = self._datetime.microsecond

    def __eq__(self, other):
        if type(other) != Datetime:
            return NotImplemented
        return self._datetime == other._datetime

    def __hash__(self):
        return hash(self._datetime)

    def __str__(self):
        return str(self._datetime)

    def __repr__(self):
        return self.__str__()

    @property
    def timestamp(self):
        return int(self._datetime.replace(tzinfo=timezone.utc).timestamp())

    @classmethod
    def _from_datetime(cls, d: dt):
        return cls(year=d.year,
                   month=d.month,
                   day=d.day,
                   hour=d.hour,
                   minute=d.minute,
                   second=d.second,
                   microsecond=d.microsecond)

    @classmethod
    def utcnow(cls):
        return cls._from_datetime(dt.now(tz=timezone.utc))
