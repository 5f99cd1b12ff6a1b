# Return values of the distribution queries

# IMPORT MODULES
import enum
import math
from typing import Optional


class ErrorKind(enum.Enum):
    """
    Failure kinds a query can report. The value of each member is the numeric code
    that older callers expect in place of a computed value.
    """
    INVALID_PARAMETER = -2
    NON_CONVERGENCE = -9999


class DistributionError(ValueError):
    """
    Raised by Result.unwrap() when the caller asks for the value of a failed query.

    :param kind: The failure kind.
    :type kind: ErrorKind
    """
    def __init__(self, kind:ErrorKind):
        super().__init__(f'{kind.name.lower()} (code {kind.value})')
        self.kind = kind


class Result(object):
    """
    Outcome of a single query: a computed value or a failure kind, never both.
    Use Result.success() and Result.failure() to build one.
    """
    __slots__ = ('_value', '_error')

    def __init__(self, value:float = math.nan, error:Optional[ErrorKind] = None):
        self._value = math.nan if error is not None else value
        self._error = error

    @classmethod
    def success(cls, value:float):
        return cls(value=value)

    @classmethod
    def failure(cls, kind:ErrorKind):
        return cls(error=kind)

    @property
    def ok(self) -> bool:
        return self._error is None

    @property
    def value(self) -> float:
        """
        The computed value, nan for a failure.
        """
        return self._value

    @property
    def error(self) -> Optional[ErrorKind]:
        return self._error

    @property
    def sentinel(self) -> float:
        """
        The value on success, the numeric failure code otherwise (-2 or -9999).
        """
        if self.ok:
            return self._value
        return float(self._error.value)

    def value_or(self, default:float):
        """
        Return the computed value, or default if the query failed.

        :param default: Fallback value.
        :type default: float

        :return: value or default
        :rtype: float
        """
        return self._value if self.ok else default

    def unwrap(self):
        """
        Return the computed value.

        :raises DistributionError: If the query failed.

        :return: The computed value.
        :rtype: float
        """
        if not self.ok:
            raise DistributionError(self._error)
        return self._value

    def __eq__(self, other):
        if not isinstance(other, Result):
            return NotImplemented
        if self.ok != other.ok:
            return False
        if not self.ok:
            return self._error is other._error
        return self._value == other._value or (math.isnan(self._value) and math.isnan(other._value))

    def __hash__(self):
        return hash((self._error, self._value if self.ok and not math.isnan(self._value) else None))

    def __repr__(self):
        if self.ok:
            return f'Result.success({self._value!r})'
        return f'Result.failure({self._error})'
