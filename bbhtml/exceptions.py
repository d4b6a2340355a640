"""
# BBHTML: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception classes.

Translation errors are collected rather than raised,
so the classes deriving from `BBCodeException` compare equal by class and value.
"""


class BBCodeException(Exception):
    _DESCRIPTION = 'error'

    _value: str

    def __init__(self, value: str):
        super().__init__(value)
        self._value = value

    @property
    def value(self) -> str:
        return self._value

    def __str__(self) -> str:
        return f"bbcode: {self._DESCRIPTION} '{self._value}'"

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._value!r})'

    def __eq__(self, other) -> bool:
        if type(self) is not type(other):
            return NotImplemented

        return self._value == other.value

    def __hash__(self) -> int:
        return hash((type(self), self._value))


class UnknownTagException(BBCodeException):
    _DESCRIPTION = 'unknown tag'


class InvalidUrlException(BBCodeException):
    _DESCRIPTION = 'invalid url'


class IncompleteTagException(BBCodeException):
    _DESCRIPTION = 'incomplete tag'


class SanitisationException(BBCodeException):
    _DESCRIPTION = 'cannot sanitise html'


class CheckpointException(Exception):
    pass
