"""Test utilities for argguard.

Provides an assertion strategy that records outcomes instead of raising,
for asserting on failure reasons without pytest.raises boilerplate.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class RecordingAssertion:
    """Assertion strategy that records every (ok, reason) it receives.

    >>> from argguard import have
    >>> from argguard.testing import RecordingAssertion
    >>> recorder = RecordingAssertion()
    >>> _ = have.with_assertion(recorder)([123], {"one": "string"})
    >>> recorder.failures
    ['`one` is not string']
    """

    calls: list[tuple[bool, str | None]] = field(default_factory=list)

    def __call__(self, ok: bool, reason: str | None, /) -> None:
        self.calls.append((ok, reason))

    @property
    def failures(self) -> list[str | None]:
        """Reasons of the failed calls, in order."""
        return [reason for ok, reason in self.calls if not ok]

    @property
    def last(self) -> tuple[bool, str | None] | None:
        return self.calls[-1] if self.calls else None

    def clear(self) -> None:
        self.calls.clear()
