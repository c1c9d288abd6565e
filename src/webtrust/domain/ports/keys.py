"""Port for deterministic record key derivation."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from webtrust.domain.model import Content


@runtime_checkable
class RecordKeys(Protocol):
    """Pure functions mapping content and labels to stable store ids.

    Equal inputs must always yield equal keys: this is what keeps one observable
    and one indicator per content value without any locking.
    """

    def observable_key(self, content: Content) -> str: ...

    def pattern_for(self, content: Content) -> str: ...

    def indicator_key(self, pattern: str) -> str: ...

    def label_key(self, value: str) -> str: ...

    @property
    def public_marking(self) -> str:
        """Id of the most permissive marking applied to new observables."""
        ...
