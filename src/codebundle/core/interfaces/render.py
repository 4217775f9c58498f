from __future__ import annotations

from typing import Protocol, runtime_checkable

from codebundle.core.models import Bundle


@runtime_checkable
class RendererProtocol(Protocol):
    def render(self, bundle: Bundle) -> str:
        """Assemble the final bundle text."""
        ...
