"""Backend adapter protocol definition."""

from __future__ import annotations

from typing import Protocol

from ..errors import ResumeMatchError
from .types import GenerationConfig, ProviderInfo


class BackendAdapter(Protocol):
    """Capability set every language-model backend provides.

    ``submit`` returns the raw text payload or raises the SDK's own
    exception; ``classify_failure`` turns such an exception into the
    shared error taxonomy.
    """

    info: ProviderInfo
    model: str

    async def submit(
        self,
        system_prompt: str,
        user_prompt: str,
        config: GenerationConfig,
    ) -> str: ...

    def classify_failure(self, error: BaseException) -> ResumeMatchError: ...
