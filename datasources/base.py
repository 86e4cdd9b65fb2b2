"""
Base class for daily count sources.

Copyright (c) 2026 Stefan Kumarasinghe

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at http://www.apache.org/licenses/LICENSE-2.0
"""

from abc import ABC, abstractmethod
from typing import List

from engine.models import DatedCount


class CountSource(ABC):
    def __init__(self, name: str) -> None:
        self.name = name

    @abstractmethod
    async def load(self, refresh: bool = False) -> List[DatedCount]:
        """Return the daily counts ordered by date."""

    @property
    @abstractmethod
    def is_cached(self) -> bool: ...
