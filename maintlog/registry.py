"""ModelRegistry - one MaintenanceIndex per vehicle model."""

from typing import Dict, List, Optional

from .index import MaintenanceIndex
from .logging_setup import get_logger
from .outcome import InsertOutcome

logger = get_logger("maintlog.registry")


class ModelRegistry:
    """Maps vehicle model names to their maintenance indexes."""

    def __init__(self):
        self._indexes: Dict[str, MaintenanceIndex] = {}

    def __contains__(self, model: str) -> bool:
        return model in self._indexes

    def __len__(self) -> int:
        return len(self._indexes)

    def models(self) -> List[str]:
        """Model names in sorted order."""
        return sorted(self._indexes)

    def get(self, model: str) -> Optional[MaintenanceIndex]:
        """Find the index for a model without creating one."""
        return self._indexes.get(model)

    def index_for(self, model: str) -> MaintenanceIndex:
        """Get the index for a model, creating an empty one on first use."""
        index = self._indexes.get(model)
        if index is None:
            logger.debug("Creating maintenance index for model %r", model)
            index = MaintenanceIndex()
            self._indexes[model] = index
        return index

    def add_record(
        self, model: str, date: str, description: str, cost: float
    ) -> InsertOutcome:
        """Insert a record into a model's index, creating the index if needed."""
        return self.index_for(model).insert(date, description, cost)
